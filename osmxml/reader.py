# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

import bz2
import gzip
import io
import xml.sax
import xml.sax.handler
import xml.sax.xmlreader
import zlib
from collections import deque
from logging import getLogger
from sys import intern
from typing import IO, Deque, Literal, Optional, Union

from .decoder import decode
from .err import SourceError
from .events import Comment, EndDocument, EndElement, Event, StartDocument, StartElement, Text
from .model import Document

logger = getLogger("osmxml.reader")

FILE_FORMAT_T = Optional[Literal["xml", "gz", "bz2"]]
"""Type of the ``format`` argument of :py:func:`read_document`.

Useful when passing this argument forward from custom functions.
"""

DEFAULT_FILE_FORMAT = None
"""Default value for the ``format`` argument of :py:func:`read_document`.

Useful when passing this argument forward from custom functions.
"""

DEFAULT_CHUNK_SIZE = io.DEFAULT_BUFFER_SIZE
"""Default value for ``chunk_size`` argument of :py:func:`read_document`,
`io.DEFAULT_BUFFER_SIZE <https://docs.python.org/3/library/io.html#io.DEFAULT_BUFFER_SIZE>`_.

Useful when passing this argument forward from custom functions.
"""


class _EventCollector(xml.sax.ContentHandler):
    """Collects SAX callbacks as :py:obj:`Event` objects. Also acts as the
    lexical handler, in order to receive comments."""

    def __init__(self) -> None:
        super().__init__()
        self.events: Deque[Event] = deque()

    def startDocument(self) -> None:
        self.events.append(StartDocument())

    def endDocument(self) -> None:
        self.events.append(EndDocument())

    def startElement(self, name: str, attrs: "xml.sax.xmlreader.AttributesImpl") -> None:
        self.events.append(StartElement(intern(name), dict(attrs.items())))

    def endElement(self, name: str) -> None:
        self.events.append(EndElement(intern(name)))

    def characters(self, content: str) -> None:
        self.events.append(Text(content))

    def ignorableWhitespace(self, whitespace: str) -> None:
        self.events.append(Text(whitespace))

    def comment(self, content: str) -> None:
        self.events.append(Comment(content))

    def startDTD(self, name: str, public_id: Optional[str], system_id: Optional[str]) -> None:
        pass

    def endDTD(self) -> None:
        pass

    def startCDATA(self) -> None:
        pass

    def endCDATA(self) -> None:
        pass


class SAXEventSource:
    """SAXEventSource implements :py:class:`osmxml.events.EventSource` over an XML stream,
    using the incremental parser from `xml.sax <https://docs.python.org/3/library/xml.sax.html>`_.

    Data is read from ``buf`` in chunks of ``chunk_size``, only when all events
    from previous chunks have been handed out. Malformed XML and read errors
    are reported as :py:exc:`osmxml.err.SourceError`.

    The caller remains responsible for closing ``buf``.
    """

    buf: Union[IO[bytes], IO[str]]
    chunk_size: int

    def __init__(self, buf: Union[IO[bytes], IO[str]], chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        parser = xml.sax.make_parser()
        if not isinstance(parser, xml.sax.xmlreader.IncrementalParser):
            raise RuntimeError(
                "expected xml.sax.make_parser() to return an IncrementalParser, but got "
                + type(parser).__qualname__
            )

        self.buf = buf
        self.chunk_size = chunk_size
        self._parser = parser
        self._handler = _EventCollector()
        self._parser.setContentHandler(self._handler)
        self._parser.setProperty(xml.sax.handler.property_lexical_handler, self._handler)
        self._exhausted = False

    def next_event(self) -> Event:
        while not self._handler.events:
            if self._exhausted:
                return EndDocument()
            self._feed_next_chunk()
        return self._handler.events.popleft()

    def _feed_next_chunk(self) -> None:
        try:
            data = self.buf.read(self.chunk_size)
            self._parser.feed(data)  # type: ignore
            if not data:
                self._exhausted = True
                self._parser.close()  # type: ignore
        except xml.sax.SAXException as e:
            self._exhausted = True
            raise SourceError(f"malformed XML: {e}") from e
        except (OSError, EOFError, UnicodeDecodeError, zlib.error) as e:
            self._exhausted = True
            raise SourceError(f"failed to read XML: {e}") from e


def _detect_format(buf: IO[bytes], format: FILE_FORMAT_T) -> Literal["xml", "gz", "bz2"]:
    if format is not None:
        return format

    name = getattr(buf, "name", None)
    if isinstance(name, str):
        if name.endswith(".gz"):
            return "gz"
        elif name.endswith(".bz2"):
            return "bz2"
    return "xml"


def read_document(
    buf: IO[bytes],
    format: FILE_FORMAT_T = DEFAULT_FILE_FORMAT,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Document:
    """read_document decodes a :py:class:`osmxml.model.Document` from a possibly-compressed
    `OSM XML <https://wiki.openstreetmap.org/wiki/OSM_XML>`_ file.

    If ``format`` is not provided, this function will check if ``buf.name`` ends with
    ``.gz`` or ``.bz2`` to determine whether the provided buffer needs to be decompressed.
    If the file format cannot be determined, assumes that data will be in uncompressed XML format.

    The ``chunk_size`` argument controls the size of XML data chunks read from the XML stream,
    after decompression. Read calls to ``buf`` of ``chunk_size`` are only guaranteed for
    non-compressed XML files. Size of the read calls for gzip or bz2 compressed XML files
    depends on the inner workings of the ``gz`` and ``bz2`` modules.

    Raises :py:exc:`osmxml.err.DecodeError` if the document can't be decoded.
    """
    detected = _detect_format(buf, format)
    logger.debug("Reading OSM data in %r format", detected)

    if detected == "gz":
        with gzip.open(buf, mode="rb") as decompressed_buffer:
            return decode(SAXEventSource(decompressed_buffer, chunk_size))  # type: ignore
    elif detected == "bz2":
        with bz2.open(buf, mode="rb") as decompressed_buffer:
            return decode(SAXEventSource(decompressed_buffer, chunk_size))
    else:
        return decode(SAXEventSource(buf, chunk_size))


def read_document_from_string(data: Union[str, bytes]) -> Document:
    """read_document_from_string decodes a :py:class:`osmxml.model.Document`
    from an uncompressed, in-memory OSM XML document."""
    buf = io.StringIO(data) if isinstance(data, str) else io.BytesIO(data)
    return decode(SAXEventSource(buf))
