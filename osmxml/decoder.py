# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

from logging import getLogger
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, TypeVar, cast

from .attributes import optional_choice, require_bool, require_float, require_int, require_str
from .err import (
    DuplicateElementError,
    DuplicateTagError,
    MismatchedCloseError,
    PrematureEndError,
    UnexpectedChildError,
)
from .events import Attributes, EndDocument, EndElement, EventSource, StartElement
from .model import ELEMENT_KINDS, Document, ElementKind, Node, Relation, RelationMember, Tags, Way

logger = getLogger("osmxml.decoder")

Handler = Callable[[Attributes], None]
"""Handler is called with attributes of an opened child element, and must consume
all events up to and including the end of that element."""

_NO_CHILDREN: Mapping[str, Handler] = MappingProxyType({})

_ElementT = TypeVar("_ElementT", Node, Way, Relation)


class Decoder:
    """Decoder reconstructs OpenStreetMap elements from a stream of lexical XML events.

    At the top level, ``node``, ``way`` and ``relation`` elements are decoded, and any
    other elements (like the ``osm`` root or ``bounds``) are skipped - but their children
    are still inspected. Once inside a recognized element, the decoder is strict:
    unknown children, mismatched end tags, missing or malformed attributes
    and duplicates all abort decoding with a :py:exc:`osmxml.err.DecodeError`.

    An element is only added to the result after all of its children have been
    successfully consumed.

    A single Decoder performs a single pass over its source; use :py:func:`decode`
    for the common case.
    """

    source: EventSource

    def __init__(self, source: EventSource) -> None:
        self.source = source
        self._nodes: Dict[int, Node] = {}
        self._ways: Dict[int, Way] = {}
        self._relations: Dict[int, Relation] = {}
        self._used = False

    def decode(self) -> Document:
        """Consumes all events from the source and returns the decoded :py:class:`Document`."""
        if self._used:
            raise RuntimeError("Decoder.decode() may only be called once")
        self._used = True

        top_level: Mapping[str, Handler] = {
            "node": self._decode_node,
            "way": self._decode_way,
            "relation": self._decode_relation,
        }

        while True:
            event = self.source.next_event()
            if isinstance(event, StartElement):
                handler = top_level.get(event.name)
                if handler is None:
                    logger.debug("Skipping <%s> element", event.name)
                else:
                    handler(event.attrs)
            elif isinstance(event, EndDocument):
                break

        logger.debug(
            "Decoded %d nodes, %d ways and %d relations",
            len(self._nodes),
            len(self._ways),
            len(self._relations),
        )
        return Document.from_dicts(self._nodes, self._ways, self._relations)

    def _scan(self, scope: str, children: Mapping[str, Handler]) -> None:
        """Consumes events up to and including the end of the ``scope`` element,
        passing every opened child to its handler from ``children``."""
        while True:
            event = self.source.next_event()

            if isinstance(event, StartElement):
                handler = children.get(event.name)
                if handler is None:
                    raise UnexpectedChildError(event.name, scope)
                handler(event.attrs)

            elif isinstance(event, EndElement):
                if event.name != scope:
                    raise MismatchedCloseError(expected=scope, actual=event.name)
                return

            elif isinstance(event, EndDocument):
                raise PrematureEndError(scope)

    def _decode_node(self, attrs: Attributes) -> None:
        id = require_int(attrs, "id", "node")
        lat = require_float(attrs, "lat", "node")
        lon = require_float(attrs, "lon", "node")
        visible = require_bool(attrs, "visible", "node")
        tags: Tags = {}

        self._scan("node", {"tag": lambda a: self._decode_tag(a, tags, "node")})
        self._insert(self._nodes, Node(id, lat, lon, visible, tags))

    def _decode_way(self, attrs: Attributes) -> None:
        id = require_int(attrs, "id", "way")
        nodes: List[int] = []
        tags: Tags = {}

        self._scan(
            "way",
            {
                "nd": lambda a: nodes.append(self._decode_nd(a)),
                "tag": lambda a: self._decode_tag(a, tags, "way"),
            },
        )
        self._insert(self._ways, Way(id, nodes, tags))

    def _decode_relation(self, attrs: Attributes) -> None:
        id = require_int(attrs, "id", "relation")
        members: List[RelationMember] = []
        tags: Tags = {}

        self._scan(
            "relation",
            {
                "member": lambda a: members.append(self._decode_member(a)),
                "tag": lambda a: self._decode_tag(a, tags, "relation"),
            },
        )
        self._insert(self._relations, Relation(id, members, tags))

    def _decode_tag(self, attrs: Attributes, tags: Tags, owner: str) -> None:
        key = require_str(attrs, "k", "tag")
        value = require_str(attrs, "v", "tag")
        self._scan("tag", _NO_CHILDREN)

        if key in tags:
            raise DuplicateTagError(key, owner)
        tags[key] = value

    def _decode_nd(self, attrs: Attributes) -> int:
        ref = require_int(attrs, "ref", "nd")
        self._scan("nd", _NO_CHILDREN)
        return ref

    def _decode_member(self, attrs: Attributes) -> RelationMember:
        ref = require_int(attrs, "ref", "member")
        type = cast(Optional[ElementKind], optional_choice(attrs, "type", "member", ELEMENT_KINDS))
        role = attrs.get("role", "")
        self._scan("member", _NO_CHILDREN)
        return RelationMember(ref, type, role)

    @staticmethod
    def _insert(into: Dict[int, _ElementT], element: _ElementT) -> None:
        if element.id in into:
            raise DuplicateElementError(element.kind, element.id)
        into[element.id] = element


def decode(source: EventSource) -> Document:
    """decode performs a full decoding pass over the provided :py:class:`EventSource`.

    Raises :py:exc:`osmxml.err.DecodeError` on the first problem encountered;
    no partial results are returned.
    """
    return Decoder(source).decode()
