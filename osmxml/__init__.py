# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

"""Strict decoding of OpenStreetMap XML into typed elements"""

__title__ = "osmxml"
__description__ = "Strict decoding of OpenStreetMap XML into typed elements"
__author__ = "Mikołaj Kuranowski"
__copyright__ = "© Copyright 2024 Mikołaj Kuranowski"
__license__ = "GPL-3.0-or-later"
__version__ = "1.0.0"

from . import err, events
from .decoder import Decoder, decode
from .err import (
    DecodeError,
    DuplicateElementError,
    DuplicateTagError,
    InvalidAttributeError,
    MismatchedCloseError,
    PrematureEndError,
    SourceError,
    UnexpectedChildError,
)
from .events import EventSource, IterEventSource
from .model import (
    Document,
    Element,
    ElementKey,
    ElementKind,
    Node,
    Position,
    Relation,
    RelationMember,
    Way,
)
from .reader import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_FILE_FORMAT,
    FILE_FORMAT_T,
    SAXEventSource,
    read_document,
    read_document_from_string,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_FILE_FORMAT",
    "decode",
    "DecodeError",
    "Decoder",
    "Document",
    "DuplicateElementError",
    "DuplicateTagError",
    "Element",
    "ElementKey",
    "ElementKind",
    "err",
    "events",
    "EventSource",
    "FILE_FORMAT_T",
    "InvalidAttributeError",
    "IterEventSource",
    "MismatchedCloseError",
    "Node",
    "Position",
    "PrematureEndError",
    "read_document_from_string",
    "read_document",
    "Relation",
    "RelationMember",
    "SAXEventSource",
    "SourceError",
    "UnexpectedChildError",
    "Way",
]
