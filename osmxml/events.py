# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping, Protocol, Union

Attributes = Mapping[str, str]
"""Attributes of a single XML element, by attribute name."""


@dataclass(frozen=True)
class StartDocument:
    pass


@dataclass(frozen=True)
class EndDocument:
    pass


@dataclass(frozen=True)
class StartElement:
    name: str
    attrs: Attributes = field(default_factory=dict)


@dataclass(frozen=True)
class EndElement:
    name: str


@dataclass(frozen=True)
class Text:
    """Character data between elements. Whitespace-only runs are also reported."""

    content: str


@dataclass(frozen=True)
class Comment:
    content: str


Event = Union[StartDocument, EndDocument, StartElement, EndElement, Text, Comment]
"""Event is a single lexical event of an XML document."""


class EventSource(Protocol):
    """EventSource describes a pull-based, single-consumer stream of lexical XML events.

    Events must be produced in document order: an element's start, then all of its
    descendants, then its end.
    """

    def next_event(self) -> Event:
        """next_event must return the following event of the document.

        Once the :py:class:`EndDocument` was returned, subsequent calls must keep
        returning :py:class:`EndDocument`.

        Lexical and I/O failures must be reported by raising :py:exc:`osmxml.err.SourceError`.
        """
        ...


class IterEventSource:
    """IterEventSource implements :py:class:`EventSource` over an in-memory iterable of events.

    An exhausted iterable is treated as the end of the document,
    regardless of whether :py:class:`EndDocument` was explicitly provided.
    """

    def __init__(self, events: Iterable[Event]) -> None:
        self._events: Iterator[Event] = iter(events)
        self._done = False

    def next_event(self) -> Event:
        if self._done:
            return EndDocument()

        event = next(self._events, None)
        if event is None or isinstance(event, EndDocument):
            self._done = True
            return EndDocument()
        return event
