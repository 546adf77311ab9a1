# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

"""Contains errors raised when decoding OSM XML"""

from typing import Optional


class DecodeError(ValueError):
    """Base for all errors raised by osmxml. Any DecodeError aborts the whole decoding pass."""

    pass


class SourceError(DecodeError):
    """The underlying event source failed: malformed XML, an I/O error,
    or a broken compressed stream. The original exception is available as ``__cause__``.
    """

    pass


class InvalidAttributeError(DecodeError):
    """A required attribute is missing, or an attribute value can't be
    coerced to its expected type."""

    attribute: str
    element: str
    value: Optional[str]
    """value is the offending attribute value, or None if the attribute was missing."""

    def __init__(self, attribute: str, element: str, value: Optional[str] = None) -> None:
        if value is None:
            msg = f"<{element}> is missing the required {attribute!r} attribute"
        else:
            msg = f"<{element}> has an invalid {attribute!r} attribute: {value!r}"
        super().__init__(msg)
        self.attribute = attribute
        self.element = element
        self.value = value


class UnexpectedChildError(DecodeError):
    """An element was opened inside a scope which doesn't permit it."""

    child: str
    scope: str

    def __init__(self, child: str, scope: str) -> None:
        super().__init__(f"unexpected <{child}> inside <{scope}>")
        self.child = child
        self.scope = scope


class MismatchedCloseError(DecodeError):
    """A scope was closed by an end tag with a different name."""

    expected: str
    actual: str

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(f"expected </{expected}>, got </{actual}>")
        self.expected = expected
        self.actual = actual


class PrematureEndError(DecodeError):
    """The document ended while a scope was still open."""

    scope: str

    def __init__(self, scope: str) -> None:
        super().__init__(f"document ended before </{scope}>")
        self.scope = scope


class DuplicateElementError(DecodeError):
    """Two elements of the same kind share an id."""

    kind: str
    id: int

    def __init__(self, kind: str, id: int) -> None:
        super().__init__(f"duplicate {kind} {id}")
        self.kind = kind
        self.id = id


class DuplicateTagError(DecodeError):
    """A single element has two tags with the same key."""

    key: str
    element: str

    def __init__(self, key: str, element: str) -> None:
        super().__init__(f"<{element}> has multiple tags with key {key!r}")
        self.key = key
        self.element = element
