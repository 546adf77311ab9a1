# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

"""Extraction and type coercion of OSM XML attributes.

Every function takes the attributes of a single element and the name of that element,
and raises :py:exc:`InvalidAttributeError` naming both the attribute and the element
if the value is missing or malformed. No default values are ever substituted for
required attributes.
"""

import re
from math import isfinite
from typing import Collection, Optional

from .err import InvalidAttributeError
from .events import Attributes

_INTEGER = re.compile(r"[+-]?[0-9]+")

TRUE_VALUES = frozenset(("true", "1"))
FALSE_VALUES = frozenset(("false", "0"))


def require_str(attrs: Attributes, name: str, element: str) -> str:
    value = attrs.get(name)
    if value is None:
        raise InvalidAttributeError(name, element)
    return value


def require_int(attrs: Attributes, name: str, element: str) -> int:
    """Returns the integer value of a required attribute. Only an optional sign
    followed by ASCII digits is accepted - no whitespace, underscores or decimal points."""
    value = require_str(attrs, name, element)
    if not _INTEGER.fullmatch(value):
        raise InvalidAttributeError(name, element, value)
    return int(value)


def require_float(attrs: Attributes, name: str, element: str) -> float:
    """Returns the value of a required, finite floating-point attribute."""
    value = require_str(attrs, name, element)
    try:
        number = float(value)
    except ValueError:
        raise InvalidAttributeError(name, element, value) from None

    if not isfinite(number):
        raise InvalidAttributeError(name, element, value)
    return number


def require_bool(attrs: Attributes, name: str, element: str) -> bool:
    """Returns the value of a required boolean attribute: ``true`` or ``1``
    for True, and ``false`` or ``0`` for False."""
    value = require_str(attrs, name, element)
    if value in TRUE_VALUES:
        return True
    elif value in FALSE_VALUES:
        return False
    raise InvalidAttributeError(name, element, value)


def optional_choice(
    attrs: Attributes,
    name: str,
    element: str,
    choices: Collection[str],
) -> Optional[str]:
    """Returns the value of an optional attribute, which, if present, must be one of ``choices``."""
    value = attrs.get(name)
    if value is not None and value not in choices:
        raise InvalidAttributeError(name, element, value)
    return value
