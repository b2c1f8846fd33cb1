"""
Strict text parsers used by the typed accessors.

Every parser returns None instead of raising, for missing input and for text
that is not in a canonical form alike.
"""

import re
import uuid
from enum import Enum
from typing import Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1
_MAX_SIGNIFICANT_DIGITS = len(str(INT64_MIN).lstrip("-"))

_INTEGER_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)

_HEX = "[0-9a-fA-F]"
_GUID_D = rf"{_HEX}{{8}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{12}}"
_GUID_RE = re.compile(
    rf"(?:{_HEX}{{32}}|{_GUID_D}|\{{{_GUID_D}\}}|\({_GUID_D}\))",
    re.ASCII,
)


def try_parse_bool(text: Optional[str]) -> Optional[bool]:
    if text is None:
        return None
    normalized = text.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    return None


def try_parse_integer(
    text: Optional[str], min_value: int = INT32_MIN, max_value: int = INT32_MAX
) -> Optional[int]:
    """
    Parse a signed decimal integer within ``[min_value, max_value]``.

    Only ASCII digits with an optional leading sign are accepted. Python's
    own ``int()`` also takes underscores and non-ASCII digits, which are
    rejected here.
    """
    if text is None:
        return None
    stripped = text.strip()
    if not _INTEGER_RE.fullmatch(stripped):
        return None
    # int() refuses very long digit strings; anything this long is out of range anyway
    significant = stripped.lstrip("+-").lstrip("0")
    if len(significant) > _MAX_SIGNIFICANT_DIGITS:
        return None
    value = int(significant or "0")
    if stripped.startswith("-"):
        value = -value
    if value < min_value or value > max_value:
        return None
    return value


def try_parse_guid(text: Optional[str]) -> Optional[uuid.UUID]:
    """Parse the N, D, B and P textual forms of a GUID."""
    if text is None:
        return None
    stripped = text.strip()
    if not _GUID_RE.fullmatch(stripped):
        return None
    return uuid.UUID(stripped.strip("{}()"))


def try_parse_enum(enum_type: Type[E], text: Optional[str]) -> Optional[E]:
    if text is None:
        return None
    key = text.strip().lower()
    for member_name, member in enum_type.__members__.items():
        if member_name.lower() == key:
            return member
    return None
