"""Lookups in INI files: values, section names and key names.

Sections and keys match without regard to ASCII case. A value ends at an
unquoted ``;`` or ``#``. Surrounding double quotes are removed from a value,
together with the backslash or doubled quote that escapes an inner quote.
Lines are read in chunks of at most 511 characters, and results are cut to
the same length.
"""

from __future__ import annotations

import os
import re
from typing import Iterable, Iterator, Optional, TextIO, Union

PathLike = Union[str, "os.PathLike[str]"]

# Size of the line buffer, terminator included.
BUFFER_SIZE = 512
# Size of the buffer used when a value is read as a number.
_NUMBER_BUFFER_SIZE = 64

_BLANK = "".join(chr(code) for code in range(33))
_UPPER_TO_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

_LONG_MIN = -(2 ** 63)
_LONG_MAX = 2 ** 63 - 1

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*(?P<number>[+-]?(?:"
    r"(?P<hex>0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?)"
    r"|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|(?i:infinity|inf|nan)"
    r"))"
)


def _skip_leading(text: str) -> str:
    return text.lstrip(_BLANK)


def _strip_trailing(text: str) -> str:
    return text.rstrip(_BLANK)


def _same_name(left: str, right: str) -> bool:
    return left.translate(_UPPER_TO_LOWER) == right.translate(_UPPER_TO_LOWER)


def _read_chunks(handle: TextIO) -> Iterator[str]:
    """Yield lines as a fixed-size line reader would, splitting long ones."""
    chunk = BUFFER_SIZE - 1
    for line in handle:
        while len(line) > chunk:
            yield line[:chunk]
            line = line[chunk:]
        if line:
            yield line


def _dequote(text: str, limit: int) -> str:
    out = []
    position = 0
    while position < len(text) and len(out) < limit - 1:
        if text[position] in '"\\' and text[position + 1:position + 2] == '"':
            position += 1
        out.append(text[position])
        position += 1
    return "".join(out)


def _parse_value(raw: str, limit: int) -> str:
    text = _skip_leading(raw)
    in_string = False
    position = 0
    while position < len(text):
        char = text[position]
        if char in ";#" and not in_string:
            break
        if char == '"':
            if text[position + 1:position + 2] == '"':
                position += 1
            else:
                in_string = not in_string
        elif char == "\\" and text[position + 1:position + 2] == '"':
            position += 1
        position += 1
    value = _strip_trailing(text[:position])
    if value.startswith('"') and value.endswith('"'):
        return _dequote(value[1:-1], limit) if len(value) > 1 else ""
    return value[:limit - 1]


def _find(
    lines: Iterable[str],
    section: Optional[str],
    key: Optional[str],
    section_index: int,
    key_index: int,
    limit: int,
) -> Optional[str]:
    """Scan the lines for a value, or for a section or key name by position."""
    lines = iter(lines)
    section_name = section or ""

    if section_name or section_index >= 0:
        index = -1
        for line in lines:
            start = _skip_leading(line)
            if not start.startswith("["):
                continue
            close = start.find("]")
            if close < 0:
                continue
            found = start[1:close]
            if _same_name(found, section_name):
                break
            index += 1
            if index == section_index:
                break
        else:
            return None
        if section_index >= 0:
            return found[:limit - 1] if index == section_index else None

    key_name = key or ""
    index = -1
    for line in lines:
        start = _skip_leading(line)
        if start.startswith("["):
            return None
        separator = start.find("=")
        if separator < 0:
            separator = start.find(":")
        if start[:1] in (";", "#") or separator < 0:
            continue
        found = _strip_trailing(start[:separator])
        if _same_name(found, key_name):
            break
        index += 1
        if index == key_index:
            break
    else:
        return None

    if key_index >= 0:
        return found[:limit - 1] if index == key_index else None
    return _parse_value(start[separator + 1:], limit)


def _search(
    path: PathLike,
    section: Optional[str],
    key: Optional[str],
    section_index: int = -1,
    key_index: int = -1,
    limit: int = BUFFER_SIZE,
) -> Optional[str]:
    try:
        handle = open(path, "r", encoding="utf-8", errors="surrogateescape")
    except OSError:
        return None
    with handle:
        return _find(_read_chunks(handle), section, key, section_index, key_index, limit)


def _parse_long(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        return 0
    return max(_LONG_MIN, min(_LONG_MAX, int(match.group(1))))


def _parse_double(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    number = match.group("number")
    if match.group("hex") is not None:
        return float.fromhex(number)
    return float(number)


def get_string(
    path: PathLike, section: Optional[str], key: str, default: str = ""
) -> str:
    """The value of ``key`` in ``section``, or ``default`` when it is absent.

    A ``section`` of ``None`` or ``""`` means the keys above the first section.
    """
    value = _search(path, section, key)
    if value is None:
        return default[:BUFFER_SIZE - 1]
    return value


def get_int(
    path: PathLike, section: Optional[str], key: str, default: int = 0
) -> int:
    """The leading integer of a value; ``default`` when it is absent or empty."""
    value = _search(path, section, key, limit=_NUMBER_BUFFER_SIZE)
    if not value:
        return default
    return _parse_long(value)


def get_float(
    path: PathLike, section: Optional[str], key: str, default: float = 0.0
) -> float:
    """The leading number of a value; ``default`` when it is absent or empty."""
    value = _search(path, section, key, limit=_NUMBER_BUFFER_SIZE)
    if not value:
        return default
    return _parse_double(value)


def get_section(path: PathLike, index: int) -> str:
    """The name of the section at zero-based ``index``, or ``""`` if none."""
    if index < 0:
        return ""
    return _search(path, None, None, section_index=index) or ""


def get_key(path: PathLike, section: Optional[str], index: int) -> str:
    """The name of the key at zero-based ``index`` in ``section``, or ``""``."""
    if index < 0:
        return ""
    return _search(path, section, None, key_index=index) or ""