"""Writing and erasing entries in INI files.

Each write copies the file into a temporary file beside it (the same name
with its last character replaced by ``~``) and then moves that over the
original. Blank lines are dropped along the way, except that a blank line is
kept before each section header. Values that hold ``"``, ``;`` or ``#``, or
that end with a space, are written in double quotes.
"""

from __future__ import annotations

import os
from typing import Iterable, Iterator, Optional, TextIO

from .ini_read import (
    BUFFER_SIZE,
    PathLike,
    _read_chunks,
    _same_name,
    _search,
    _skip_leading,
    _strip_trailing,
)

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"
_LINE_END = "\n"


def _open(path: str, mode: str) -> TextIO:
    return open(path, mode, encoding=_ENCODING, errors=_ERRORS, newline="\n")


def _needs_quotes(value: str) -> bool:
    return any(char in value for char in '";#') or value.endswith(" ")


def _enquote(text: str, limit: int) -> str:
    """Quote ``text`` so that the result, with a terminator, fits in ``limit``."""
    out = ['"']
    used = 1
    for char in text:
        if used >= limit - 2:
            break
        if char == '"':
            if used >= limit - 3:
                break
            out.append("\\")
            used += 1
        out.append(char)
        used += 1
    out.append('"')
    return "".join(out)


def _quoted(value: str) -> str:
    """Quote a value without any length limit."""
    if not _needs_quotes(value):
        return value
    return '"' + value.replace('"', '\\"') + '"'


def _section_line(section: Optional[str]) -> str:
    if not section:
        return ""
    return "[" + section[:BUFFER_SIZE - 5] + "]" + _LINE_END


def _key_line(key: str, value: str) -> str:
    name = key[:BUFFER_SIZE - 4]
    room = BUFFER_SIZE - (len(name) + 1) - 2
    if _needs_quotes(value) and room >= 3:
        text = _enquote(value, room)
    else:
        text = value[:room - 1]
    return name + "=" + text + _LINE_END


def _temp_name(name: str) -> str:
    truncated = name[:BUFFER_SIZE - 1]
    return truncated[:-1] + "~"


def _copy_rest(lines: Iterator[str], out: TextIO) -> None:
    for line in lines:
        start = _skip_leading(line)
        if start:
            if start.startswith("["):
                out.write(_LINE_END)
            out.write(start)


def _rewrite(
    lines: Iterable[str],
    out: TextIO,
    section: Optional[str],
    key: Optional[str],
    value: Optional[str],
) -> None:
    lines = iter(lines)
    writing = key is not None and value is not None

    if section:
        count = 0
        for line in lines:
            start = _skip_leading(line)
            close = start.find("]")
            match = (
                start.startswith("[")
                and close >= 0
                and _same_name(start[1:close], section)
            )
            if (not match or key is not None) and start:
                if start.startswith("[") and count > 0:
                    out.write(_LINE_END)
                out.write(start)
                count += 1
            if match:
                break
        else:
            if writing:
                out.write(_LINE_END)
                out.write(_section_line(section))
                out.write(_key_line(key, value))
            return

    for line in lines:
        start = _skip_leading(line)
        separator = start.find("=")
        if separator < 0:
            separator = start.find(":")
        match = (
            key is not None
            and separator >= 0
            and _same_name(_strip_trailing(start[:separator]), key)
        )
        if match or start.startswith("["):
            break
        if key is not None and start:
            out.write(start)
    else:
        if writing:
            out.write(_LINE_END)
            out.write(_key_line(key, value))
        return

    if start.startswith("["):
        if writing:
            out.write(key + "=" + _quoted(value) + _LINE_END + _LINE_END)
        out.write(start)
    elif writing:
        out.write(_key_line(key, value))

    _copy_rest(lines, out)


def _put(
    path: PathLike,
    section: Optional[str],
    key: Optional[str],
    value: Optional[str],
) -> None:
    name = os.fspath(path)
    try:
        source = _open(name, "r")
    except OSError:
        if key is not None and value is not None:
            with _open(name, "w") as out:
                out.write(_section_line(section))
                out.write(_key_line(key, value))
        return

    temp = _temp_name(name)
    with source:
        if key is not None and value is not None:
            if _search(name, section, key) == value:
                return
        with _open(temp, "w") as out:
            _rewrite(_read_chunks(source), out, section, key, value)
    os.replace(temp, name)


def put_string(path: PathLike, section: Optional[str], key: str, value: str) -> None:
    """Set ``key`` in ``section`` to ``value``, creating file, section or key.

    A ``section`` of ``None`` or ``""`` means the keys above the first section.
    Raises OSError when the file cannot be written.
    """
    _put(path, section, key, value)


def put_int(path: PathLike, section: Optional[str], key: str, value: int) -> None:
    """Store an integer value."""
    _put(path, section, key, str(int(value)))


def put_float(path: PathLike, section: Optional[str], key: str, value: float) -> None:
    """Store a number with six digits after the decimal point."""
    _put(path, section, key, "%f" % value)


def delete_key(path: PathLike, section: Optional[str], key: str) -> None:
    """Remove ``key`` from ``section``; a missing file is left alone."""
    _put(path, section, key, None)


def delete_section(path: PathLike, section: Optional[str]) -> None:
    """Remove ``section`` with all its keys; a missing file is left alone."""
    _put(path, section, None, None)