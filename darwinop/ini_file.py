"""An INI file addressed by its path, with typed reads and writes."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Union

from . import ini_read, ini_write
from .ini_read import PathLike


@dataclass(frozen=True)
class IniFile:
    """Reads and writes entries of the INI file at ``path``."""

    path: PathLike

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", os.fspath(self.path))

    def get_string(self, section: Optional[str], key: str, default: str = "") -> str:
        return ini_read.get_string(self.path, section, key, default)

    def get_int(self, section: Optional[str], key: str, default: int = 0) -> int:
        return ini_read.get_int(self.path, section, key, default)

    def get_float(self, section: Optional[str], key: str, default: float = 0.0) -> float:
        return ini_read.get_float(self.path, section, key, default)

    def section(self, index: int) -> str:
        """Name of the section at ``index``, or ``""``."""
        return ini_read.get_section(self.path, index)

    def key(self, section: Optional[str], index: int) -> str:
        """Name of the key at ``index`` in ``section``, or ``""``."""
        return ini_read.get_key(self.path, section, index)

    def put(self, section: Optional[str], key: str, value: Union[str, int, float]) -> None:
        """Store a string, integer or float value."""
        if isinstance(value, str):
            ini_write.put_string(self.path, section, key, value)
        elif isinstance(value, int):
            ini_write.put_int(self.path, section, key, value)
        elif isinstance(value, float):
            ini_write.put_float(self.path, section, key, value)
        else:
            raise TypeError(f"cannot store a value of type {type(value).__name__}")

    def delete(self, section: Optional[str], key: Optional[str] = None) -> None:
        """Remove one key, or the whole section when ``key`` is None."""
        if key is None:
            ini_write.delete_section(self.path, section)
        else:
            ini_write.delete_key(self.path, section, key)