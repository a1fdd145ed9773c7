"""JSON-backed key/value settings store."""

from __future__ import annotations

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_FLOAT32_MAX = 3.4028234e38


class ConfigTypeError(TypeError):
    """Raised when a key is assigned a value of a different type than it holds."""


def _is_int(value: Any) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and _INT32_MIN <= value <= _INT32_MAX
    )


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def _is_float(value: Any) -> bool:
    return isinstance(value, float) and -_FLOAT32_MAX <= value <= _FLOAT32_MAX


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


class Config:
    """Settings read from and written to a JSON object file.

    Lookups of missing keys, or of keys whose stored value has another
    type, return the supplied default.
    """

    def __init__(self, file_name: str | os.PathLike[str] | None = None) -> None:
        self._document: Any = None
        self._file_name = ""
        self.load(file_name)

    @property
    def file_name(self) -> str:
        """The file the settings were loaded from, or an empty string."""
        return self._file_name

    def load(self, file_name: str | os.PathLike[str] | None) -> None:
        """Read settings from *file_name*; keep defaults if it cannot be read."""
        if file_name is None:
            logger.info("[Config] Not using config file. Default settings will be used.")
            return
        path = os.fspath(file_name)
        try:
            with open(path, "rb") as stream:
                raw = stream.read()
        except OSError:
            logger.warning(
                "[Config] Failed to open config file %s. Default settings will be used.",
                path,
            )
            return
        try:
            self._document = json.loads(raw.decode("utf-8"))
        except (ValueError, UnicodeDecodeError):
            logger.warning("[Config] Failed to parse config file %s.", path)
            self._document = None
        self._file_name = path

    def save(self) -> None:
        """Write the settings back to the file they were loaded from."""
        self.save_as(self._file_name)

    def save_as(self, file_name: str | os.PathLike[str]) -> None:
        """Write the settings to *file_name* as indented JSON."""
        path = os.fspath(file_name)
        try:
            with open(path, "w", encoding="utf-8") as stream:
                json.dump(self._document, stream, indent=4)
        except OSError:
            logger.warning("[Config] Failed to save config file %s.", path)

    def _get(self, key: str, default: Any, accepts) -> Any:
        if not isinstance(self._document, dict):
            return default
        value = self._document.get(key)
        if key in self._document and accepts(value):
            return value
        return default

    def get_int(self, key: str, default: int = 0) -> int:
        return self._get(key, default, _is_int)

    def get_bool(self, key: str, default: bool = False) -> bool:
        return self._get(key, default, _is_bool)

    def get_float(self, key: str, default: float = 0.0) -> float:
        return self._get(key, default, _is_float)

    def get_string(self, key: str, default: str = "") -> str:
        return self._get(key, default, _is_string)

    def _set(self, key: str, value: Any, accepts, type_name: str) -> None:
        if not isinstance(self._document, dict):
            self._document = {}
        if key in self._document and not accepts(self._document[key]):
            raise ConfigTypeError(f"[Config] {key} is not {type_name}.")
        self._document[key] = value

    def set_int(self, key: str, value: int) -> None:
        self._set(key, int(value), _is_int, "an integer")

    def set_bool(self, key: str, value: bool) -> None:
        self._set(key, bool(value), _is_bool, "a boolean")

    def set_float(self, key: str, value: float) -> None:
        self._set(key, float(value), _is_float, "a float")

    def set_string(self, key: str, value: str) -> None:
        self._set(key, str(value), _is_string, "a string")