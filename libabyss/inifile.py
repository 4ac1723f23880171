"""A small case-insensitive INI file reader."""

from __future__ import annotations

import logging
import os
import re

_log = logging.getLogger(__name__)

_ASCII_WHITESPACE = " \t\n\v\f\r"
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_INT_RE = re.compile(r"-?[0-9]+")
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_TRUE_WORDS = frozenset({"true", "1", "yes", "y"})


def _lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


class IniFile:
    """Values grouped by category; category and name lookups ignore ASCII case."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._values: dict[str, dict[str, str]] = {}
        try:
            with open(path, encoding="utf-8", newline="") as handle:
                content = handle.read()
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"File not found: {os.fspath(path)}") from exc
        self._parse(content, os.fspath(path))

    def _parse(self, content: str, source: str) -> None:
        category = ""
        for line_no, raw in enumerate(content.split("\n"), start=1):
            line = raw.strip(_ASCII_WHITESPACE)
            if not line or line.startswith(";"):
                continue
            if line.startswith("["):
                if not line.endswith("]"):
                    _log.error(
                        "error parsing INI file '%s' on line %d: Malformed Category",
                        source, line_no,
                    )
                    continue
                category = _lower(line[1:-1])
                continue
            if not category:
                _log.error(
                    "error parsing INI file '%s' on line %d: "
                    "Values must be under a named category",
                    source, line_no,
                )
                continue
            name, sep, value = line.partition("=")
            if not sep:
                _log.error(
                    "error parsing INI file '%s' on line %d: "
                    "Values must be in the format name=value",
                    source, line_no,
                )
                continue
            self._values.setdefault(category, {})[_lower(name)] = value

    def get_value(self, category: str, name: str) -> str:
        """Return the raw value, or an empty string if it is not present."""
        return self._values.get(_lower(category), {}).get(_lower(name), "")

    def get_bool(self, category: str, name: str) -> bool:
        return _lower(self.get_value(category, name)) in _TRUE_WORDS

    def get_int(self, category: str, name: str) -> int:
        value = self.get_value(category, name)
        if _INT_RE.fullmatch(value):
            result = int(value)
            if _INT32_MIN <= result <= _INT32_MAX:
                return result
        raise ValueError(f"Can't parse {category}.{name} from ini as int: '{value}'")

    def get_float(self, category: str, name: str) -> float:
        """Parse an unsigned decimal such as '12' or '3.5'; empty gives 0.0."""
        value = self.get_value(category, name)
        result = 0.0
        coef = 1.0
        seen_point = False
        for ch in value:
            if ch == ".":
                if seen_point:
                    raise self._float_error(category, name, value)
                seen_point = True
            elif not "0" <= ch <= "9":
                raise self._float_error(category, name, value)
            elif seen_point:
                coef *= 0.1
                result += int(ch) * coef
            else:
                result = result * 10 + int(ch)
        return result

    @staticmethod
    def _float_error(category: str, name: str, value: str) -> ValueError:
        return ValueError(f"Can't parse {category}.{name} from ini as float: '{value}'")

    def set_value(self, category: str, name: str, value: str) -> None:
        self._values.setdefault(_lower(category), {})[_lower(name)] = value