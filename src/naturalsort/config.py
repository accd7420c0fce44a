from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import InputError
from .records import validate_separator

DEFAULT_SEPARATOR = ","


def _read_tool_table(pyproject: Path) -> dict[str, Any]:
    if not pyproject.exists():
        return {}
    with pyproject.open("rb") as handle:
        try:
            data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise InputError(f"invalid {pyproject}: {exc}") from exc
    table = data.get("tool", {}).get("naturalsort", {})
    if not isinstance(table, dict):
        raise InputError(f"[tool.naturalsort] in {pyproject} must be a table")
    return table


def _flag(table: dict[str, Any], key: str) -> bool:
    value = table.get(key, False)
    if not isinstance(value, bool):
        raise InputError(f"tool.naturalsort.{key} must be true or false")
    return value


@dataclass
class NaturalSortConfig:
    separator: str = DEFAULT_SEPARATOR
    input_gzip: bool = False
    input_base64: bool = False
    output_gzip: bool = False
    output_base64: bool = False

    @classmethod
    def load(cls, root: Path) -> NaturalSortConfig:
        table = _read_tool_table(root / "pyproject.toml")

        separator = table.get("separator", DEFAULT_SEPARATOR)
        if not isinstance(separator, str):
            raise InputError("tool.naturalsort.separator must be a string")

        return cls(
            separator=validate_separator(separator),
            input_gzip=_flag(table, "input_gzip"),
            input_base64=_flag(table, "input_base64"),
            output_gzip=_flag(table, "output_gzip"),
            output_base64=_flag(table, "output_base64"),
        )
