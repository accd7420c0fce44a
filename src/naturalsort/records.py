from __future__ import annotations

from collections.abc import Iterable

from .errors import InputError

WHITESPACE_SEPARATOR = " "


def validate_separator(separator: str) -> str:
    if len(separator) != 1:
        raise InputError(f"invalid separator (separator: {separator!r})")
    return separator


def split_records(text: str, separator: str) -> list[str]:
    validate_separator(separator)
    if not text:
        return []
    if separator == WHITESPACE_SEPARATOR:
        return text.split()

    records = text.split(separator)
    records[-1] = records[-1].rstrip("\n")
    return records


def join_records(records: Iterable[str], separator: str) -> str:
    return validate_separator(separator).join(records)
