"""Natural-order comparison and sorting of strings."""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable
from enum import IntEnum
from functools import cmp_to_key

from .errors import DigitRunError

CharPredicate = Callable[[str], bool]


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


def is_digit(char: str) -> bool:
    return char.isdecimal()


def _negate(predicate: CharPredicate) -> CharPredicate:
    def negated(char: str) -> bool:
        return not predicate(char)

    return negated


is_non_digit = _negate(is_digit)


def _find(text: str, predicate: CharPredicate, start: int) -> int:
    for index in range(start, len(text)):
        if predicate(text[index]):
            return index
    return -1


def _lexical(left: str, right: str) -> Ordering:
    if left < right:
        return Ordering.LESS
    if left > right:
        return Ordering.GREATER
    return Ordering.EQUAL


def _sign(value: int) -> Ordering:
    return Ordering((value > 0) - (value < 0))


def _digit_values(run: str) -> tuple[int, ...]:
    try:
        values = tuple(unicodedata.decimal(char) for char in run)
    except ValueError as exc:
        raise DigitRunError(f"invalid number {run!r}") from exc
    # Leading zeros never change the value.
    for index, value in enumerate(values):
        if value:
            return values[index:]
    return ()


def _compare_runs(left: str, right: str) -> Ordering:
    x_digits, y_digits = _digit_values(left), _digit_values(right)
    if len(x_digits) != len(y_digits):
        return _sign(len(x_digits) - len(y_digits))
    if x_digits != y_digits:
        return Ordering.LESS if x_digits < y_digits else Ordering.GREATER
    # Same value: the shorter (less padded) run comes first.
    return _sign(len(left) - len(right))


def compare(a: str, b: str) -> Ordering:
    """Return the natural-order relation of ``a`` to ``b``."""
    if not a or not b:
        return _sign(len(a) - len(b))

    # First pair of equal runs written in different scripts, used only when
    # everything else ties.
    script_order = Ordering.EQUAL
    x, y = 0, 0
    while True:
        x_pos, y_pos = _find(a, is_digit, x), _find(b, is_digit, y)
        if x_pos == -1 and y_pos == -1:
            return _lexical(a[x:], b[y:]) or script_order
        if x_pos == -1:
            return Ordering.GREATER
        if y_pos == -1:
            return Ordering.LESS

        x_seg, y_seg = a[x:x_pos], b[y:y_pos]
        if x_seg != y_seg:
            return _lexical(x_seg, y_seg)

        x_end, y_end = _find(a, is_non_digit, x_pos), _find(b, is_non_digit, y_pos)
        if x_end == -1:
            x_end = len(a)
        if y_end == -1:
            y_end = len(b)

        x_run, y_run = a[x_pos:x_end], b[y_pos:y_end]
        order = _compare_runs(x_run, y_run)
        if order is not Ordering.EQUAL:
            return order
        if script_order is Ordering.EQUAL:
            script_order = _lexical(x_run, y_run)
        x, y = x_end, y_end


def precedes(a: str, b: str) -> bool:
    return compare(a, b) is Ordering.LESS


natural_key = cmp_to_key(compare)


def natural_sort(records: list[str]) -> None:
    records.sort(key=natural_key)


def sorted_naturally(records: Iterable[str]) -> list[str]:
    result = list(records)
    natural_sort(result)
    return result
