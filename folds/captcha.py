"""Sums over a circular sequence of digits.

Each digit is compared with the digit some fixed distance ahead of it, wrapping
around from the end of the sequence to its start, and the digits that match are
summed.
"""
from typing import Callable, Sequence

from toolz import get

from folds.general.functional import option
from folds.general.functional.error_handling import throw
from folds.general.functional.sequence import fold_left, fold_right
from folds.model import InvalidInput, validate_digits


# Sum of matches in a suffix of the digits, given the digit that precedes it.
Continuation = Callable[[int], int]


def _wrap_around(first: int) -> Continuation:
    return lambda prev: prev if prev == first else 0


def _compare_with_successor(digit: int, rest: Continuation) -> Continuation:
    # rest is applied here, while building, so applying the result never nests.
    after = rest(digit)
    return lambda prev: after + (prev if prev == digit else 0)


def circular_adjacent_sum(digits: Sequence[int]) -> int:
    """Sum every digit that equals the digit after it, the last digit being followed by the first.

    >>> circular_adjacent_sum([1, 1, 2, 2])
    3

    A single digit is its own successor, so it always counts.

    Raises:
        InvalidInput: If ``digits`` holds anything but non-negative integers.
    """
    checked = validate_digits(digits)
    return option.cata(
        lambda first: fold_right(checked[1:], _compare_with_successor, _wrap_around(first))(first),
        lambda: 0
    )(get(0, checked, None))


def circular_offset_sum(digits: Sequence[int], offset: int) -> int:
    """Sum every digit that equals the digit ``offset`` places after it, wrapping around.

    Raises:
        InvalidInput: If ``digits`` holds anything but non-negative integers, or
            ``offset`` is not a non-negative integer.
    """
    checked = validate_digits(digits)
    distance = (
        throw(InvalidInput(f'Offset must be a non-negative integer, got {offset!r}'))
        if isinstance(offset, bool) or not isinstance(offset, int) or offset < 0 else
        offset
    )
    length = len(checked)

    return fold_left(
        range(length),
        lambda total, i: total + (checked[i] if checked[i] == checked[(i + distance) % length] else 0),
        0
    )


def halfway_sum(digits: Sequence[int]) -> int:
    """Compare each digit with the one halfway around the sequence."""
    checked = validate_digits(digits)
    return circular_offset_sum(checked, len(checked) // 2)
