import random

import pytest

from folds.captcha import circular_adjacent_sum, circular_offset_sum, halfway_sum
from folds.model import InvalidInput
from tests.data_generators import naive_circular_sum


@pytest.mark.parametrize('digits, expected', [
    ([1, 1, 2, 2]            , 3),
    ([1, 1, 1, 1]            , 4),
    ([1, 2, 3, 4]            , 0),
    ([9, 1, 2, 1, 2, 1, 2, 9], 9),
    ([]                      , 0),
])
def test_adjacent_examples(digits, expected):
    assert circular_adjacent_sum(digits) == expected


def test_single_digit_matches_itself():
    assert circular_adjacent_sum([7]) == 7
    assert circular_adjacent_sum([0]) == 0


def test_two_digits():
    assert circular_adjacent_sum([5, 5]) == 10
    assert circular_adjacent_sum([5, 6]) == 0


def test_accepts_tuples():
    assert circular_adjacent_sum((1, 1, 2, 2)) == 3


def test_multi_digit_values():
    assert circular_adjacent_sum([12, 12, 3]) == 12


@pytest.mark.parametrize('digits, expected', [
    ([1, 2, 1, 2]            , 6 ),
    ([1, 2, 2, 1]            , 0 ),
    ([1, 2, 3, 4, 2, 5]      , 4 ),
    ([1, 2, 3, 1, 2, 3]      , 12),
    ([1, 2, 1, 3, 1, 4, 1, 5], 4 ),
    ([]                      , 0 ),
])
def test_halfway_examples(digits, expected):
    assert halfway_sum(digits) == expected


def test_offset_zero_sums_everything():
    assert circular_offset_sum([1, 2, 3], 0) == 6


def test_offset_wraps_past_length():
    assert circular_offset_sum([1, 1, 2, 2], 5) == circular_offset_sum([1, 1, 2, 2], 1)


def test_offset_on_empty():
    assert circular_offset_sum([], 3) == 0


def test_forms_agree():
    rng = random.Random(2017)
    for length in range(0, 40):
        digits = [rng.randint(0, 2) for _ in range(length)]
        assert circular_adjacent_sum(digits) == circular_offset_sum(digits, 1) == naive_circular_sum(digits)


def test_long_captcha():
    rng = random.Random(1)
    digits = [rng.randint(0, 9) for _ in range(20_000)]
    assert circular_adjacent_sum(digits) == naive_circular_sum(digits)
    assert halfway_sum(digits) == naive_circular_sum(digits, len(digits) // 2)


@pytest.mark.parametrize('digits', [
    [1, -1, 2],
    [1, 2.5],
    [1.0],
    ['1', '2'],
    [True, 1],
    [None],
    '1122',
])
def test_rejects_non_digits(digits):
    with pytest.raises(InvalidInput):
        circular_adjacent_sum(digits)
    with pytest.raises(InvalidInput):
        circular_offset_sum(digits, 1)


@pytest.mark.parametrize('offset', [-1, 1.5, '1', True, None])
def test_rejects_bad_offset(offset):
    with pytest.raises(InvalidInput):
        circular_offset_sum([1, 1], offset)


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        halfway_sum([-3, 3])
