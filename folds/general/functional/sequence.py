from functools import reduce
from typing import TypeVar, Callable, Sequence

from toolz.functoolz import curry


T = TypeVar('T')
Z = TypeVar('Z')


@curry
def fold_left(seq: Sequence[T],
              combine: Callable[[Z, T], Z],
              seed: Z) -> Z:
    """Fold a sequence from the left.

    ``fold_left([x0, x1, x2], f, z) == f(f(f(z, x0), x1), x2)``

    Args:
        seq: The elements to fold, processed head to tail.
        combine: A function from the accumulator and the next element to a new accumulator.
        seed: The initial accumulator, returned unchanged if ``seq`` is empty.

    Returns:
        The accumulator after every element of ``seq`` has been combined into it.
    """
    return reduce(combine, seq, seed)


@curry
def fold_right(seq: Sequence[T],
               combine: Callable[[T, Z], Z],
               seed: Z) -> Z:
    """Fold a sequence from the right.

    ``fold_right([x0, x1, x2], f, z) == f(x0, f(x1, f(x2, z)))``

    The nested applications are evaluated innermost first by walking ``seq``
    from its last element back to its head, so stack depth does not grow with
    the length of ``seq``.

    Args:
        seq: The elements to fold.
        combine: A function from an element and the fold of its successors to a new accumulator.
        seed: The accumulator for the empty suffix, returned unchanged if ``seq`` is empty.

    Returns:
        The fold of the whole of ``seq``.
    """
    result = seed
    for x in reversed(seq):
        result = combine(x, result)
    return result
