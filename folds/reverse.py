from typing import List, Sequence, TypeVar

from folds.general.functional.sequence import fold_right


T = TypeVar('T')


def _append(rev: List[T], head: T) -> List[T]:
    rev.append(head)
    return rev


def reverse_via_fold(seq: Sequence[T]) -> List[T]:
    """Reverse ``seq`` as ``fold_right(seq, lambda head, rev: rev + [head], [])``.

    The accumulator is a list private to this call that is appended to in
    place, so the whole reversal is linear in ``len(seq)``.
    """
    return fold_right(seq, lambda head, rev: _append(rev, head), [])
