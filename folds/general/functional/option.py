from typing import TypeVar, Optional, Callable, Any


A = TypeVar('A')
B = TypeVar('B')


def not_none(x: Any) -> bool:
    return x is not None


def fmap(f: Callable[[A], B]) -> Callable[[Optional[A]], Optional[B]]:
    """Apply ``f`` to an Optional value, passing ``None`` through untouched."""
    return cata(f, lambda: None)


def cata(present: Callable[[A], B], absent: Callable[[], B]) -> Callable[[Optional[A]], B]:
    """Eliminate an Optional.

    Args:
        present: Invoked with the value when the Optional is populated.
        absent: Invoked with no arguments when the Optional is ``None``.

    Returns:
        A function from Optional[A] to B.
    """
    def _cata(m: Optional[A]) -> B:
        return (
            present(m) if m is not None else
            absent()
        )
    return _cata
