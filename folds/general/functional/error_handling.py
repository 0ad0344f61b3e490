from typing import NoReturn


def throw(error: BaseException) -> NoReturn:
    """Raise ``error``; usable where only an expression is allowed."""
    raise error
