"""
Either type: a value that is exactly one of two variants.

``Left`` and ``Right`` are plain tagged variants; ``Either[E, A]`` is their
union. Nothing about the type itself favours one side. The combinators in
this package treat ``Left`` as the failure branch that short-circuits and
``Right`` as the success branch that continues, and that convention is
carried by naming alone.

Consume an Either with ``match``::

    match result:
        case Right(value):
            ...
        case Left(error):
            ...
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal, NoReturn

from eitherkit.exceptions import InvalidVariantAccess

logger = logging.getLogger(__name__)


@dataclass(frozen=True, repr=False)
class Left[E]:
    """Left variant, by convention the failure branch."""

    value: E

    def is_left(self) -> Literal[True]:
        return True

    def is_right(self) -> Literal[False]:
        return False

    def unwrap_left(self) -> E:
        return self.value

    def unwrap_right(self) -> NoReturn:
        raise InvalidVariantAccess(expected="Right", actual="Left")

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


@dataclass(frozen=True, repr=False)
class Right[A]:
    """Right variant, by convention the success branch."""

    value: A

    def is_left(self) -> Literal[False]:
        return False

    def is_right(self) -> Literal[True]:
        return True

    def unwrap_left(self) -> NoReturn:
        raise InvalidVariantAccess(expected="Left", actual="Right")

    def unwrap_right(self) -> A:
        return self.value

    def __repr__(self) -> str:
        return f"Right({self.value!r})"


type Either[E, A] = Left[E] | Right[A]


# Utility functions for creating Either instances
def left[E, A](value: E) -> Either[E, A]:
    """Create a Left Either."""
    return Left(value)


def right[E, A](value: A) -> Either[E, A]:
    """Create a Right Either."""
    return Right(value)


def not_an_either(value: object) -> NoReturn:
    """Reject a value that is neither Left nor Right."""
    raise TypeError(f"expected Left or Right, got {type(value).__name__}")


def attempt[A, X: Exception](
    thunk: Callable[[], A],
    *exceptions: type[X],
) -> Either[X, A]:
    """Run ``thunk`` once and capture the listed exceptions as a Left.

    With no exception types given, any ``Exception`` is captured. Anything
    outside the listed types propagates. The Left holds the exception
    object itself.
    """
    caught = exceptions or (Exception,)
    try:
        result = thunk()
    except caught as exc:
        logger.debug("attempt captured %s", type(exc).__name__)
        return Left(exc)
    return Right(result)


__all__ = [
    "Either",
    "Left",
    "Right",
    "attempt",
    "not_an_either",
    "left",
    "right",
]
