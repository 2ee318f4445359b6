"""
Aggregation over ordered collections of Either values.

Both functions walk their input once, in order, and stop at the first
Left. Nothing after that Left is pulled from the input, so lazy iterables
and effectful callbacks observe exactly the work needed to find it.
"""

import logging
from collections.abc import Callable, Iterable

from .either import Either, Left, Right, not_an_either

logger = logging.getLogger(__name__)


def sequence[E, A](eithers: Iterable[Either[E, A]]) -> Either[E, list[A]]:
    """Transform an iterable of Eithers into an Either of list.

    Returns Right with every payload in input order, or the first Left
    encountered. Later Lefts are never looked at.
    """
    values: list[A] = []
    for index, either in enumerate(eithers):
        match either:
            case Right(value):
                values.append(value)
            case Left():
                logger.debug(
                    "sequence short-circuited at index %d (%s)",
                    index,
                    type(either.value).__name__,
                )
                return either
            case _:
                not_an_either(either)
    return Right(values)


def traverse[E, A, B](
    items: Iterable[A],
    f: Callable[[A], Either[E, B]],
) -> Either[E, list[B]]:
    """Apply ``f`` to each item and collect the Right payloads.

    Equivalent to ``sequence(f(item) for item in items)`` without building
    the intermediate Eithers. ``f`` is not called on any item after the
    first one it maps to a Left.
    """
    values: list[B] = []
    for index, item in enumerate(items):
        match f(item):
            case Right(value):
                values.append(value)
            case Left() as failure:
                logger.debug(
                    "traverse short-circuited at index %d (%s)",
                    index,
                    type(failure.value).__name__,
                )
                return failure
            case other:
                not_an_either(other)
    return Right(values)


__all__ = [
    "sequence",
    "traverse",
]
