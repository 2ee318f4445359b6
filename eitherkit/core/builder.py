"""Fluent builder for composing Either pipelines left to right."""

from collections.abc import Callable

from .combinators import flat_map, map_left, map_right, or_else
from .either import Either


class EitherBuilder[E, A]:
    """Builder for composing Either operations.

    Each step delegates to the matching combinator and wraps the result in
    a new builder, so the wrapped value is never mutated.
    """

    def __init__(self, initial: Either[E, A]) -> None:
        self._either = initial

    def map[B](self, func: Callable[[A], B]) -> "EitherBuilder[E, B]":
        """Map a function over the Right value."""
        return EitherBuilder(map_right(self._either, func))

    def flat_map[EE, B](
        self, func: Callable[[A], Either[EE, B]]
    ) -> "EitherBuilder[E | EE, B]":
        """Chain another Either-returning step."""
        return EitherBuilder(flat_map(self._either, func))

    def or_else[EE, B](
        self, alternative: Callable[[], Either[EE, B]]
    ) -> "EitherBuilder[EE, A | B]":
        """Fall back to another computation if the pipeline has failed so far."""
        return EitherBuilder(or_else(self._either, alternative))

    def map_left[F](self, func: Callable[[E], F]) -> "EitherBuilder[F, A]":
        """Map a function over the Left value."""
        return EitherBuilder(map_left(self._either, func))

    def build(self) -> Either[E, A]:
        """Return the composed Either."""
        return self._either

    def __repr__(self) -> str:
        return f"EitherBuilder({self._either!r})"


def chain[E, A](initial: Either[E, A]) -> EitherBuilder[E, A]:
    """Create an Either builder for fluent composition."""
    return EitherBuilder(initial)


__all__ = [
    "EitherBuilder",
    "chain",
]
