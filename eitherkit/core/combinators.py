"""
Single-value combinators over Either.

Every function inspects the variant with ``match`` and touches the
caller-supplied callable only on the branch that needs it. Exceptions
raised by those callables are never caught here.
"""

from collections.abc import Callable

from .either import Either, Left, Right, not_an_either

# Laws:
# 1. Identity: map_right(e, lambda x: x) == e
# 2. Left identity: flat_map(Right(a), f) == f(a)
# 3. Right identity: flat_map(e, Right) == e
# 4. Associativity: flat_map(flat_map(e, f), g) == flat_map(e, lambda x: flat_map(f(x), g))


def map_right[E, A, B](either: Either[E, A], f: Callable[[A], B]) -> Either[E, B]:
    """Apply ``f`` to a Right payload; a Left passes through untouched."""
    match either:
        case Right(value):
            return Right(f(value))
        case Left():
            return either
        case _:
            not_an_either(either)


def flat_map[E, EE, A, B](
    either: Either[E, A],
    f: Callable[[A], Either[EE, B]],
) -> Either[E | EE, B]:
    """Chain a dependent computation that only runs after a Right.

    The result of ``f`` is returned as is, without re-wrapping.
    """
    match either:
        case Right(value):
            return f(value)
        case Left():
            return either
        case _:
            not_an_either(either)


def or_else[E, EE, A, B](
    either: Either[E, A],
    alternative: Callable[[], Either[EE, B]],
) -> Either[EE, A | B]:
    """Fall back to ``alternative()`` when ``either`` is a Left.

    ``alternative`` is a thunk and is never called for a Right.
    """
    match either:
        case Right():
            return either
        case Left():
            return alternative()
        case _:
            not_an_either(either)


def map_left[E, F, A](either: Either[E, A], f: Callable[[E], F]) -> Either[F, A]:
    """Apply ``f`` to a Left payload; a Right passes through untouched."""
    match either:
        case Left(value):
            return Left(f(value))
        case Right():
            return either
        case _:
            not_an_either(either)


def fold[E, A, T](
    either: Either[E, A],
    on_left: Callable[[E], T],
    on_right: Callable[[A], T],
) -> T:
    """Collapse an Either into one value by handling both variants."""
    match either:
        case Left(value):
            return on_left(value)
        case Right(value):
            return on_right(value)
        case _:
            not_an_either(either)


def get_or_else[E, A, D](either: Either[E, A], default: D) -> A | D:
    """Get Right value or return default."""
    match either:
        case Right(value):
            return value
        case Left():
            return default
        case _:
            not_an_either(either)


def swap[E, A](either: Either[E, A]) -> Either[A, E]:
    """Exchange the variants, keeping the payload."""
    match either:
        case Left(value):
            return Right(value)
        case Right(value):
            return Left(value)
        case _:
            not_an_either(either)


__all__ = [
    "flat_map",
    "fold",
    "get_or_else",
    "map_left",
    "map_right",
    "or_else",
    "swap",
]
