"""
eitherkit: a two-variant ``Either`` type with a small combinator algebra.

``Left`` conventionally carries a failure and ``Right`` a result. Combinators
transform the Right side and pass a Left through; ``sequence`` and
``traverse`` collapse ordered inputs into one Either, first Left wins.
"""

from .core import (
    Either,
    EitherBuilder,
    Left,
    Right,
    attempt,
    chain,
    flat_map,
    fold,
    get_or_else,
    left,
    map_left,
    map_right,
    or_else,
    right,
    sequence,
    swap,
    traverse,
)
from .exceptions import ConfigurationError, EitherKitError, InvalidVariantAccess

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Either",
    "EitherBuilder",
    "EitherKitError",
    "InvalidVariantAccess",
    "Left",
    "Right",
    "attempt",
    "chain",
    "flat_map",
    "fold",
    "get_or_else",
    "left",
    "map_left",
    "map_right",
    "or_else",
    "right",
    "sequence",
    "swap",
    "traverse",
]
