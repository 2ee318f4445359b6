"""
Core Either algebra.

Layers, leaf first: ``either`` (the union and its variant queries),
``combinators`` (single-value transformations), ``aggregate``
(``sequence``/``traverse`` over ordered inputs) and ``builder`` (fluent
composition on top of the combinators).
"""

from .aggregate import sequence, traverse
from .builder import EitherBuilder, chain
from .combinators import (
    flat_map,
    fold,
    get_or_else,
    map_left,
    map_right,
    or_else,
    swap,
)
from .either import Either, Left, Right, attempt, left, right

__all__ = [
    "Either",
    "EitherBuilder",
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
