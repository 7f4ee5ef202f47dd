"""
Domain models and algebraic data types.

Contains the course data types: Point, Color, Maybe, Either, FList.
"""

from fpcourse.core.domain.color import Color, all_colors, is_primary, max_bound, min_bound, pred, succ, to_enum, to_rgb
from fpcourse.core.domain.either import Either, EitherForm, Left, Right, lefts, partition_eithers, rights
from fpcourse.core.domain.fp_list import NIL, Cons, FList, Nil, cons, flist, from_iterable
from fpcourse.core.domain.maybe import NOTHING, Just, Maybe, MaybeForm, Nothing, from_maybe
from fpcourse.core.domain.point import (
    Cartesian,
    Point,
    Polar,
    distance_from_origin,
    parse_point,
    to_cartesian,
    to_polar,
)

__all__ = [
    # Color
    "Color",
    "all_colors",
    "is_primary",
    "max_bound",
    "min_bound",
    "pred",
    "succ",
    "to_enum",
    "to_rgb",
    # Either
    "Either",
    "EitherForm",
    "Left",
    "Right",
    "lefts",
    "rights",
    "partition_eithers",
    # FList
    "FList",
    "Cons",
    "Nil",
    "NIL",
    "cons",
    "flist",
    "from_iterable",
    # Maybe
    "Maybe",
    "MaybeForm",
    "Just",
    "Nothing",
    "NOTHING",
    "from_maybe",
    # Point
    "Point",
    "Cartesian",
    "Polar",
    "distance_from_origin",
    "parse_point",
    "to_cartesian",
    "to_polar",
]
