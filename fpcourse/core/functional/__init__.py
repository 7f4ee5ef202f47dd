"""
Functional primitives used by the lessons.

Отложенные вычисления, хвостовая рекурсия, guards, каррирование,
композиция, инфиксная запись, описание типов и show/read.
"""

# Laziness
from fpcourse.core.functional.lazy import Thunk, delay, force, iterate, lazy_safe_div, take

# Recursion
from fpcourse.core.functional.recursion import TailCall, factorial, tail_call, trampoline

# Guards
from fpcourse.core.functional.guards import guarded, otherwise

# Currying
from fpcourse.core.functional.currying import Curried, curry, flip, uncurry

# Composition
from fpcourse.core.functional.composition import compose, const, identity, pipe

# Text
from fpcourse.core.functional.text import count_lower_case, count_lower_or_digit, count_matching

# Infix
from fpcourse.core.functional.infix import Infix, prefix, section_left, section_right

# Types / show / read
from fpcourse.core.functional.types import annotation_name, describe_type
from fpcourse.core.functional.parsing import read, read_maybe, show

__all__ = [
    # Laziness
    "Thunk",
    "delay",
    "force",
    "iterate",
    "lazy_safe_div",
    "take",
    # Recursion
    "TailCall",
    "factorial",
    "tail_call",
    "trampoline",
    # Guards
    "guarded",
    "otherwise",
    # Currying
    "Curried",
    "curry",
    "flip",
    "uncurry",
    # Composition
    "compose",
    "const",
    "identity",
    "pipe",
    # Text
    "count_lower_case",
    "count_lower_or_digit",
    "count_matching",
    # Infix
    "Infix",
    "prefix",
    "section_left",
    "section_right",
    # Types / show / read
    "annotation_name",
    "describe_type",
    "read",
    "read_maybe",
    "show",
]
