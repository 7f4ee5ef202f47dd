"""
Types — обзор статической системы типов

Урок 6:
    5         :: Int
    2.5       :: Double
    "hello"   :: String
    (1, "a")  :: (Int, String)
    [1, 2, 3] :: [Int]
    add       :: Int -> Int -> Int

describe_type() строит такую запись для значения Python: примитивы,
кортежи, списки, типы курса (Maybe, Either, Point, Color) и функции.
Тип функции берётся из аннотаций; параметр без аннотации получает
переменную типа (a, b, c, ...). Используется командой :type в сессии.
"""

import collections.abc
import inspect
import types
import typing
from typing import Any, Callable, Dict, Final, Iterator, List, Optional, Union

from fpcourse.core.domain.color import Color
from fpcourse.core.domain.either import Either, Left, Right
from fpcourse.core.domain.fp_list import Cons, FList
from fpcourse.core.domain.maybe import Just, Maybe
from fpcourse.core.domain.point import Cartesian, Polar
from fpcourse.core.functional.currying import Curried
from fpcourse.core.functional.infix import Infix
from fpcourse.core.functional.lazy import Thunk

_PRIMITIVE_NAMES: Final[Dict[type, str]] = {
    bool: "Bool",
    int: "Int",
    float: "Double",
    complex: "Complex",
    str: "String",
    type(None): "()",
}


# Типы конструкторов, когда в :type передан сам конструктор
_CONSTRUCTOR_TYPES: Final[Dict[type, str]] = {
    Cartesian: "Double -> Double -> Point",
    Polar: "Double -> Double -> Point",
    Just: "a -> Maybe a",
    Left: "a -> Either a b",
    Right: "b -> Either a b",
    Cons: "a -> List a -> List a",
}


def _type_variables() -> Iterator[str]:
    """a, b, ..., z, a1, b1, ..."""
    letters = "abcdefghijklmnopqrstuvwxyz"
    round_no = 0
    while True:
        suffix = str(round_no) if round_no else ""
        for letter in letters:
            yield letter + suffix
        round_no += 1


def _wrap(name: str) -> str:
    """Скобки вокруг составного типа в позиции аргумента конструктора."""
    if " " in name and not (name.startswith("(") or name.startswith("[")):
        return f"({name})"
    return name


# =============================================================================
# ANNOTATIONS
# =============================================================================


def annotation_name(tp: Any) -> str:
    """
    Запись типа по аннотации Python.

    Examples:
        >>> annotation_name(int)
        'Int'
        >>> annotation_name(List[int])
        '[Int]'
        >>> annotation_name(Callable[[int], bool])
        '(Int -> Bool)'
    """
    if tp is Any:
        return "a"
    if isinstance(tp, typing.TypeVar):
        return tp.__name__.lower()
    if isinstance(tp, str):
        return tp

    origin = typing.get_origin(tp)
    args = typing.get_args(tp)

    if origin is typing.Annotated:
        return annotation_name(args[0])
    if origin is Union or origin is types.UnionType:
        if set(args) == {Cartesian, Polar}:
            return "Point"
        non_none = [a for a in args if a is not type(None)]
        if len(non_none) == 1 and len(args) == 2:
            return "Maybe " + _wrap(annotation_name(non_none[0]))
        return " | ".join(annotation_name(a) for a in args)
    if origin in (list, collections.abc.Sequence, collections.abc.Iterable):
        return f"[{annotation_name(args[0])}]" if args else "[a]"
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return f"[{annotation_name(args[0])}]"
        return "(" + ", ".join(annotation_name(a) for a in args) + ")"
    if origin is collections.abc.Callable:
        if not args:
            return "(a -> b)"
        params, ret = args
        if params is Ellipsis:
            return f"(a -> {annotation_name(ret)})"
        parts = [annotation_name(p) for p in params] + [annotation_name(ret)]
        return "(" + " -> ".join(parts) + ")"
    if inspect.isclass(origin):
        if issubclass(origin, Maybe):
            return "Maybe " + _wrap(annotation_name(args[0]))
        if issubclass(origin, Either):
            return "Either " + " ".join(_wrap(annotation_name(a)) for a in args)
        if issubclass(origin, FList):
            return "List " + _wrap(annotation_name(args[0]))
        if issubclass(origin, dict):
            return "Map " + " ".join(_wrap(annotation_name(a)) for a in args)

    if inspect.isclass(tp):
        if tp in _PRIMITIVE_NAMES:
            return _PRIMITIVE_NAMES[tp]
        if tp in (Cartesian, Polar):
            return "Point"
        if issubclass(tp, Maybe):
            return "Maybe a"
        if issubclass(tp, Either):
            return "Either a b"
        if issubclass(tp, FList):
            return "List a"
        if tp is list:
            return "[a]"
        return tp.__name__
    return str(tp)


# =============================================================================
# FUNCTIONS
# =============================================================================


def _type_hints(fn: Callable[..., Any]) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(fn)
    except (NameError, TypeError, AttributeError):
        return dict(getattr(fn, "__annotations__", {}) or {})


def describe_callable(
    fn: Callable[..., Any],
    parameters: Optional[List[inspect.Parameter]] = None,
) -> str:
    """
    Тип функции: аргументы слева направо, затем результат.

    Args:
        fn: Функция
        parameters: Учитываемые параметры (по умолчанию все позиционные)
    """
    if parameters is None:
        try:
            signature = inspect.signature(fn)
        except (TypeError, ValueError):
            return "a -> b"
        parameters = [
            p
            for p in signature.parameters.values()
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD, p.VAR_POSITIONAL)
        ]

    hints = _type_hints(fn)
    fresh = _type_variables()
    parts = []
    for param in parameters:
        if param.name in hints:
            parts.append(annotation_name(hints[param.name]))
        else:
            parts.append(next(fresh))
    if "return" in hints:
        ret = annotation_name(hints["return"])
    else:
        ret = next(fresh)

    if not parts:
        return f"() -> {ret}"
    return " -> ".join(parts + [ret])


# =============================================================================
# VALUES
# =============================================================================


def describe_type(value: Any) -> str:
    """
    Запись типа значения.

    Examples:
        >>> describe_type(5)
        'Int'
        >>> describe_type((1, "a"))
        '(Int, String)'
        >>> describe_type(Just(2.5))
        'Maybe Double'
    """
    if inspect.isclass(value) and value in _CONSTRUCTOR_TYPES:
        return _CONSTRUCTOR_TYPES[value]

    for primitive, name in _PRIMITIVE_NAMES.items():
        if type(value) is primitive:
            return name

    if isinstance(value, Color):
        return "Color"
    if isinstance(value, (Cartesian, Polar)):
        return "Point"
    if isinstance(value, tuple):
        return "(" + ", ".join(describe_type(x) for x in value) + ")"
    if isinstance(value, list):
        return f"[{describe_type(value[0])}]" if value else "[a]"
    if isinstance(value, FList):
        return "List " + _wrap(describe_type(value.head)) if isinstance(value, Cons) else "List a"
    if isinstance(value, Maybe):
        return "Maybe " + _wrap(describe_type(value.value)) if isinstance(value, Just) else "Maybe a"
    if isinstance(value, Left):
        return f"Either {_wrap(describe_type(value.error))} b"
    if isinstance(value, Right):
        return f"Either a {_wrap(describe_type(value.value))}"
    if isinstance(value, Thunk):
        return "Thunk " + (_wrap(describe_type(value.force())) if value.is_evaluated else "a")
    if isinstance(value, Curried):
        return describe_callable(value.fn, value.remaining_parameters())
    if isinstance(value, Infix):
        return describe_callable(value.fn)
    if callable(value):
        return describe_callable(value)
    return type(value).__name__
