"""
Parsing — текстовое представление значений и разбор из строки

Урок 10:
    show (Just 5)                   -- "Just 5"
    read "Just 5" :: Maybe Int      -- Just 5
    read "[1,2,3]" :: [Int]         -- [1,2,3]

show() и read() согласованы: для поддерживаемых типов
read(show(x), T) == x. Формат совпадает с тем, как значения записываются
в исходном коде: конструктор и его аргументы через пробел, составные
аргументы в скобках.

Поддерживаемые цели read: int, float, bool, str, None, Color, Point
(Cartesian/Polar), Maybe[T], Either[L, R], list[T], FList[T], tuple[...], Any.
Any выводит тип по самому тексту.
"""

import json
import math
import re
import types
import typing
from dataclasses import dataclass
from typing import Any, Final, FrozenSet, List, Optional, Tuple

from pydantic import ValidationError

from fpcourse.core.domain.color import Color
from fpcourse.core.domain.either import Either, Left, Right
from fpcourse.core.domain.fp_list import FList, from_iterable
from fpcourse.core.domain.maybe import NOTHING, Just, Maybe, Nothing
from fpcourse.core.domain.point import Cartesian, Polar
from fpcourse.core.errors import ReadError
from fpcourse.core.functional.types import annotation_name

_TOKEN_RE: Final = re.compile(
    r"""
      (?P<string>"(?:[^"\\]|\\.)*")
    | (?P<number>-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?|-?Infinity\b|NaN\b)
    | (?P<ident>[A-Za-z_][A-Za-z0-9_']*)
    | (?P<punct>[()\[\],])
    """,
    re.VERBOSE,
)

# Конструкторы с аргументами: в позиции аргумента требуют скобок
_APPLIED_CONSTRUCTORS: Final[FrozenSet[str]] = frozenset({"Just", "Left", "Right", "Cartesian", "Polar"})

_INTEGRAL_RE: Final = re.compile(r"-?\d+")


# =============================================================================
# SHOW
# =============================================================================


def show(value: Any) -> str:
    """
    Текстовое представление значения.

    Examples:
        >>> show(Just(-3))
        'Just (-3)'
        >>> show((1, "a"))
        '(1,"a")'
    """
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, Color):
        return value.value
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if value is None:
        return "()"
    if isinstance(value, tuple):
        return "(" + ",".join(show(x) for x in value) + ")"
    if isinstance(value, (list, FList)):
        return "[" + ",".join(show(x) for x in value) + "]"
    if isinstance(value, Cartesian):
        return f"Cartesian {_show_arg(value.x)} {_show_arg(value.y)}"
    if isinstance(value, Polar):
        return f"Polar {_show_arg(value.r)} {_show_arg(value.theta)}"
    if isinstance(value, Just):
        return f"Just {_show_arg(value.value)}"
    if isinstance(value, Nothing):
        return "Nothing"
    if isinstance(value, Left):
        return f"Left {_show_arg(value.error)}"
    if isinstance(value, Right):
        return f"Right {_show_arg(value.value)}"
    return repr(value)


def _show_arg(value: Any) -> str:
    """show в позиции аргумента конструктора."""
    text = show(value)
    if text.startswith("-") or (" " in text and text[0] not in "([\""):
        return f"({text})"
    return text


# =============================================================================
# READ
# =============================================================================


@dataclass(frozen=True)
class _Token:
    kind: str
    text: str


def _tokenize(text: str, target_name: str) -> List[_Token]:
    tokens: List[_Token] = []
    pos = 0
    while True:
        while pos < len(text) and text[pos].isspace():
            pos += 1
        if pos >= len(text):
            return tokens
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            raise ReadError(text, target_name, f"unexpected character {text[pos]!r}")
        tokens.append(_Token(kind=match.lastgroup, text=match.group(match.lastgroup)))
        pos = match.end()


class _Parser:
    """Разбор по типу-цели методом рекурсивного спуска."""

    def __init__(self, text: str, target_name: str):
        self.text = text
        self.target_name = target_name
        self.tokens = _tokenize(text, target_name)
        self.pos = 0

    # --- tokens ---------------------------------------------------------------

    def fail(self, reason: str = "no parse") -> ReadError:
        return ReadError(self.text, self.target_name, reason)

    def peek(self) -> Optional[_Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> _Token:
        token = self.peek()
        if token is None:
            raise self.fail("unexpected end of input")
        self.pos += 1
        return token

    def expect(self, text: str) -> None:
        token = self.advance()
        if token.text != text:
            raise self.fail(f"expected {text!r}, got {token.text!r}")

    def at(self, text: str) -> bool:
        token = self.peek()
        return token is not None and token.text == text

    def finish(self) -> None:
        token = self.peek()
        if token is not None:
            raise self.fail(f"unexpected {token.text!r} after value")

    # --- values ---------------------------------------------------------------

    def parse(self, target: Any) -> Any:
        origin = typing.get_origin(target)
        args = typing.get_args(target)

        if origin is typing.Annotated:
            return self.parse(args[0])
        if target is Any:
            return self.parse_any()
        if origin is tuple or target is type(None):
            return self.parse_structural(target, origin, args)

        # Лишние скобки вокруг значения допустимы
        if self.at("("):
            self.advance()
            value = self.parse(target)
            self.expect(")")
            return value
        return self.parse_structural(target, origin, args)

    def parse_arg(self, target: Any) -> Any:
        """Аргумент конструктора: составное значение должно быть в скобках."""
        token = self.peek()
        if token is not None and token.kind == "ident" and token.text in _APPLIED_CONSTRUCTORS:
            raise self.fail(f"constructor argument {token.text} must be parenthesized")
        return self.parse(target)

    def parse_structural(self, target: Any, origin: Any, args: Tuple[Any, ...]) -> Any:
        if target is bool:
            return self.parse_bool()
        if target is int:
            return self.parse_int()
        if target is float:
            return self.parse_float()
        if target is str:
            return self.parse_str()
        if target is type(None):
            self.expect("(")
            self.expect(")")
            return None
        if target is Color:
            return self.parse_color()
        if target in (Cartesian, Polar):
            return self.parse_point((target,))
        if (origin is typing.Union or origin is types.UnionType) and set(args) == {Cartesian, Polar}:
            return self.parse_point((Cartesian, Polar))
        if origin is tuple:
            return self.parse_tuple(args)
        if origin is list or target is list:
            return self.parse_list(args[0] if args else Any)
        if _is_subclass(origin, FList) or _is_subclass(target, FList):
            return from_iterable(self.parse_list(args[0] if args else Any))
        if _is_subclass(origin, Maybe) or _is_subclass(target, Maybe):
            return self.parse_maybe(args[0] if args else Any)
        if _is_subclass(origin, Either) or _is_subclass(target, Either):
            left, right = args if args else (Any, Any)
            return self.parse_either(left, right)
        raise TypeError(f"read: unsupported target type {target!r}")

    def parse_bool(self) -> bool:
        token = self.advance()
        if token.text == "True":
            return True
        if token.text == "False":
            return False
        raise self.fail(f"expected Bool, got {token.text!r}")

    def parse_int(self) -> int:
        token = self.advance()
        if token.kind != "number" or not _INTEGRAL_RE.fullmatch(token.text):
            raise self.fail(f"expected Int, got {token.text!r}")
        return int(token.text)

    def parse_float(self) -> float:
        token = self.advance()
        if token.kind != "number":
            raise self.fail(f"expected Double, got {token.text!r}")
        return float(token.text)

    def parse_str(self) -> str:
        token = self.advance()
        if token.kind != "string":
            raise self.fail(f"expected String, got {token.text!r}")
        return json.loads(token.text)

    def parse_color(self) -> Color:
        token = self.advance()
        try:
            return Color(token.text)
        except ValueError:
            raise self.fail(f"expected Color, got {token.text!r}") from None

    def parse_point(self, forms: Tuple[type, ...]) -> Any:
        token = self.advance()
        names = {form.__name__: form for form in forms}
        form = names.get(token.text)
        if form is None:
            raise self.fail(f"expected {' or '.join(names)}, got {token.text!r}")
        a = self.parse_arg(float)
        b = self.parse_arg(float)
        try:
            if form is Cartesian:
                return Cartesian(x=a, y=b)
            return Polar(r=a, theta=b)
        except ValidationError as exc:
            raise self.fail(f"invalid {form.__name__}: {exc.errors()[0]['msg']}") from None

    def parse_maybe(self, inner: Any) -> Maybe:
        token = self.advance()
        if token.text == "Nothing":
            return NOTHING
        if token.text == "Just":
            return Just(self.parse_arg(inner))
        raise self.fail(f"expected Just or Nothing, got {token.text!r}")

    def parse_either(self, left: Any, right: Any) -> Either:
        token = self.advance()
        if token.text == "Left":
            return Left(self.parse_arg(left))
        if token.text == "Right":
            return Right(self.parse_arg(right))
        raise self.fail(f"expected Left or Right, got {token.text!r}")

    def parse_list(self, element: Any) -> List[Any]:
        self.expect("[")
        items: List[Any] = []
        if self.at("]"):
            self.advance()
            return items
        items.append(self.parse(element))
        while self.at(","):
            self.advance()
            items.append(self.parse(element))
        self.expect("]")
        return items

    def parse_tuple(self, elements: Tuple[Any, ...]) -> Tuple[Any, ...]:
        if len(elements) == 2 and elements[1] is Ellipsis:
            raise TypeError("read: variable-length tuple targets are not supported")
        self.expect("(")
        values = []
        for i, element in enumerate(elements):
            if i:
                self.expect(",")
            values.append(self.parse(element))
        self.expect(")")
        return tuple(values)

    def parse_any(self) -> Any:
        """Значение без заданного типа: вид определяется первым токеном."""
        token = self.peek()
        if token is None:
            raise self.fail("unexpected end of input")
        if token.kind == "number":
            self.advance()
            if _INTEGRAL_RE.fullmatch(token.text):
                return int(token.text)
            return float(token.text)
        if token.kind == "string":
            return self.parse_str()
        if token.text == "[":
            return self.parse_list(Any)
        if token.text == "(":
            return self.parse_paren_any()
        if token.text in ("True", "False"):
            return self.parse_bool()
        if token.text in ("Just", "Nothing"):
            return self.parse_maybe(Any)
        if token.text in ("Left", "Right"):
            return self.parse_either(Any, Any)
        if token.text in ("Cartesian", "Polar"):
            return self.parse_point((Cartesian, Polar))
        if token.kind == "ident":
            return self.parse_color()
        raise self.fail(f"unexpected {token.text!r}")

    def parse_paren_any(self) -> Any:
        """(), (x) или кортеж (x, y, ...)."""
        self.expect("(")
        if self.at(")"):
            self.advance()
            return None
        values = [self.parse_any()]
        while self.at(","):
            self.advance()
            values.append(self.parse_any())
        self.expect(")")
        if len(values) == 1:
            return values[0]
        return tuple(values)


def _is_subclass(tp: Any, base: type) -> bool:
    return isinstance(tp, type) and issubclass(tp, base)


def read(text: str, target: Any = Any) -> Any:
    """
    Разбор значения типа target из текста.

    Args:
        text: Текстовое представление (как его выдаёт show)
        target: Тип результата, например Maybe[int] или list[Color]

    Returns:
        Разобранное значение

    Raises:
        ReadError: текст не является значением типа target
        TypeError: тип target не поддерживается
    """
    parser = _Parser(text, annotation_name(target))
    value = parser.parse(target)
    parser.finish()
    return value


def read_maybe(text: str, target: Any = Any) -> Maybe:
    """readMaybe: Just(value) или NOTHING вместо ReadError."""
    try:
        return Just(read(text, target))
    except ReadError:
        return NOTHING
