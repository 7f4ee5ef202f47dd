"""
Maybe — необязательное значение

Урок 8: data Maybe a = Nothing | Just a

Значение либо присутствует (Just), либо отсутствует (NOTHING).
Вместо None-проверок по всему коду отсутствие выражено типом,
и потребитель обязан разобрать оба случая.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


# =============================================================================
# TYPES
# =============================================================================


class Maybe(Generic[T]):
    """
    Абстрактный тип: экземпляры только Just(value) или NOTHING.

    Maybe[int] используется как аннотация и как цель для read().
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any):
        if cls is Maybe:
            raise TypeError("Maybe is abstract: use Just(value) or NOTHING")
        return super().__new__(cls)

    def __str__(self) -> str:
        from fpcourse.core.functional.parsing import show  # noqa: PLC0415

        return show(self)


@dataclass(frozen=True)
class Just(Maybe[T]):
    """Присутствующее значение."""

    value: T


@dataclass(frozen=True)
class Nothing(Maybe[Any]):
    """Отсутствие значения. Все экземпляры равны, используйте NOTHING."""

    def __str__(self) -> str:
        return "Nothing"


NOTHING: Nothing = Nothing()

# Закрытое объединение форм для статической проверки полноты match
MaybeForm = Union[Just[T], Nothing]


# =============================================================================
# OPERATIONS
# =============================================================================


def is_just(m: Maybe[T]) -> bool:
    return isinstance(m, Just)


def is_nothing(m: Maybe[T]) -> bool:
    return isinstance(m, Nothing)


def fmap(f: Callable[[T], U], m: Maybe[T]) -> Maybe[U]:
    """fmap f (Just x) = Just (f x); fmap f Nothing = Nothing"""
    match m:
        case Just(value=x):
            return Just(f(x))
        case Nothing():
            return NOTHING
    raise TypeError(f"not a Maybe: {m!r}")


def bind(m: Maybe[T], f: Callable[[T], Maybe[U]]) -> Maybe[U]:
    """m >>= f: цепочка вычислений, каждое из которых может не дать результата."""
    match m:
        case Just(value=x):
            return f(x)
        case Nothing():
            return NOTHING
    raise TypeError(f"not a Maybe: {m!r}")


def maybe(default: U, f: Callable[[T], U], m: Maybe[T]) -> U:
    """
    Свёртка Maybe: обязательно задать результат для обоих случаев.

    Args:
        default: Результат для NOTHING
        f: Функция для значения внутри Just
        m: Разбираемое значение
    """
    match m:
        case Just(value=x):
            return f(x)
        case Nothing():
            return default
    raise TypeError(f"not a Maybe: {m!r}")


def from_maybe(default: T, m: Maybe[T]) -> T:
    return maybe(default, lambda x: x, m)


def cat_maybes(ms: Iterable[Maybe[T]]) -> List[T]:
    """Значения из всех Just, NOTHING отбрасываются."""
    return [m.value for m in ms if isinstance(m, Just)]


def map_maybe(f: Callable[[T], Maybe[U]], xs: Iterable[T]) -> List[U]:
    return cat_maybes(f(x) for x in xs)


def to_optional(m: Maybe[T]) -> Optional[T]:
    return m.value if isinstance(m, Just) else None


def from_optional(value: Optional[T]) -> Maybe[T]:
    """Граница с кодом, где отсутствие выражено через None."""
    return NOTHING if value is None else Just(value)


def safe_div(x: int, y: int) -> Maybe[int]:
    """Целочисленное деление, которое не может упасть: при y == 0 — NOTHING."""
    if y == 0:
        return NOTHING
    return Just(x // y)
