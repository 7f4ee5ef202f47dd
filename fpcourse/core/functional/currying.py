"""
Currying — функции нескольких аргументов как цепочки функций одного аргумента

Урок 7:
    add :: Int -> Int -> Int
    add x y = x + y

    addThree = add 3      -- частичное применение
    addThree 4            -- 7

curry() превращает обычную функцию Python в каррированную: её можно вызывать
по одному аргументу, несколькими сразу или всеми, каждый неполный вызов
возвращает новую функцию, ожидающую оставшиеся аргументы.
"""

import inspect
from typing import Any, Callable, List, Optional, Tuple


class Curried:
    """
    Каррированная функция с уже применёнными аргументами.

    Immutable: каждое применение создаёт новый Curried,
    исходный можно переиспользовать.
    """

    __slots__ = ("fn", "arity", "applied")

    def __init__(self, fn: Callable[..., Any], arity: int, applied: Tuple[Any, ...] = ()):
        if arity < 1:
            raise ValueError(f"curry requires arity >= 1, got {arity}")
        self.fn = fn
        self.arity = arity
        self.applied = applied

    @property
    def remaining(self) -> int:
        return self.arity - len(self.applied)

    @property
    def __name__(self) -> str:
        return getattr(self.fn, "__name__", "<curried>")

    def remaining_parameters(self) -> List[inspect.Parameter]:
        """Параметры исходной функции, которые ещё не применены."""
        params = _positional_parameters(self.fn)
        return params[len(self.applied):self.arity]

    def __call__(self, *args: Any) -> Any:
        if not args:
            raise TypeError(f"{self.__name__}: curried function called without arguments")
        if len(args) > self.remaining:
            raise TypeError(
                f"{self.__name__}: expected at most {self.remaining} argument(s), got {len(args)}"
            )
        applied = self.applied + args
        if len(applied) == self.arity:
            return self.fn(*applied)
        return Curried(self.fn, self.arity, applied)

    def __repr__(self) -> str:
        return f"<curried {self.__name__} {len(self.applied)}/{self.arity}>"


def _positional_parameters(fn: Callable[..., Any]) -> List[inspect.Parameter]:
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return []
    return [
        p
        for p in signature.parameters.values()
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
    ]


def curry(fn: Optional[Callable[..., Any]] = None, *, arity: Optional[int] = None) -> Any:
    """
    Декоратор каррирования.

    Args:
        fn: Исходная функция
        arity: Число аргументов; по умолчанию — число обязательных позиционных параметров

    Examples:
        >>> @curry
        ... def add(x: int, y: int) -> int:
        ...     return x + y
        >>> add(1)(2) == add(1, 2) == 3
        True
    """

    def decorate(f: Callable[..., Any]) -> Curried:
        n = arity
        if n is None:
            n = len([p for p in _positional_parameters(f) if p.default is p.empty])
        return Curried(f, n)

    if fn is None:
        return decorate
    return decorate(fn)


def uncurry(f: Callable[[Any], Any]) -> Callable[[Tuple[Any, Any]], Any]:
    """uncurry f (a, b) = f a b"""

    def uncurried(pair: Tuple[Any, Any]) -> Any:
        a, b = pair
        return f(a)(b)

    return uncurried


def curry_pair(f: Callable[[Tuple[Any, Any]], Any]) -> Curried:
    """curry f a b = f (a, b): обратное к uncurry."""
    return Curried(lambda a, b: f((a, b)), 2)


def flip(f: Callable[..., Any]) -> Curried:
    """flip f x y = f y x"""
    return Curried(lambda x, y: f(y, x), 2)


# =============================================================================
# EXAMPLES
# =============================================================================


@curry
def add(x: int, y: int) -> int:
    return x + y


@curry
def multiply_three(x: int, y: int, z: int) -> int:
    return x * y * z


@curry
def subtract(x: int, y: int) -> int:
    return x - y
