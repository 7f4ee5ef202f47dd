"""
Lazy — отложенные вычисления

Урок 3: выражение вычисляется только тогда, когда его значение потребовалось.

Python вычисляет аргументы строго, поэтому отложенность выражается явно:
Thunk оборачивает вычисление без аргументов и выполняет его не более одного
раза при первом force(). Бесконечные последовательности — генераторы,
из которых берётся конечный префикс.

ИНВАРИАНТЫ:
1. Thunk вычисляется не более одного раза (результат мемоизируется)
2. Непотребованный Thunk не вычисляется никогда
3. Исключение при вычислении не мемоизируется: повторный force() повторит попытку
"""

import itertools
from typing import Callable, Generic, Iterable, Iterator, List, TypeVar, Union

T = TypeVar("T")

_UNEVALUATED = object()


# =============================================================================
# THUNK
# =============================================================================


class Thunk(Generic[T]):
    """Отложенное значение с мемоизацией."""

    __slots__ = ("_compute", "_value", "force_count")

    def __init__(self, compute: Callable[[], T]):
        self._compute = compute
        self._value = _UNEVALUATED
        # Сколько раз вычисление действительно выполнялось
        self.force_count = 0

    @property
    def is_evaluated(self) -> bool:
        return self._value is not _UNEVALUATED

    def force(self) -> T:
        if self._value is _UNEVALUATED:
            self.force_count += 1
            self._value = self._compute()
            # Замыкание больше не нужно
            self._compute = None
        return self._value

    def __repr__(self) -> str:
        if self.is_evaluated:
            return f"Thunk({self._value!r})"
        return "Thunk(<unevaluated>)"


def delay(compute: Callable[[], T]) -> Thunk[T]:
    return Thunk(compute)


def force(value: Union[Thunk[T], T]) -> T:
    """Значение Thunk или само значение, если оно уже вычислено."""
    if isinstance(value, Thunk):
        return value.force()
    return value


# =============================================================================
# LAZY GUARDED DIVISION
# =============================================================================


def lazy_safe_div(x: int, y: int) -> int:
    """
    Деление с защитой, где частное определено до проверки.

    В ленивом языке:
        safeDiv x y = if y == 0 then 0 else q
          where q = x `div` y

    q связано раньше проверки, но не вычисляется, пока не потребовалось.
    Для (1, 0) результат 0, деление на ноль не происходит.
    """
    quotient = delay(lambda: x // y)
    if y == 0:
        return 0
    return quotient.force()


# =============================================================================
# INFINITE SEQUENCES
# =============================================================================


def iterate(f: Callable[[T], T], x: T) -> Iterator[T]:
    """iterate f x == [x, f x, f (f x), ...]"""
    while True:
        yield x
        x = f(x)


def repeat(x: T) -> Iterator[T]:
    return itertools.repeat(x)


def cycle(xs: Iterable[T]) -> Iterator[T]:
    return itertools.cycle(xs)


def naturals(start: int = 0) -> Iterator[int]:
    """[start ..]"""
    return itertools.count(start)


def take(n: int, xs: Iterable[T]) -> List[T]:
    """Конечный префикс (возможно бесконечной) последовательности."""
    return list(itertools.islice(xs, max(n, 0)))


def take_while(p: Callable[[T], bool], xs: Iterable[T]) -> List[T]:
    return list(itertools.takewhile(p, xs))


def drop_while(p: Callable[[T], bool], xs: Iterable[T]) -> Iterator[T]:
    return itertools.dropwhile(p, xs)
