"""
Recursion — рекурсия как единственная конструкция цикла

Урок 4: циклов нет, повторение выражается рекурсией. Хвостовой вызов
с аккумулятором превращается компилятором в цикл.

Python не устраняет хвостовые вызовы, поэтому хвостовая форма записывается
явно: функция возвращает TailCall вместо вызова себя, а trampoline
раскручивает цепочку в цикле. Глубина стека постоянна и не зависит от входа.

    factorial n = go n 1
      where go 0 acc = acc
            go k acc = go (k - 1) (k * acc)
"""

import functools
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Tuple, TypeVar

from fpcourse.core.errors import error

T = TypeVar("T")


# =============================================================================
# TRAMPOLINE
# =============================================================================


@dataclass(frozen=True)
class TailCall:
    """Отложенный хвостовой вызов: что вызвать и с какими аргументами."""

    fn: Callable[..., Any]
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)


def tail_call(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> TailCall:
    return TailCall(fn, args, kwargs)


def trampoline(fn: Callable[..., Any]) -> Callable[..., Any]:
    """
    Декоратор: выполняет функцию, раскручивая возвращаемые TailCall в цикле.

    Внутри тела хвостовой вызов записывается как tail_call(step, ...) где step —
    недекорированная функция шага (доступна как wrapper.step).
    """

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        result = fn(*args, **kwargs)
        while isinstance(result, TailCall):
            result = result.fn(*result.args, **result.kwargs)
        return result

    wrapper.step = fn
    return wrapper


# =============================================================================
# EXAMPLES
# =============================================================================


def _factorial_go(k: int, acc: int) -> Any:
    if k <= 1:
        return acc
    return tail_call(_factorial_go, k - 1, k * acc)


def factorial(n: int) -> int:
    """
    Факториал через хвостовую рекурсию с аккумулятором.

    Args:
        n: Неотрицательное целое

    Returns:
        n! (factorial(0) == factorial(1) == 1)

    Raises:
        ProgramError: для отрицательного n
    """
    if n < 0:
        error(f"factorial: negative argument {n}")
    return trampoline(_factorial_go)(n, 1)


def naive_factorial(n: int) -> int:
    """
    Факториал без аккумулятора: умножение выполняется после возврата вызова.

    Каждый уровень занимает кадр стека, большие n приводят к RecursionError.
    """
    if n < 0:
        error(f"factorial: negative argument {n}")
    if n <= 1:
        return 1
    return n * naive_factorial(n - 1)


def _fibonacci_go(k: int, a: int, b: int) -> Any:
    if k == 0:
        return a
    return tail_call(_fibonacci_go, k - 1, b, a + b)


def fibonacci(n: int) -> int:
    """n-е число Фибоначчи (fib 0 = 0, fib 1 = 1), аккумулятор — пара (a, b)."""
    if n < 0:
        error(f"fibonacci: negative argument {n}")
    return trampoline(_fibonacci_go)(n, 0, 1)


def _sum_to_go(k: int, acc: int) -> Any:
    if k <= 0:
        return acc
    return tail_call(_sum_to_go, k - 1, acc + k)


def sum_to(n: int) -> int:
    """1 + 2 + ... + n"""
    return trampoline(_sum_to_go)(n, 0)


def _gcd_go(a: int, b: int) -> Any:
    if b == 0:
        return a
    return tail_call(_gcd_go, b, a % b)


def gcd(a: int, b: int) -> int:
    """Алгоритм Евклида: хвостовая рекурсия без аккумулятора."""
    return trampoline(_gcd_go)(abs(a), abs(b))
