"""
Composition — композиция функций и point-free стиль

Урок 11:
    (f . g) x = f (g x)

    countLowerCase = length . filter isLower

Point-free определение не называет аргумент: функция собирается
из других функций композицией.
"""

import functools
from typing import Any, Callable, TypeVar

T = TypeVar("T")


def identity(x: T) -> T:
    return x


def const(x: T) -> Callable[..., T]:
    """const x _ = x"""

    def constant(*_: Any) -> T:
        return x

    return constant


def _compose2(f: Callable[..., Any], g: Callable[..., Any]) -> Callable[..., Any]:
    def composed(*args: Any) -> Any:
        return f(g(*args))

    return composed


def compose(*fs: Callable[..., Any]) -> Callable[..., Any]:
    """
    Композиция справа налево: compose(f, g, h)(x) == f(g(h(x))).

    Самая правая функция может принимать несколько аргументов,
    остальные — ровно один. compose() без аргументов — identity.
    """
    if not fs:
        return identity
    return functools.reduce(_compose2, fs)


def pipe(*fs: Callable[..., Any]) -> Callable[..., Any]:
    """Композиция слева направо: pipe(h, g, f)(x) == f(g(h(x)))."""
    return compose(*reversed(fs))


def apply(f: Callable[[T], Any], x: T) -> Any:
    """f $ x"""
    return f(x)
