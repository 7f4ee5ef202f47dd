"""
Either — результат вычисления, которое может завершиться неудачей

Урок 8: data Either a b = Left a | Right b

По соглашению Left несёт описание ошибки, Right — успешный результат.

ИНВАРИАНТЫ:
1. Присутствует ровно один payload: Left хранит только error, Right только value
2. Базовый тип Either не инстанцируется
3. either() требует обработчики для обоих случаев
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, Tuple, Type, TypeVar, Union

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")


# =============================================================================
# TYPES
# =============================================================================


class Either(Generic[L, R]):
    """Абстрактный тип: экземпляры только Left(error) или Right(value)."""

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any):
        if cls is Either:
            raise TypeError("Either is abstract: use Left(error) or Right(value)")
        return super().__new__(cls)

    def __str__(self) -> str:
        from fpcourse.core.functional.parsing import show  # noqa: PLC0415

        return show(self)


@dataclass(frozen=True)
class Left(Either[L, Any]):
    """Неудача с описанием ошибки."""

    error: L


@dataclass(frozen=True)
class Right(Either[Any, R]):
    """Успешный результат."""

    value: R


# Закрытое объединение форм для статической проверки полноты match
EitherForm = Union[Left[L], Right[R]]


# =============================================================================
# OPERATIONS
# =============================================================================


def is_left(e: Either[L, R]) -> bool:
    return isinstance(e, Left)


def is_right(e: Either[L, R]) -> bool:
    return isinstance(e, Right)


def either(on_left: Callable[[L], T], on_right: Callable[[R], T], e: Either[L, R]) -> T:
    """
    Свёртка Either.

    Обработчики обоих случаев — обязательные позиционные аргументы,
    поэтому потребитель не может "забыть" про ветку ошибки.

    Args:
        on_left: Обработчик ошибки
        on_right: Обработчик успешного значения
        e: Разбираемое значение

    Returns:
        Результат ровно одного из обработчиков
    """
    match e:
        case Left(error=err):
            return on_left(err)
        case Right(value=v):
            return on_right(v)
    raise TypeError(f"not an Either: {e!r}")


def fmap(f: Callable[[R], T], e: Either[L, R]) -> Either[L, T]:
    """Применяет f к успешному значению, Left проходит без изменений."""
    return either(lambda err: e, lambda v: Right(f(v)), e)


def map_left(f: Callable[[L], T], e: Either[L, R]) -> Either[T, R]:
    return either(lambda err: Left(f(err)), lambda v: e, e)


def bind(e: Either[L, R], f: Callable[[R], Either[L, T]]) -> Either[L, T]:
    """e >>= f: первая ошибка прерывает цепочку."""
    return either(lambda err: e, f, e)


def from_left(default: L, e: Either[L, R]) -> L:
    return either(lambda err: err, lambda v: default, e)


def from_right(default: R, e: Either[L, R]) -> R:
    return either(lambda err: default, lambda v: v, e)


def lefts(es: Iterable[Either[L, R]]) -> List[L]:
    return [e.error for e in es if isinstance(e, Left)]


def rights(es: Iterable[Either[L, R]]) -> List[R]:
    return [e.value for e in es if isinstance(e, Right)]


def partition_eithers(es: Iterable[Either[L, R]]) -> Tuple[List[L], List[R]]:
    """Разделение на ошибки и результаты с сохранением порядка."""
    errors: List[L] = []
    values: List[R] = []
    for e in es:
        match e:
            case Left(error=err):
                errors.append(err)
            case Right(value=v):
                values.append(v)
            case _:
                raise TypeError(f"not an Either: {e!r}")
    return errors, values


def try_either(
    fn: Callable[..., R],
    *args: Any,
    exceptions: Tuple[Type[BaseException], ...] = (ArithmeticError, ValueError),
) -> Either[str, R]:
    """
    Граница с кодом, который сообщает об ошибках исключениями.

    Перехватываются только перечисленные exceptions, остальные пропагируют.

    Returns:
        Right(fn(*args)) или Left(текст исключения)
    """
    try:
        return Right(fn(*args))
    except exceptions as exc:
        return Left(str(exc))


def safe_divide(x: float, y: float) -> Either[str, float]:
    """Деление с явной ошибкой вместо исключения."""
    if y == 0:
        return Left("divide by zero")
    return Right(x / y)
