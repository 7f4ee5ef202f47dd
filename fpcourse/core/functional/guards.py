"""
Guards — ветвление по условиям, проверяемым по порядку

Урок 5:
    bmiTell weight height
      | bmi <= skinny = "underweight"
      | bmi <= normal = "normal"
      | bmi <= fat    = "overweight"
      | otherwise     = "obese"
      where bmi = weight / height ^ 2
            (skinny, normal, fat) = (18.5, 25.0, 30.0)

Guard — пара (условие, результат). Условия проверяются сверху вниз,
срабатывает первое истинное. Если не сработало ни одно и ветки otherwise нет,
это ошибка программиста: NonExhaustiveGuardsError.
"""

from typing import Any, Callable, Final, Tuple

from fpcourse.core.errors import NonExhaustiveGuardsError

Guard = Tuple[Callable[..., bool], Callable[..., Any]]

# Границы индекса массы тела (where-связывания bmiTell)
BMI_SKINNY: Final[float] = 18.5
BMI_NORMAL: Final[float] = 25.0
BMI_FAT: Final[float] = 30.0


def otherwise(*args: Any) -> bool:
    """Всегда истинное условие: последняя ветка guard-цепочки."""
    return True


def guarded(*branches: Guard, name: str = "<guarded>") -> Callable[..., Any]:
    """
    Построение функции из упорядоченных guard-веток.

    Args:
        *branches: Пары (predicate, result_fn); оба получают аргументы вызова
        name: Имя функции для сообщения об ошибке

    Returns:
        Функция, возвращающая result_fn(*args) первой ветки с истинным predicate

    Examples:
        >>> sign = guarded(
        ...     (lambda x: x < 0, lambda x: -1),
        ...     (lambda x: x == 0, lambda x: 0),
        ...     (otherwise, lambda x: 1),
        ... )
        >>> sign(-5)
        -1
    """
    if not branches:
        raise ValueError("guarded requires at least one branch")

    def dispatch(*args: Any) -> Any:
        for predicate, result_fn in branches:
            if predicate(*args):
                return result_fn(*args)
        raise NonExhaustiveGuardsError(name, args)

    dispatch.__name__ = name
    return dispatch


# =============================================================================
# EXAMPLES
# =============================================================================


signum = guarded(
    (lambda x: x < 0, lambda x: -1),
    (lambda x: x == 0, lambda x: 0),
    (otherwise, lambda x: 1),
    name="signum",
)


def bmi_tell(weight: float, height: float) -> str:
    """
    Оценка индекса массы тела.

    bmi — локальное связывание (where): вычисляется один раз
    и видно всем guard-веткам, но не снаружи функции.
    """
    bmi = weight / height**2
    return guarded(
        (lambda: bmi <= BMI_SKINNY, lambda: "underweight"),
        (lambda: bmi <= BMI_NORMAL, lambda: "normal"),
        (lambda: bmi <= BMI_FAT, lambda: "overweight"),
        (otherwise, lambda: "obese"),
        name="bmi_tell",
    )()


def max_of(a: Any, b: Any) -> Any:
    """max' a b | a > b = a | otherwise = b"""
    return guarded(
        (lambda x, y: x > y, lambda x, y: x),
        (otherwise, lambda x, y: y),
        name="max_of",
    )(a, b)


def compare_values(a: Any, b: Any) -> str:
    """Аналог compare: "GT", "EQ" или "LT"."""
    return guarded(
        (lambda x, y: x > y, lambda x, y: "GT"),
        (lambda x, y: x == y, lambda x, y: "EQ"),
        (lambda x, y: x < y, lambda x, y: "LT"),
        name="compare_values",
    )(a, b)


def grade(score: int) -> str:
    """Без ветки otherwise: для score вне [0, 100] guards не исчерпывающие."""
    return guarded(
        (lambda s: 90 <= s <= 100, lambda s: "A"),
        (lambda s: 75 <= s < 90, lambda s: "B"),
        (lambda s: 50 <= s < 75, lambda s: "C"),
        (lambda s: 0 <= s < 50, lambda s: "F"),
        name="grade",
    )(score)
