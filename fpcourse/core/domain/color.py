"""
Color — закрытое перечисление из четырёх значений

Урок 8: data Color = Red | Green | Blue | Yellow

Значения различимы между собой, упорядочены в порядке объявления
и перечислимы (аналог deriving (Eq, Ord, Enum, Bounded)).
"""

from enum import Enum
from typing import Final, List, Tuple

from fpcourse.core.errors import error


# =============================================================================
# ENUMS
# =============================================================================


class Color(str, Enum):
    """Цвет (порядок объявления значим)"""

    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"
    YELLOW = "Yellow"

    def __str__(self) -> str:
        return self.value

    @property
    def ordinal(self) -> int:
        """Позиция в порядке объявления (fromEnum)."""
        return _ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.ordinal < other.ordinal

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.ordinal <= other.ordinal

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.ordinal > other.ordinal

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.ordinal >= other.ordinal


_ORDER: Final[Tuple[Color, ...]] = tuple(Color)

# RGB-компоненты для каждого значения
_RGB: Final[dict] = {
    Color.RED: (255, 0, 0),
    Color.GREEN: (0, 255, 0),
    Color.BLUE: (0, 0, 255),
    Color.YELLOW: (255, 255, 0),
}


# =============================================================================
# ENUM / BOUNDED
# =============================================================================


def all_colors() -> List[Color]:
    """[minBound .. maxBound]"""
    return list(_ORDER)


def min_bound() -> Color:
    return _ORDER[0]


def max_bound() -> Color:
    return _ORDER[-1]


def to_enum(ordinal: int) -> Color:
    """
    Значение по позиции (toEnum).

    Raises:
        ProgramError: если позиция вне [0, 3]
    """
    if not 0 <= ordinal < len(_ORDER):
        error(f"Color.toEnum: bad argument {ordinal}")
    return _ORDER[ordinal]


def succ(color: Color) -> Color:
    """
    Следующее значение.

    Raises:
        ProgramError: для последнего значения (у maxBound нет преемника)
    """
    if color is max_bound():
        error("Color.succ: bad argument")
    return _ORDER[color.ordinal + 1]


def pred(color: Color) -> Color:
    """
    Предыдущее значение.

    Raises:
        ProgramError: для первого значения
    """
    if color is min_bound():
        error("Color.pred: bad argument")
    return _ORDER[color.ordinal - 1]


# =============================================================================
# PATTERN MATCHING
# =============================================================================


def is_primary(color: Color) -> bool:
    """Основной цвет RGB-модели."""
    match color:
        case Color.RED | Color.GREEN | Color.BLUE:
            return True
        case Color.YELLOW:
            return False


def to_rgb(color: Color) -> Tuple[int, int, int]:
    return _RGB[color]
