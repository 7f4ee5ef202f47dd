"""
Point — точка на плоскости в двух формах конструирования

Урок 8: data Point = Cartesian Double Double | Polar Double Double

Immutable Pydantic модели. Каждая форма хранит ровно два числовых поля;
поле kind служит дискриминатором при разборе из словаря/JSON.
Любое "изменение" точки создаёт новый экземпляр.
"""

import math
from typing import Annotated, Any, Dict, Final, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator

# Абсолютная толерантность при геометрическом сравнении точек
EPS_POINT_COMPARE: Final[float] = 1e-9


# =============================================================================
# MODELS
# =============================================================================


class Cartesian(BaseModel):
    """Декартовы координаты (x, y)."""

    kind: Literal["cartesian"] = "cartesian"
    x: float = Field(..., description="Абсцисса")
    y: float = Field(..., description="Ордината")

    model_config = {"frozen": True}  # Immutable

    @field_validator("x", "y")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"coordinate must be finite, got {v}")
        return v

    def __str__(self) -> str:
        return f"Cartesian {self.x!r} {self.y!r}"


class Polar(BaseModel):
    """Полярные координаты (r, theta), theta в радианах."""

    kind: Literal["polar"] = "polar"
    r: float = Field(..., ge=0, description="Расстояние до начала координат")
    theta: float = Field(..., description="Угол в радианах")

    model_config = {"frozen": True}  # Immutable

    @field_validator("r", "theta")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """NaN/Inf не являются координатами."""
        if not math.isfinite(v):
            raise ValueError(f"coordinate must be finite, got {v}")
        return v

    def __str__(self) -> str:
        return f"Polar {self.r!r} {self.theta!r}"


Point = Annotated[Union[Cartesian, Polar], Field(discriminator="kind")]

_POINT_ADAPTER: TypeAdapter = TypeAdapter(Point)


# =============================================================================
# OPERATIONS
# =============================================================================


def parse_point(data: Dict[str, Any]) -> Union[Cartesian, Polar]:
    """
    Разбор точки из словаря по полю kind.

    Raises:
        pydantic.ValidationError: неизвестный kind или невалидные поля
    """
    return _POINT_ADAPTER.validate_python(data)


def distance_from_origin(point: Union[Cartesian, Polar]) -> float:
    """Расстояние до начала координат: сопоставление с образцом по форме."""
    match point:
        case Cartesian(x=x, y=y):
            return math.hypot(x, y)
        case Polar(r=r):
            return r
    raise TypeError(f"not a point: {point!r}")


def to_cartesian(point: Union[Cartesian, Polar]) -> Cartesian:
    match point:
        case Cartesian():
            return point
        case Polar(r=r, theta=theta):
            return Cartesian(x=r * math.cos(theta), y=r * math.sin(theta))
    raise TypeError(f"not a point: {point!r}")


def to_polar(point: Union[Cartesian, Polar]) -> Polar:
    match point:
        case Polar():
            return point
        case Cartesian(x=x, y=y):
            return Polar(r=math.hypot(x, y), theta=math.atan2(y, x))
    raise TypeError(f"not a point: {point!r}")


def translate(point: Union[Cartesian, Polar], dx: float, dy: float) -> Cartesian:
    """Сдвиг точки; результат всегда в декартовой форме."""
    c = to_cartesian(point)
    return Cartesian(x=c.x + dx, y=c.y + dy)


def same_point(a: Union[Cartesian, Polar], b: Union[Cartesian, Polar], eps: float = EPS_POINT_COMPARE) -> bool:
    """
    Геометрическое равенство точек независимо от формы.

    Структурное равенство (==) различает Cartesian 0 1 и Polar 1 (pi/2),
    эта функция сравнивает их после приведения к декартовой форме.
    """
    ca = to_cartesian(a)
    cb = to_cartesian(b)
    return math.isclose(ca.x, cb.x, abs_tol=eps) and math.isclose(ca.y, cb.y, abs_tol=eps)
