"""LESSON 2: Bindings — связывание имён со значениями

    x = 5
    y = x * 2

    hypotenuseSquared a b = a2 + b2
      where a2 = a * a
            b2 = b * b

Связывание фиксировано в своей области видимости: имя не переприсваивается.
Локальное связывание (let/where) видно только внутри своего выражения и
перекрывает внешнее имя. Границы блоков задаёт отступ (layout), а не скобки.
"""

from types import MappingProxyType
from typing import Any, Mapping

from fpcourse.lessons.base import LessonResult, Transcript, lesson_main

LESSON_ID = 2
SLUG = "bindings"

x = 5
y = x * 2


def let(**bindings: Any) -> Mapping[str, Any]:
    """Окружение let-выражения: read-only отображение имён на значения."""
    return MappingProxyType(dict(bindings))


def hypotenuse_squared(a: int, b: int) -> int:
    # where
    a2 = a * a
    b2 = b * b
    return a2 + b2


def shadowed() -> int:
    x = 10  # перекрывает модульное x только внутри функции
    return x


def run() -> LessonResult:
    out = Transcript()

    out.show("x", x)
    out.show("y = x * 2", y)

    env = let(a=3, b=4)
    out.show("let a = 3; b = 4 in a * a + b * b", env["a"] * env["a"] + env["b"] * env["b"])

    out.show("hypotenuse_squared 6 8", hypotenuse_squared(6, 8))
    out.say(f"inner x = {shadowed()}, outer x = {x}")

    try:
        env["a"] = 6  # type: ignore[index]
    except TypeError as exc:
        out.say(f"rebinding a: {type(exc).__name__}")

    return LessonResult(lesson_id=LESSON_ID, slug=SLUG, output=out.lines())


def main() -> None:
    lesson_main(run)


if __name__ == "__main__":
    main()
