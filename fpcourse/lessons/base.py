"""Base — общие типы уроков.

Урок — самостоятельная программа: run() вычисляет строки вывода и возвращает
их в LessonResult, ничего не печатая; main() печатает их в stdout.
Поэтому вывод каждого урока можно проверить без перехвата stdout.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Tuple

from fpcourse.core.functional.parsing import show


@dataclass(frozen=True)
class LessonResult:
    """Результат запуска урока."""

    lesson_id: int
    slug: str
    output: Tuple[str, ...]


class Transcript:
    """Накопитель строк вывода урока."""

    def __init__(self):
        self._lines: List[str] = []

    def say(self, *parts: Any) -> None:
        """Строка из частей через пробел (как print)."""
        self._lines.append(" ".join(str(p) for p in parts))

    def show(self, expression: str, value: Any) -> None:
        """Строка вида `<expression> = <show value>`."""
        self._lines.append(f"{expression} = {show(value)}")

    def lines(self) -> Tuple[str, ...]:
        return tuple(self._lines)


def lesson_main(run: Callable[[], LessonResult]) -> None:
    """Точка входа урока: напечатать вывод run()."""
    for line in run().output:
        print(line)
