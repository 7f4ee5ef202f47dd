"""LESSON 3: Laziness — чистота, неизменяемость, ленивость

    safeDiv x y = if y == 0 then 0 else q
      where q = x `div` y

Чистая функция зависит только от аргументов: одинаковый вход — одинаковый
результат. Значения не изменяются. Выражение вычисляется, только когда его
значение потребовалось, поэтому safeDiv 1 0 возвращает 0: частное q
связано, но не вычисляется. По той же причине можно работать
с бесконечными последовательностями, беря из них конечный префикс.
"""

from fpcourse.core.functional.lazy import delay, iterate, lazy_safe_div, repeat, take
from fpcourse.lessons.base import LessonResult, Transcript, lesson_main

LESSON_ID = 3
SLUG = "laziness"


def square(n: int) -> int:
    return n * n


def run() -> LessonResult:
    out = Transcript()

    out.show("lazy_safe_div 1 0", lazy_safe_div(1, 0))
    out.show("lazy_safe_div 7 2", lazy_safe_div(7, 2))

    never_needed = delay(lambda: 1 // 0)
    out.say(f"unused thunk forced: {never_needed.is_evaluated}")

    answer = delay(lambda: 6 * 7)
    answer.force()
    out.say(f"thunk 6 * 7 = {answer.force()}, computed {answer.force_count} time(s)")

    out.show("take 5 (iterate (*2) 1)", take(5, iterate(lambda n: n * 2, 1)))
    out.show("take 3 (repeat 'x')", "".join(take(3, repeat("x"))))

    out.say(f"square 4 == square 4: {square(4) == square(4)}")

    return LessonResult(lesson_id=LESSON_ID, slug=SLUG, output=out.lines())


def main() -> None:
    lesson_main(run)


if __name__ == "__main__":
    main()
