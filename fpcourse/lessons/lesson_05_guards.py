"""LESSON 5: Guards — условия по порядку и вспомогательные связывания

    signum x
      | x < 0     = -1
      | x == 0    = 0
      | otherwise = 1

Guards проверяются сверху вниз, срабатывает первый истинный. where-связывания
(bmi в bmi_tell) вычисляются один раз и видны всем веткам. Функция, у которой
не сработал ни один guard, завершает программу с ошибкой.
"""

from fpcourse.core.errors import NonExhaustiveGuardsError
from fpcourse.core.functional.guards import bmi_tell, grade, max_of, signum
from fpcourse.lessons.base import LessonResult, Transcript, lesson_main

LESSON_ID = 5
SLUG = "guards"


def run() -> LessonResult:
    out = Transcript()

    out.show("signum (-7)", signum(-7))
    out.show("signum 0", signum(0))
    out.show("signum 12", signum(12))
    out.say(f"bmi_tell 70 1.8 = {bmi_tell(70, 1.8)}")
    out.say(f"bmi_tell 100 1.7 = {bmi_tell(100, 1.7)}")
    out.show("max_of 3 9", max_of(3, 9))
    out.say(f"grade 82 = {grade(82)}")

    try:
        grade(120)
    except NonExhaustiveGuardsError as exc:
        out.say(f"grade 120 -> {exc}")

    return LessonResult(lesson_id=LESSON_ID, slug=SLUG, output=out.lines())


def main() -> None:
    lesson_main(run)


if __name__ == "__main__":
    main()
