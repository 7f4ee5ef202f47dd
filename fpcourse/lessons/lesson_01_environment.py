"""LESSON 1: Environment — первая программа

Рабочий цикл курса:
- исходный файл компилируется (синтаксические ошибки видны до запуска)
- скомпилированная программа выполняется до конца
- результат — напечатанный вывод

Из командной строки то же самое делает `fpcourse exec hello.py`.
Здесь программа компилируется из строки, а её print перенаправлен в вывод урока.
"""

from fpcourse.lessons.base import LessonResult, Transcript, lesson_main

LESSON_ID = 1
SLUG = "environment"

HELLO_FILENAME = "hello.py"
HELLO_SOURCE = 'main = lambda: print("Hello, World!")\n\nmain()\n'


def run() -> LessonResult:
    out = Transcript()

    code = compile(HELLO_SOURCE, HELLO_FILENAME, "exec")
    out.say(f"{HELLO_FILENAME}: compiled {code.co_name}")

    exec(code, {"__name__": "__main__", "print": out.say})

    return LessonResult(lesson_id=LESSON_ID, slug=SLUG, output=out.lines())


def main() -> None:
    lesson_main(run)


if __name__ == "__main__":
    main()
