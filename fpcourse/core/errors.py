"""
Errors — именованные исключительные ситуации курса

В корректной программе эти ситуации не возникают.
Это ошибки программиста, а не состояния, из которых нужно восстанавливаться:
библиотечный код их никогда не перехватывает, пример просто завершается.

Перехватывают CourseError только внешние поверхности (CLI, интерактивная
сессия), чтобы сообщить об ошибке и продолжить работу.
"""

from typing import NoReturn


class CourseError(Exception):
    """Базовый класс для всех ошибок курса."""

    pass


class EmptyListError(CourseError):
    """
    Операция над пустой последовательностью.

    Аналог `head []`: у пустого списка нет ни головы, ни хвоста.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}: empty list")


class ProgramError(CourseError):
    """
    Явное прерывание программы с сообщением.

    Создаётся примитивом error(message).
    """

    pass


class NonExhaustiveGuardsError(CourseError):
    """Ни один guard не оказался истинным и нет ветки otherwise."""

    def __init__(self, function_name: str, args: tuple):
        self.function_name = function_name
        self.call_args = args
        super().__init__(f"Non-exhaustive guards in function {function_name} for arguments {args!r}")


class ReadError(CourseError):
    """Текст не удалось разобрать в значение нужного типа (`Prelude.read: no parse`)."""

    def __init__(self, text: str, target: str, reason: str = "no parse"):
        self.text = text
        self.target = target
        self.reason = reason
        super().__init__(f"read {text!r} as {target}: {reason}")


class LessonNotFoundError(CourseError):
    """Урок с таким id или slug отсутствует в каталоге."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown lesson: {key!r}")


def error(message: str) -> NoReturn:
    """
    Прервать вычисление с сообщением.

    Args:
        message: Текст ошибки

    Raises:
        ProgramError: всегда
    """
    raise ProgramError(message)


def undefined() -> NoReturn:
    """Заглушка для ещё не написанного выражения: при вычислении прерывает программу."""
    raise ProgramError("Prelude.undefined")
