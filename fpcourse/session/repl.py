"""Interactive session — цикл чтения и вычисления

Строка ввода — выражение или команда:
- выражение вычисляется, печатается show(результат)
- связывание (x = 5) добавляет имя в окружение сессии
- :t / :type <expr> — тип выражения, `expr :: Type`
- :lessons — список уроков, :run <урок> — вывод урока
- :help — справка, :q / :quit — конец сессии

Ошибка в выражении не завершает сессию: печатается `*** Exception: ...`,
и сессия ждёт следующую строку.

Состояния: RUNNING → CLOSED (после :quit). В CLOSED ввод не принимается.
"""

import functools
from collections import deque
import logging
import math
import operator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Deque, Dict, Final, Optional, Tuple

import fpcourse.core.domain as domain
import fpcourse.core.functional as functional
from fpcourse.core.domain import fp_list
from fpcourse.core.domain.either import either, safe_divide
from fpcourse.core.domain.maybe import maybe, safe_div
from fpcourse.core.errors import CourseError, error, undefined
from fpcourse.core.functional.currying import add, subtract
from fpcourse.core.functional.guards import bmi_tell, signum
from fpcourse.core.functional.infix import div, elem, infix, mod
from fpcourse.core.functional.parsing import show
from fpcourse.core.functional.recursion import fibonacci
from fpcourse.core.functional.types import describe_type
from fpcourse.lessons.catalog import Catalog, load_catalog
from fpcourse.lessons.runner import run_lesson

logger = logging.getLogger(__name__)

HISTORY_LIMIT: Final[int] = 1000

HELP_TEXT: Tuple[str, ...] = (
    "Commands:",
    "  <expr>          evaluate an expression and show the result",
    "  name = <expr>   bind a name in this session",
    "  :t <expr>       show the type of an expression (also :type)",
    "  :lessons        list the lessons",
    "  :run <lesson>   run a lesson by id or slug",
    "  :help           this text (also :?)",
    "  :q              end the session (also :quit)",
)


class SessionState(str, Enum):
    """Состояние сессии"""

    RUNNING = "RUNNING"
    CLOSED = "CLOSED"


@dataclass(frozen=True)
class SessionReply:
    """Ответ сессии на одну строку ввода."""

    output: Tuple[str, ...] = ()
    is_error: bool = False
    closed: bool = False


def build_namespace() -> Dict[str, Any]:
    """Окружение сессии: библиотека курса и несколько модулей stdlib."""
    namespace: Dict[str, Any] = {"__name__": "__session__"}
    for module in (domain, functional):
        for name in module.__all__:
            namespace[name] = getattr(module, name)
    namespace.update(
        {
            "maybe": maybe,
            "either": either,
            "infix": infix,
            "div": div,
            "mod": mod,
            "elem": elem,
            "add": add,
            "subtract": subtract,
            "fibonacci": fibonacci,
            "signum": signum,
            "bmi_tell": bmi_tell,
            "safe_div": safe_div,
            "safe_divide": safe_divide,
            "L": fp_list,
            "error": error,
            "undefined": undefined,
            "math": math,
            "operator": operator,
            "functools": functools,
        }
    )
    return namespace


@dataclass
class Session:
    """
    Интерактивная сессия.

    Не зависит от терминала: handle() принимает строку и возвращает SessionReply,
    печать выполняет вызывающий код (CLI).
    """

    namespace: Dict[str, Any] = field(default_factory=build_namespace)
    catalog_loader: Callable[[], Catalog] = load_catalog
    state: SessionState = SessionState.RUNNING
    history: Deque[str] = field(default_factory=lambda: deque(maxlen=HISTORY_LIMIT))
    _catalog: Optional[Catalog] = field(default=None, init=False, repr=False)

    @property
    def catalog(self) -> Catalog:
        if self._catalog is None:
            self._catalog = self.catalog_loader()
        return self._catalog

    def handle(self, line: str) -> SessionReply:
        """
        Обработка одной строки ввода.

        Raises:
            RuntimeError: если сессия уже закрыта
        """
        if self.state is SessionState.CLOSED:
            raise RuntimeError("session is closed")

        line = line.strip()
        if not line:
            return SessionReply()
        self.history.append(line)

        if line.startswith(":"):
            return self._command(line)
        return self._evaluate(line)

    # -------------------------------------------------------------------------
    # COMMANDS
    # -------------------------------------------------------------------------

    def _command(self, line: str) -> SessionReply:
        name, _, argument = line.partition(" ")
        argument = argument.strip()

        if name in (":q", ":quit"):
            self.state = SessionState.CLOSED
            return SessionReply(output=("Leaving session.",), closed=True)
        if name in (":help", ":?"):
            return SessionReply(output=HELP_TEXT)
        if name in (":t", ":type"):
            if not argument:
                return SessionReply(output=(f"{name} requires an expression",), is_error=True)
            return self._guarded(lambda: (f"{argument} :: {describe_type(self._eval(argument))}",))
        if name == ":lessons":
            return SessionReply(
                output=tuple(f"{lesson.id:2d}. {lesson.title} ({lesson.slug})" for lesson in self.catalog.ordered())
            )
        if name == ":run":
            if not argument:
                return SessionReply(output=(":run requires a lesson id or slug",), is_error=True)
            return self._guarded(lambda: run_lesson(self.catalog.find(argument)).output)
        return SessionReply(output=(f"unknown command {name!r}, try :help",), is_error=True)

    # -------------------------------------------------------------------------
    # EVALUATION
    # -------------------------------------------------------------------------

    def _eval(self, source: str) -> Any:
        code = compile(source, "<interactive>", "eval")
        return eval(code, self.namespace)

    def _evaluate(self, source: str) -> SessionReply:
        def evaluate() -> Tuple[str, ...]:
            try:
                code = compile(source, "<interactive>", "eval")
            except SyntaxError:
                # Не выражение: связывание или другой оператор
                exec(compile(source, "<interactive>", "exec"), self.namespace)
                return ()
            value = eval(code, self.namespace)
            return (show(value),)

        return self._guarded(evaluate)

    def _guarded(self, action: Callable[[], Tuple[str, ...]]) -> SessionReply:
        """Выполнение с превращением исключения в строку ответа."""
        try:
            return SessionReply(output=tuple(action()))
        except CourseError as exc:
            logger.debug("Course error in session: %s", exc)
            return SessionReply(output=(f"*** Exception: {exc}",), is_error=True)
        except Exception as exc:
            logger.debug("Error in session", exc_info=True)
            return SessionReply(output=(f"*** Exception: {type(exc).__name__}: {exc}",), is_error=True)
