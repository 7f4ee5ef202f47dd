"""Session — интерактивная сессия вычисления выражений."""

from .repl import HELP_TEXT, HISTORY_LIMIT, Session, SessionReply, SessionState, build_namespace

__all__ = [
    "HELP_TEXT",
    "HISTORY_LIMIT",
    "Session",
    "SessionReply",
    "SessionState",
    "build_namespace",
]
