"""
fpcourse — курс основ функционального программирования в виде запускаемых примеров.

Содержит:
- core/      : типы данных курса и функциональные примитивы
- lessons/   : 13 уроков, каждый — самостоятельная программа
- session/   : интерактивная сессия для вычислений и запросов типа
- cli/       : командная строка (list/run/check/exec/repl)
"""

__version__ = "0.3.0"
