"""CLI — командная строка курса (typer + rich)

    fpcourse list              # уроки в порядке курса
    fpcourse run recursion     # один урок по id или slug
    fpcourse check             # сверка всех уроков с каталогом
    fpcourse exec hello.py     # компиляция и запуск отдельной программы
    fpcourse repl              # интерактивная сессия
"""

from __future__ import annotations

import logging
import runpy
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from fpcourse import __version__
from fpcourse.config import LOG_LEVELS, CourseSettings, get_settings
from fpcourse.core.errors import CourseError
from fpcourse.lessons.catalog import Catalog, load_catalog
from fpcourse.lessons.runner import check_all, run_lesson
from fpcourse.logger import setup_logger
from fpcourse.session import Session

app = typer.Typer(no_args_is_help=True, help="Functional programming course: lessons, checks and a REPL.")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _echo(line: str, style: Optional[str] = None, err: bool = False) -> None:
    """Строка как есть: без разметки rich, подсветки и переноса."""
    console = _err_console if err else _console
    console.print(line, style=style, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _catalog(settings: CourseSettings) -> Catalog:
    return load_catalog(settings.catalog_path)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override FPCOURSE_LOG_LEVEL."),
) -> None:
    """Курс функционального программирования."""

    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"expected one of {', '.join(LOG_LEVELS)}", param_hint="--log-level")

    try:
        settings = get_settings()
    except ValidationError as exc:
        _echo(f"Invalid FPCOURSE_* settings: {exc}", style="red", err=True)
        raise typer.Exit(code=2) from exc
    setup_logger("fpcourse", level=log_level or settings.log_level)


@app.command("list")
def list_lessons() -> None:
    """Список уроков в порядке курса."""

    catalog = _catalog(get_settings())

    table = Table(title=f"fpcourse {__version__}")
    table.add_column("#", style="bright_green", justify="right", no_wrap=True)
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Topics", style="dim")

    for lesson in catalog.ordered():
        table.add_row(str(lesson.id), lesson.slug, lesson.title, ", ".join(lesson.topics))

    _console.print(table)


@app.command("run")
def run_command(key: str = typer.Argument(..., help="Lesson id or slug.")) -> None:
    """Запуск одного урока и печать его вывода."""

    try:
        lesson = _catalog(get_settings()).find(key)
        result = run_lesson(lesson)
    except CourseError as exc:
        _echo(str(exc), style="red", err=True)
        raise typer.Exit(code=1) from exc

    for line in result.output:
        _echo(line)


@app.command("check")
def check_command() -> None:
    """Сверка вывода всех уроков с каталогом; код 1 при любом FAIL."""

    checks = check_all(_catalog(get_settings()))

    table = Table(title="Lesson check")
    table.add_column("#", style="bright_green", justify="right", no_wrap=True)
    table.add_column("Lesson", style="white")
    table.add_column("Status", no_wrap=True)

    failed = []
    for check in checks:
        if check.error is not None:
            status = "[red]FAIL[/red]"
            failed.append(check)
        elif not check.compared:
            status = "[yellow]SKIP[/yellow]"
        elif check.passed:
            status = "[green]OK[/green]"
        else:
            status = "[red]FAIL[/red]"
            failed.append(check)
        table.add_row(str(check.lesson.id), check.lesson.title, status)

    _console.print(table)

    for check in failed:
        _console.print(f"\n[bold]{check.lesson.slug}[/bold]")
        if check.error is not None:
            _echo(f"*** Exception: {check.error}", style="red")
        for line in check.diff:
            _echo(line)

    if failed:
        raise typer.Exit(code=1)


@app.command("exec")
def exec_command(path: Path = typer.Argument(..., help="Python program to compile and run.")) -> None:
    """Компиляция отдельной программы и запуск её как __main__."""

    if not path.is_file():
        _echo(f"No such file: {path}", style="red", err=True)
        raise typer.Exit(code=2)

    source = path.read_text(encoding="utf-8")
    try:
        compile(source, str(path), "exec")
    except SyntaxError as exc:
        _echo(f"{path}:{exc.lineno}: {exc.msg}", style="red", err=True)
        raise typer.Exit(code=1) from exc

    logger.info("Compiled %s", path)
    try:
        runpy.run_path(str(path), run_name="__main__")
    except CourseError as exc:
        _echo(f"*** Exception: {exc}", style="red", err=True)
        raise typer.Exit(code=1) from exc


@app.command("repl")
def repl_command() -> None:
    """Интерактивная сессия до :q или конца ввода."""

    settings = get_settings()
    session = Session(catalog_loader=lambda: _catalog(settings))

    if settings.show_banner:
        _echo(f"fpcourse {__version__} session, :help for commands, :q to quit")

    while True:
        try:
            line = _console.input(settings.repl_prompt, markup=False)
        except (EOFError, KeyboardInterrupt):
            _console.print()
            break

        reply = session.handle(line)
        style = "red" if reply.is_error else None
        for out in reply.output:
            _echo(out, style=style)
        if reply.closed:
            break


def run() -> None:
    app()


if __name__ == "__main__":
    run()
