"""
Тесты для командной строки (typer CliRunner)

Проверяет:
1. list/run: вывод и коды возврата
2. check: расхождение с каталогом — код 1 и diff
3. exec: компиляция, запуск, ошибки
4. repl: цикл до :q или конца ввода
"""

import json

import pytest
from typer.testing import CliRunner

from fpcourse.cli.main import app
from fpcourse.config import get_settings
from fpcourse.core.errors import error
from fpcourse.lessons import lesson_05_guards
from fpcourse.lessons.catalog import DEFAULT_CATALOG_PATH

runner = CliRunner()


@pytest.fixture(autouse=True)
def fresh_settings():
    """Настройки читаются заново в каждом тесте."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def small_catalog(tmp_path, monkeypatch):
    """Каталог из уроков guards и infix; у infix неверный ожидаемый вывод."""
    data = json.loads(DEFAULT_CATALOG_PATH.read_text(encoding="utf-8"))
    lessons = {lesson["slug"]: lesson for lesson in data["lessons"]}
    broken = dict(lessons["infix"], expected_output=["7 `div` 2 = 4"])
    data["lessons"] = [lessons["guards"], broken]
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    monkeypatch.setenv("FPCOURSE_CATALOG_PATH", str(path))
    return path


class TestList:
    def test_lists_all_lessons(self):
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        for slug in ("environment", "recursion", "infix"):
            assert slug in result.output


class TestRun:
    def test_run_by_slug(self):
        result = runner.invoke(app, ["run", "infix"])
        assert result.exit_code == 0
        assert "7 `div` 2 = 3" in result.output

    def test_run_by_id(self):
        result = runner.invoke(app, ["run", "5"])
        assert result.exit_code == 0
        assert "signum (-7) = -1" in result.output

    def test_unknown_lesson(self):
        result = runner.invoke(app, ["run", "monads"])
        assert result.exit_code == 1
        assert "Unknown lesson" in result.output


class TestCheck:
    def test_mismatch_fails_with_diff(self, small_catalog):
        result = runner.invoke(app, ["check"])
        assert result.exit_code == 1
        assert "FAIL" in result.output
        assert "-7 `div` 2 = 4" in result.output
        assert "+7 `div` 2 = 3" in result.output

    def test_lesson_exception_is_a_fail_row(self, small_catalog, monkeypatch):
        def boom():
            error("boom")

        monkeypatch.setattr(lesson_05_guards, "run", boom)
        result = runner.invoke(app, ["check"])
        assert result.exit_code == 1
        assert "*** Exception: ProgramError: boom" in result.output
        assert "+7 `div` 2 = 3" in result.output

    def test_all_pass(self, small_catalog):
        data = json.loads(small_catalog.read_text(encoding="utf-8"))
        data["lessons"] = data["lessons"][:1]
        small_catalog.write_text(json.dumps(data), encoding="utf-8")
        result = runner.invoke(app, ["check"])
        assert result.exit_code == 0
        assert "OK" in result.output


class TestExec:
    def test_runs_program(self, tmp_path):
        program = tmp_path / "hello.py"
        program.write_text('print("Hello, World!")\n', encoding="utf-8")
        result = runner.invoke(app, ["exec", str(program)])
        assert result.exit_code == 0
        assert "Hello, World!" in result.output

    def test_program_runs_as_main(self, tmp_path):
        program = tmp_path / "main_guard.py"
        program.write_text('if __name__ == "__main__":\n    print("as main")\n', encoding="utf-8")
        result = runner.invoke(app, ["exec", str(program)])
        assert "as main" in result.output

    def test_syntax_error(self, tmp_path):
        program = tmp_path / "broken.py"
        program.write_text("def f(:\n", encoding="utf-8")
        result = runner.invoke(app, ["exec", str(program)])
        assert result.exit_code == 1

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["exec", str(tmp_path / "missing.py")])
        assert result.exit_code == 2

    def test_course_error_in_program(self, tmp_path):
        program = tmp_path / "boom.py"
        program.write_text('from fpcourse.core.errors import error\nerror("boom")\n', encoding="utf-8")
        result = runner.invoke(app, ["exec", str(program)])
        assert result.exit_code == 1
        assert "*** Exception: boom" in result.output


class TestRepl:
    def test_evaluate_and_quit(self):
        result = runner.invoke(app, ["repl"], input="1 + 2\n:t True\n:q\n")
        assert result.exit_code == 0
        assert "3" in result.output
        assert "True :: Bool" in result.output
        assert "Leaving session." in result.output

    def test_end_of_input(self):
        result = runner.invoke(app, ["repl"], input="L.head(L.NIL)\n")
        assert result.exit_code == 0
        assert "*** Exception: head: empty list" in result.output

    def test_banner_can_be_disabled(self, monkeypatch):
        monkeypatch.setenv("FPCOURSE_SHOW_BANNER", "false")
        result = runner.invoke(app, ["repl"], input=":q\n")
        assert "session, :help for commands" not in result.output


class TestOptions:
    def test_invalid_log_level(self):
        result = runner.invoke(app, ["--log-level", "loud", "list"])
        assert result.exit_code != 0

    def test_invalid_log_level_in_environment(self, monkeypatch):
        monkeypatch.setenv("FPCOURSE_LOG_LEVEL", "verbose")
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 2
        assert "Invalid FPCOURSE_* settings" in result.output
