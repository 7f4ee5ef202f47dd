"""
Тесты для каталога уроков и запуска уроков

Проверяет:
1. Загрузку каталога: контракт + инварианты моделей
2. Поиск урока по id и slug
3. Запуск каждого урока: вывод совпадает с каталогом
4. Сверку: diff при расхождении, пропуск без expected_output
"""

import json

import pytest
from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from fpcourse.core.errors import LessonNotFoundError, error
from fpcourse.lessons import lesson_05_guards
from fpcourse.lessons.base import LessonResult, Transcript
from fpcourse.lessons.catalog import DEFAULT_CATALOG_PATH, Catalog, LessonInfo, load_catalog
from fpcourse.lessons.runner import check_all, check_lesson, run_lesson

SLUGS = [
    "environment",
    "bindings",
    "laziness",
    "recursion",
    "guards",
    "types",
    "currying",
    "data_types",
    "lists",
    "parsing",
    "composition",
    "lambdas",
    "infix",
]


@pytest.fixture(scope="module")
def catalog() -> Catalog:
    return load_catalog()


def _lesson(**overrides) -> LessonInfo:
    data = {
        "id": 5,
        "slug": "guards",
        "title": "Guards",
        "topics": ["guards"],
        "module": "lesson_05_guards",
        "expected_output": None,
    }
    data.update(overrides)
    return LessonInfo(**data)


# =============================================================================
# CATALOG
# =============================================================================


class TestCatalog:
    def test_course_order(self, catalog):
        assert [lesson.slug for lesson in catalog.ordered()] == SLUGS
        assert [lesson.id for lesson in catalog.ordered()] == list(range(1, 14))

    def test_every_lesson_has_expected_output(self, catalog):
        assert all(lesson.expected_output for lesson in catalog.lessons)

    @pytest.mark.parametrize("key", ["4", "04", "recursion"])
    def test_find(self, catalog, key):
        assert catalog.find(key).slug == "recursion"

    @pytest.mark.parametrize("key", ["monads", "14", "0", ""])
    def test_find_unknown(self, catalog, key):
        with pytest.raises(LessonNotFoundError):
            catalog.find(key)

    def test_qualified_module(self):
        assert _lesson().qualified_module == "fpcourse.lessons.lesson_05_guards"

    def test_module_must_match_id_and_slug(self):
        with pytest.raises(ValidationError):
            _lesson(module="lesson_06_guards")

    def test_module_prefix(self):
        with pytest.raises(ValidationError):
            _lesson(module="guards")

    def test_frozen(self):
        lesson = _lesson()
        with pytest.raises(ValidationError):
            lesson.title = "Other"

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValidationError):
            Catalog(lessons=(_lesson(), _lesson()))

    def test_load_custom_path(self, tmp_path):
        data = json.loads(DEFAULT_CATALOG_PATH.read_text(encoding="utf-8"))
        data["lessons"] = data["lessons"][:2]
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        assert len(load_catalog(path).lessons) == 2

    def test_load_rejects_contract_violation(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"schema_version": "1", "lessons": []}), encoding="utf-8")
        with pytest.raises(SchemaValidationError):
            load_catalog(path)


# =============================================================================
# RUNNER
# =============================================================================


class TestRunner:
    @pytest.mark.parametrize("slug", SLUGS)
    def test_lesson_output_matches_catalog(self, catalog, slug):
        check = check_lesson(catalog.find(slug))
        assert check.compared
        assert check.passed, "\n".join(check.diff)

    def test_run_lesson_result(self, catalog):
        result = run_lesson(catalog.find("infix"))
        assert isinstance(result, LessonResult)
        assert result.lesson_id == 13
        assert result.output[0] == "7 `div` 2 = 3"

    def test_lessons_are_repeatable(self, catalog):
        lesson = catalog.find("laziness")
        assert run_lesson(lesson).output == run_lesson(lesson).output

    def test_mismatch_produces_diff(self, catalog):
        lesson = catalog.find("guards").model_copy(update={"expected_output": ("something else",)})
        check = check_lesson(lesson)
        assert not check.passed
        assert any(line.startswith("-something else") for line in check.diff)

    def test_lesson_without_expected_output(self, catalog):
        lesson = catalog.find("types").model_copy(update={"expected_output": None})
        check = check_lesson(lesson)
        assert check.passed
        assert not check.compared

    def test_id_mismatch(self, catalog):
        lesson = catalog.find("guards").model_copy(update={"id": 6})
        with pytest.raises(RuntimeError):
            run_lesson(lesson)

    def test_check_all_subset(self, catalog):
        subset = Catalog(lessons=tuple(lesson for lesson in catalog.lessons if lesson.slug in ("guards", "infix")))
        checks = check_all(subset)
        assert [c.lesson.slug for c in checks] == ["guards", "infix"]
        assert all(c.passed for c in checks)

    def test_failing_lesson_does_not_stop_check(self, catalog, monkeypatch):
        def boom():
            error("boom")

        monkeypatch.setattr(lesson_05_guards, "run", boom)
        subset = Catalog(lessons=tuple(lesson for lesson in catalog.lessons if lesson.slug in ("guards", "infix")))
        failed, passed = check_all(subset)
        assert not failed.passed
        assert failed.result is None
        assert failed.error == "ProgramError: boom"
        assert passed.passed
        assert passed.error is None

    def test_id_mismatch_is_reported(self, catalog):
        lesson = catalog.find("guards").model_copy(update={"id": 6})
        check = check_lesson(lesson)
        assert not check.passed
        assert check.error.startswith("RuntimeError:")


class TestTranscript:
    def test_show_and_say(self):
        out = Transcript()
        out.show("Just 5", 5)
        out.say("a", 1, True)
        assert out.lines() == ("Just 5 = 5", "a 1 True")
