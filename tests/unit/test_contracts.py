"""
Tests for JSON Schema Contract Validators

Комплексное тестирование контракта lesson_catalog:
- Валидность самой схемы
- Валидация правильных данных (включая поставляемый каталог)
- Детекция нарушений required полей
- Детекция нарушений типов и constraints (pattern/const/minItems)
"""

import json

import pytest
from jsonschema import ValidationError

from fpcourse.core.contracts import (
    ContractValidator,
    LessonCatalogValidator,
    SchemaLoader,
    validate_lesson_catalog,
)
from fpcourse.lessons.catalog import DEFAULT_CATALOG_PATH


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_lesson():
    """Валидная запись урока."""
    return {
        "id": 4,
        "slug": "recursion",
        "title": "Recursion instead of loops",
        "topics": ["recursion", "accumulator"],
        "module": "lesson_04_recursion",
        "expected_output": ["factorial 5 = 120"],
    }


@pytest.fixture
def valid_catalog(valid_lesson):
    """Валидный каталог из одного урока."""
    return {"schema_version": "1", "lessons": [valid_lesson]}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    def test_load_schema(self):
        schema = SchemaLoader().load_schema("lesson_catalog")
        assert schema["title"] == "Lesson catalog"

    def test_schema_is_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("lesson_catalog") is loader.load_schema("lesson_catalog")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_custom_loader(self, tmp_path):
        (tmp_path / "tiny.json").write_text(json.dumps({"type": "integer"}), encoding="utf-8")
        validator = ContractValidator("tiny", loader=SchemaLoader(tmp_path))
        assert validator.is_valid(3)
        assert not validator.is_valid("3")


# =============================================================================
# LESSON CATALOG CONTRACT
# =============================================================================


class TestLessonCatalogContract:
    def test_valid(self, valid_catalog):
        validate_lesson_catalog(valid_catalog)

    def test_bundled_catalog_is_valid(self):
        with open(DEFAULT_CATALOG_PATH, "r", encoding="utf-8") as f:
            validate_lesson_catalog(json.load(f))

    def test_null_expected_output_allowed(self, valid_catalog):
        valid_catalog["lessons"][0]["expected_output"] = None
        validate_lesson_catalog(valid_catalog)

    @pytest.mark.parametrize("field", ["id", "slug", "title", "topics", "module", "expected_output"])
    def test_missing_required_field(self, valid_catalog, field):
        del valid_catalog["lessons"][0][field]
        with pytest.raises(ValidationError):
            validate_lesson_catalog(valid_catalog)

    def test_wrong_schema_version(self, valid_catalog):
        valid_catalog["schema_version"] = "2"
        with pytest.raises(ValidationError):
            validate_lesson_catalog(valid_catalog)

    def test_empty_lessons(self, valid_catalog):
        valid_catalog["lessons"] = []
        with pytest.raises(ValidationError):
            validate_lesson_catalog(valid_catalog)

    @pytest.mark.parametrize("module", ["recursion", "lesson_4_recursion", "lesson_04_Recursion"])
    def test_module_pattern(self, valid_catalog, module):
        valid_catalog["lessons"][0]["module"] = module
        with pytest.raises(ValidationError):
            validate_lesson_catalog(valid_catalog)

    def test_wrong_types(self, valid_catalog):
        valid_catalog["lessons"][0]["id"] = "4"
        with pytest.raises(ValidationError):
            validate_lesson_catalog(valid_catalog)

    def test_unknown_field_rejected(self, valid_catalog):
        valid_catalog["lessons"][0]["difficulty"] = "hard"
        with pytest.raises(ValidationError):
            validate_lesson_catalog(valid_catalog)

    def test_iter_errors_reports_all(self, valid_catalog):
        lesson = valid_catalog["lessons"][0]
        lesson["id"] = 0
        lesson["topics"] = []
        errors = list(LessonCatalogValidator().iter_errors(valid_catalog))
        assert len(errors) == 2
