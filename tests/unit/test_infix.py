"""
Тесты для инфиксной и префиксной записи

Проверяет:
1. a |f| b == f(a, b)
2. Операторы в префиксной позиции и секции
3. div/mod: округление к минус бесконечности, деление на ноль
"""

import pytest

from fpcourse.core.errors import ProgramError
from fpcourse.core.functional.infix import (
    OPERATORS,
    Infix,
    div,
    elem,
    infix,
    mod,
    prefix,
    section_left,
    section_right,
)


class TestInfix:
    def test_infix_equals_prefix(self):
        assert (7 |div| 2) == div(7, 2) == 3
        assert (7 |mod| 3) == mod(7, 3) == 1

    def test_floor_semantics(self):
        assert (-7 |div| 2) == -4
        assert (-7 |mod| 2) == 1

    @pytest.mark.parametrize("op", [div, mod])
    def test_divide_by_zero(self, op):
        with pytest.raises(ProgramError, match="divide by zero"):
            op(1, 0)

    def test_elem(self):
        assert 3 |elem| [1, 2, 3]
        assert not ("z" |elem| "abc")

    def test_custom_infix(self):
        @infix
        def avg(a, b):
            return (a + b) / 2

        assert isinstance(avg, Infix)
        assert (4 |avg| 8) == 6.0

    def test_missing_left_operand(self):
        with pytest.raises(TypeError):
            div | 2


class TestPrefix:
    def test_prefix_operator(self):
        assert prefix("+")(1)(2) == 3
        assert prefix("+")(1, 2) == 3
        assert prefix("++")([1], [2]) == [1, 2]
        assert prefix("/=")(1, 2) is True

    def test_unknown_operator(self):
        with pytest.raises(KeyError):
            prefix("<$>")

    def test_sections(self):
        assert section_right("/", 2)(10) == 5.0
        assert section_left("/", 2)(10) == 0.2
        assert section_right("-", 1)(10) == 9

    def test_every_operator_is_binary(self):
        for symbol in OPERATORS:
            assert prefix(symbol).arity == 2
