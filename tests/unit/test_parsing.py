"""
Тесты для show/read

Проверяет:
1. Формат show для примитивов, составных значений и конструкторов
2. read по заданному типу-цели и без него (Any)
3. Ошибки разбора — ReadError, неподдерживаемая цель — TypeError
4. read(show(x), T) == x на представительных значениях
"""

import math
from typing import Any, List, Tuple

import pytest

from fpcourse.core.domain import NIL, Cartesian, Color, Just, Left, Polar, Right, flist
from fpcourse.core.domain.either import Either
from fpcourse.core.domain.fp_list import FList
from fpcourse.core.domain.maybe import NOTHING, Maybe
from fpcourse.core.domain.point import Point
from fpcourse.core.errors import ReadError
from fpcourse.core.functional.parsing import read, read_maybe, show


# =============================================================================
# SHOW
# =============================================================================


class TestShow:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (5, "5"),
            (-3, "-3"),
            (2.5, "2.5"),
            (True, "True"),
            ("hi", '"hi"'),
            (None, "()"),
            ((1, "a"), '(1,"a")'),
            ([1, 2, 3], "[1,2,3]"),
            ([], "[]"),
            (Color.BLUE, "Blue"),
        ],
    )
    def test_plain(self, value, expected):
        assert show(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            (Just(5), "Just 5"),
            (Just(-3), "Just (-3)"),
            (Just(Just(1)), "Just (Just 1)"),
            (NOTHING, "Nothing"),
            (Left("boom"), 'Left "boom"'),
            (Right([1, 2]), "Right [1,2]"),
            (Cartesian(x=1.0, y=-2.0), "Cartesian 1.0 (-2.0)"),
            (Polar(r=1.0, theta=0.5), "Polar 1.0 0.5"),
            (flist(1, 2), "[1,2]"),
            (Just((1, 2)), "Just (1,2)"),
        ],
    )
    def test_constructors(self, value, expected):
        assert show(value) == expected

    def test_string_escapes(self):
        assert show('say "hi"') == '"say \\"hi\\""'

    def test_non_finite_floats(self):
        assert show(math.inf) == "Infinity"
        assert show(-math.inf) == "-Infinity"
        assert show(math.nan) == "NaN"
        assert show(Just(-math.inf)) == "Just (-Infinity)"


# =============================================================================
# READ
# =============================================================================


class TestRead:
    def test_primitives(self):
        assert read("42", int) == 42
        assert read("-7", int) == -7
        assert read("2.5", float) == 2.5
        assert read("3", float) == 3.0
        assert read("True", bool) is True
        assert read('"hello"', str) == "hello"
        assert read("()", type(None)) is None

    def test_int_rejects_float_text(self):
        with pytest.raises(ReadError):
            read("2.5", int)

    def test_non_finite_floats(self):
        assert read("Infinity", float) == math.inf
        assert read("-Infinity", float) == -math.inf
        assert math.isnan(read("NaN", float))
        assert read("[1.5,Infinity]", List[float]) == [1.5, math.inf]

    def test_int_rejects_non_finite(self):
        with pytest.raises(ReadError):
            read("Infinity", int)

    def test_identifier_starting_with_infinity(self):
        with pytest.raises(ReadError):
            read("Infinityx", float)

    def test_maybe(self):
        assert read("Just 5", Maybe[int]) == Just(5)
        assert read("Nothing", Maybe[int]) is NOTHING
        assert read("Just (-3)", Maybe[int]) == Just(-3)
        assert read("Just (Just 1)", Maybe[Maybe[int]]) == Just(Just(1))

    def test_nested_constructor_needs_parens(self):
        with pytest.raises(ReadError, match="parenthesized"):
            read("Just Just 1", Maybe[Maybe[int]])

    def test_either(self):
        assert read('Left "e"', Either[str, int]) == Left("e")
        assert read("Right 4", Either[str, int]) == Right(4)

    def test_lists(self):
        assert read("[1,2,3]", List[int]) == [1, 2, 3]
        assert read("[ ]", list[int]) == []
        assert read("[1,2]", FList[int]) == flist(1, 2)
        assert read("[]", FList[int]) == NIL

    def test_tuple(self):
        assert read('(1, "a")', Tuple[int, str]) == (1, "a")

    def test_color_and_point(self):
        assert read("[Red,Yellow]", List[Color]) == [Color.RED, Color.YELLOW]
        assert read("Cartesian 1.0 (-2.0)", Point) == Cartesian(x=1.0, y=-2.0)
        assert read("Polar 2 0", Polar) == Polar(r=2.0, theta=0.0)

    def test_union_operator_point_target(self):
        assert read("Cartesian 1.0 2.0", Cartesian | Polar) == Cartesian(x=1.0, y=2.0)
        assert read("Polar 1 0", Polar | Cartesian) == Polar(r=1.0, theta=0.0)

    def test_invalid_point(self):
        with pytest.raises(ReadError):
            read("Polar (-1) 0", Point)

    def test_redundant_parens(self):
        assert read("((5))", int) == 5

    @pytest.mark.parametrize(
        "text,target",
        [
            ("abc", int),
            ("", int),
            ("Just", Maybe[int]),
            ("[1,2", List[int]),
            ("1 2", int),
            ("Purple", Color),
            ("Maybe 1", Maybe[int]),
            ("#", int),
        ],
    )
    def test_no_parse(self, text, target):
        with pytest.raises(ReadError):
            read(text, target)

    def test_unsupported_target(self):
        with pytest.raises(TypeError):
            read("1", dict)


class TestReadAny:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("42", 42),
            ("1.5", 1.5),
            ('"s"', "s"),
            ("[1,[2,3]]", [1, [2, 3]]),
            ("(1,True)", (1, True)),
            ("()", None),
            ("Just (Left 1)", Just(Left(1))),
            ("Green", Color.GREEN),
        ],
    )
    def test_infers_from_text(self, text, expected):
        assert read(text) == expected


class TestReadMaybe:
    def test_success_and_failure(self):
        assert read_maybe("5", int) == Just(5)
        assert read_maybe("five", int) is NOTHING


class TestShowReadAgreement:
    """read(show(x), T) == x"""

    @pytest.mark.parametrize(
        "value,target",
        [
            (-12, int),
            (math.pi, float),
            ("tab\tand \"quote\"", str),
            (Just(-1), Maybe[int]),
            (Right(Just(2)), Either[str, Maybe[int]]),
            ([Color.RED, Color.BLUE], List[Color]),
            (Polar(r=1.0, theta=-0.25), Point),
            ((3, "x", False), Tuple[int, str, bool]),
            (flist(flist(1), NIL), FList[FList[int]]),
            (math.inf, float),
            (-math.inf, float),
            (Just(-math.inf), Maybe[float]),
            ([math.inf, -0.5], List[float]),
        ],
    )
    def test_agreement(self, value, target):
        assert read(show(value), target) == value

    def test_any_target(self):
        value = [Just(1), NOTHING]
        assert read(show(value), Any) == value

    def test_nan(self):
        assert math.isnan(read(show(math.nan), float))
        assert math.isnan(read(show(math.nan)))
        assert read(show(-math.inf)) == -math.inf
