import math

from pytest import raises

from formulas.dsl.errors import FormulaArgumentError
from formulas.dsl.functions import BUILTIN_FUNCTIONS, round_half_away


class TestRound(object):
    def test_default_precision(self):
        assert BUILTIN_FUNCTIONS["round"]([2.5]) == 3.0
        assert BUILTIN_FUNCTIONS["round"]([2.4]) == 2.0

    def test_ties_away_from_zero(self):
        assert round_half_away(-2.5) == -3.0
        assert round_half_away(0.5) == 1.0
        assert round_half_away(-0.5) == -1.0

    def test_precision(self):
        assert round_half_away(1.2345, 2) == 1.23
        assert round_half_away(2.675, 1) == 2.7
        assert round_half_away(233.00000000000003, 2) == 233.0

    def test_integers_unchanged(self):
        assert round_half_away(4503599627370497.0) == 4503599627370497.0
        assert round_half_away(-4503599627370497.0) == -4503599627370497.0

    def test_just_below_half(self):
        assert round_half_away(0.49999999999999994) == 0.0
        assert round_half_away(-0.49999999999999994) == 0.0

    def test_negative_precision(self):
        assert round_half_away(1250.0, -2) == 1300.0

    def test_non_finite(self):
        assert round_half_away(math.inf) == math.inf
        assert math.isnan(round_half_away(math.nan))

    def test_argument_count(self):
        with raises(FormulaArgumentError):
            BUILTIN_FUNCTIONS["round"]([])
        with raises(FormulaArgumentError) as excinfo:
            BUILTIN_FUNCTIONS["round"]([1.0, 2.0, 3.0])
        assert "1 to 2" in excinfo.value.message


class TestCeilFloor(object):
    def test_ceil(self):
        assert BUILTIN_FUNCTIONS["ceil"]([23.3]) == 24.0
        assert BUILTIN_FUNCTIONS["ceil"]([-23.3]) == -23.0
        assert isinstance(BUILTIN_FUNCTIONS["ceil"]([1.5]), float)

    def test_floor(self):
        assert BUILTIN_FUNCTIONS["floor"]([42.9]) == 42.0
        assert BUILTIN_FUNCTIONS["floor"]([-42.1]) == -43.0

    def test_non_finite(self):
        assert BUILTIN_FUNCTIONS["ceil"]([math.inf]) == math.inf
        assert BUILTIN_FUNCTIONS["floor"]([-math.inf]) == -math.inf

    def test_argument_count(self):
        for name in ["ceil", "floor"]:
            with raises(FormulaArgumentError):
                BUILTIN_FUNCTIONS[name]([])
            with raises(FormulaArgumentError):
                BUILTIN_FUNCTIONS[name]([1.0, 2.0])


class TestRegistry(object):
    def test_builtin_names(self):
        assert sorted(BUILTIN_FUNCTIONS) == ["ceil", "floor", "round"]

    def test_registry_is_read_only(self):
        with raises(TypeError):
            BUILTIN_FUNCTIONS["sqrt"] = math.sqrt
