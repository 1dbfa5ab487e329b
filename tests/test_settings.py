from pytest import raises

from formulas.dsl.parser import MAX_NESTING_DEPTH
from formulas.settings import DEFAULTS, resolve_config


class TestResolveConfig(object):
    def test_defaults(self):
        assert resolve_config() == DEFAULTS
        assert resolve_config(None) is not DEFAULTS

    def test_override(self):
        config = resolve_config({"max_depth": 10})
        assert config["max_depth"] == 10
        assert config["max_length"] == DEFAULTS["max_length"]

    def test_unknown_key(self):
        with raises(ValueError) as excinfo:
            resolve_config({"max_nodes": 10})
        assert "max_nodes" in str(excinfo.value)

    def test_nesting_cap(self):
        assert resolve_config({"max_depth": MAX_NESTING_DEPTH})["max_depth"] == MAX_NESTING_DEPTH
        with raises(ValueError):
            resolve_config({"max_depth": MAX_NESTING_DEPTH + 1})

    def test_large_length_allowed(self):
        assert resolve_config({"max_length": 100000})["max_length"] == 100000

    def test_invalid_values(self):
        for value in [0, -1, 1.5, "10", True, None]:
            with raises(ValueError):
                resolve_config({"max_length": value})
