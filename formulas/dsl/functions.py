import math
from types import MappingProxyType

from .errors import FormulaArgumentError


class BuiltinFunction:
    """A named builtin taking between ``min_args`` and ``max_args`` floats."""

    def __init__(self, name, func, min_args, max_args):
        self.name = name
        self.func = func
        self.min_args = min_args
        self.max_args = max_args

    def __call__(self, args):
        count = len(args)
        if count < self.min_args or count > self.max_args:
            if self.min_args == self.max_args:
                expected = str(self.min_args)
            else:
                expected = f"{self.min_args} to {self.max_args}"
            raise FormulaArgumentError(
                f"{self.name}() takes {expected} argument(s), got {count}"
            )
        return float(self.func(*args))

    def __repr__(self):
        return f"BuiltinFunction({self.name!r})"


def round_half_away(x, precision=0.0):
    """
    Round ``x`` to ``precision`` decimal places, ties away from zero.

    Args:
        x: Value to round
        precision: Number of decimal places; negative values round to tens,
            hundreds and so on

    Returns:
        The rounded value. Non-finite input, or a precision too large to
        scale by, returns ``x`` unchanged.
    """
    if not math.isfinite(x):
        return x
    try:
        factor = 10.0 ** precision
    except OverflowError:
        return x
    if factor == 0:
        return math.copysign(0.0, x)
    scaled = x * factor
    if not math.isfinite(scaled):
        return x
    magnitude = abs(scaled)
    rounded = math.floor(magnitude)
    # Subtracting the floor is exact, adding 0.5 first is not
    if magnitude - rounded >= 0.5:
        rounded += 1
    return math.copysign(rounded, scaled) / factor


def ceil(x):
    return float(math.ceil(x)) if math.isfinite(x) else x


def floor(x):
    return float(math.floor(x)) if math.isfinite(x) else x


BUILTIN_FUNCTIONS = MappingProxyType({
    "round": BuiltinFunction("round", round_half_away, 1, 2),
    "ceil": BuiltinFunction("ceil", ceil, 1, 1),
    "floor": BuiltinFunction("floor", floor, 1, 1),
})
