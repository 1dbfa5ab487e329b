"""
Limits applied when evaluating formulas.

Callers pass a plain dict of overrides, e.g. ``{"max_depth": 10}``; missing
keys fall back to ``DEFAULTS``.
"""
from typing import Any, Dict, Optional

from .dsl.parser import DEFAULT_MAX_DEPTH, MAX_NESTING_DEPTH

DEFAULTS = {
    "max_length": 1000,  # characters in a single formula
    "max_depth": DEFAULT_MAX_DEPTH,  # nested parentheses and calls
}


def resolve_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, int]:
    """
    Merge caller overrides over the default limits.

    Args:
        config: Optional dict of overrides keyed like ``DEFAULTS``

    Returns:
        A new dict holding every setting

    Raises:
        ValueError: If a key is unknown, a value is not a positive integer,
            or max_depth exceeds MAX_NESTING_DEPTH
    """
    config = config or {}
    unknown = set(config) - set(DEFAULTS)
    if unknown:
        raise ValueError(f"Unknown formula settings: {', '.join(sorted(unknown))}")

    resolved = dict(DEFAULTS)
    for key, value in config.items():
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"Setting '{key}' must be a positive integer, got {value!r}")
        if key == "max_depth" and value > MAX_NESTING_DEPTH:
            raise ValueError(f"Setting 'max_depth' cannot exceed {MAX_NESTING_DEPTH}, got {value}")
        resolved[key] = value
    return resolved
