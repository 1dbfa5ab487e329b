"""
Entry points for evaluating formulas against named column values.
"""
import logging
import math
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

from .dsl import tokenize, parse, Evaluator
from .dsl.errors import FormulaError, FormulaLimitError
from .dsl.functions import BUILTIN_FUNCTIONS
from .settings import resolve_config

logger = logging.getLogger(__name__)


def create_evaluator(
    variables: Mapping[str, Any],
    config: Optional[Dict[str, Any]] = None,
) -> Callable[[str], float]:
    """
    Bind a table of variables once and return a reusable evaluation function.

    Args:
        variables: Mapping of variable name to numeric value
        config: Optional overrides for the limits in ``formulas.settings``

    Returns:
        ``evaluate_expression(expression) -> float``, which raises
        FormulaSyntaxError, FormulaReferenceError or FormulaArgumentError
        for a bad expression
    """
    settings = resolve_config(config)
    context = MappingProxyType({name: float(value) for name, value in variables.items()})
    evaluator = Evaluator(context, BUILTIN_FUNCTIONS)
    logger.debug(f"Created formula evaluator with {len(context)} variables")

    def evaluate_expression(expression: str) -> float:
        if not isinstance(expression, str):
            raise TypeError(f"Expression must be a string, not {type(expression).__name__}")
        if len(expression) > settings["max_length"]:
            raise FormulaLimitError(
                f"Expression longer than {settings['max_length']} characters"
            )
        tokens = tokenize(expression)
        ast = parse(tokens, max_depth=settings["max_depth"])
        return evaluator.eval(ast)

    return evaluate_expression


def evaluate_formula(
    formula: Optional[str],
    resolved_values: Mapping[str, Any],
    config: Optional[Dict[str, Any]] = None,
) -> Optional[Decimal]:
    """
    Evaluate a stored formula using resolved column values.

    Formulas may reference columns as ``{CODE}`` placeholders or, when the
    code is already a valid identifier, by name.

    Args:
        formula: Formula string (e.g., "{REV-2024} / {COST-2024} * 100")
        resolved_values: Dict mapping column codes to values
        config: Optional overrides for the limits in ``formulas.settings``

    Returns:
        Computed result or None if formula is invalid
    """
    if not formula:
        return None

    expression = formula
    context = {}
    sources = {}

    for code, value in resolved_values.items():
        if value is None:
            continue
        try:
            value = float(value)
        except (TypeError, ValueError):
            logger.debug(f"Non-numeric value {value!r} for column {code} in formula: {formula}")
            return None
        placeholder = f"{{{code}}}"
        identifier = code.replace('-', '_').replace(' ', '_')
        if placeholder in expression:
            expression = expression.replace(placeholder, identifier)
        if identifier in sources:
            logger.debug(
                f"Column codes {sources[identifier]} and {code} both map to {identifier}; using {code}"
            )
        sources[identifier] = code
        context[identifier] = value

    # Any placeholder still present names a column without a value
    if "{" in expression or "}" in expression:
        logger.debug(f"Unresolved placeholders in formula: {formula}")
        return None

    try:
        result = create_evaluator(context, config)(expression)
    except FormulaError as e:
        logger.debug(f"Formula evaluation error: {str(e)} for formula: {formula}")
        return None

    if not math.isfinite(result):
        logger.debug(f"Formula produced non-finite result {result} for formula: {formula}")
        return None
    return Decimal(str(result))
