"""
Column formulas.

A small arithmetic language over named columns with the builtins
``round``, ``ceil`` and ``floor``::

    evaluate = create_evaluator({"column1": 100, "column2": 233})
    evaluate("ceil(column2 / column1 * 10)")  # 24.0
"""

from .utils import create_evaluator, evaluate_formula
from .dsl.errors import (
    FormulaError,
    FormulaSyntaxError,
    FormulaLimitError,
    FormulaReferenceError,
    FormulaArgumentError,
    FormulaInternalError,
)

__version__ = '0.1.0'

__all__ = [
    'create_evaluator', 'evaluate_formula',
    'FormulaError', 'FormulaSyntaxError', 'FormulaLimitError',
    'FormulaReferenceError', 'FormulaArgumentError', 'FormulaInternalError',
]
