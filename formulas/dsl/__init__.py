"""
Expression language for column formulas.

Formulas are tokenized, parsed into an AST and evaluated against a fixed
set of named values, so arbitrary user text never reaches eval().
"""

from .tokenizer import Tokenizer, tokenize
from .parser import Parser, parse
from .evaluator import Evaluator
from .errors import (
    FormulaError,
    FormulaSyntaxError,
    FormulaLimitError,
    FormulaReferenceError,
    FormulaArgumentError,
    FormulaInternalError,
)

__all__ = [
    'Tokenizer', 'Parser', 'Evaluator', 'tokenize', 'parse',
    'FormulaError', 'FormulaSyntaxError', 'FormulaLimitError',
    'FormulaReferenceError', 'FormulaArgumentError', 'FormulaInternalError',
]
