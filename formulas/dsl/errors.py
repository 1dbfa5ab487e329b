"""Errors raised while tokenizing, parsing and evaluating formulas."""


class FormulaError(Exception):
    """Base class for errors caused by the formula text or its bindings."""

    def __init__(self, message, position=None):
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self):
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position})"

    def __repr__(self):
        return f"{type(self).__name__}({self.message!r}, {self.position!r})"


class FormulaSyntaxError(FormulaError):
    """Malformed formula: bad character, bad number or unexpected token."""


class FormulaLimitError(FormulaSyntaxError):
    """Formula exceeds the configured length or nesting limits."""


class FormulaReferenceError(FormulaError):
    """Formula names a variable or function that is not bound."""


class FormulaArgumentError(FormulaError):
    """Builtin function called with the wrong number of arguments."""


class FormulaInternalError(RuntimeError):
    """AST contains a node or operator the parser can never produce."""
