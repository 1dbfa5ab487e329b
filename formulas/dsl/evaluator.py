import math
from types import MappingProxyType

from .ast_nodes import NumberNode, VarNode, BinaryOpNode, FunctionCallNode
from .errors import FormulaReferenceError, FormulaInternalError
from .functions import BUILTIN_FUNCTIONS


def divide(left, right):
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        # The sign of a zero divisor still counts, as in IEEE-754
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def remainder(left, right):
    """Floating remainder carrying the sign of the dividend."""
    if right == 0 or math.isinf(left) or math.isnan(left) or math.isnan(right):
        return math.nan
    return math.fmod(left, right)


BINARY_OPERATORS = {
    '+': lambda left, right: left + right,
    '-': lambda left, right: left - right,
    '*': lambda left, right: left * right,
    '/': divide,
    '%': remainder,
}


class Evaluator:
    def __init__(self, context, functions=BUILTIN_FUNCTIONS):
        self.context = MappingProxyType(dict(context))
        self.functions = functions

    def eval(self, node):
        if isinstance(node, NumberNode):
            return node.value

        if isinstance(node, VarNode):
            if node.name not in self.context:
                raise FormulaReferenceError(f"Undefined variable: {node.name}")
            return self.context[node.name]

        if isinstance(node, FunctionCallNode):
            args = [self.eval(a) for a in node.args]
            if node.name not in self.functions:
                raise FormulaReferenceError(f"Unknown function: {node.name}")
            return self.functions[node.name](args)

        if isinstance(node, BinaryOpNode):
            left = self.eval(node.left)
            right = self.eval(node.right)

            operator = BINARY_OPERATORS.get(node.op)
            if operator is None:
                raise FormulaInternalError(f"Unsupported operator {node.op!r}")
            return operator(left, right)

        raise FormulaInternalError(f"Invalid AST node {node!r}")
