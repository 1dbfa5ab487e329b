from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class NumberNode:
    value: float


@dataclass(frozen=True)
class VarNode:
    name: str


@dataclass(frozen=True)
class BinaryOpNode:
    left: 'Node'
    op: str
    right: 'Node'


@dataclass(frozen=True)
class FunctionCallNode:
    name: str
    args: Tuple['Node', ...] = ()


Node = Union[NumberNode, VarNode, BinaryOpNode, FunctionCallNode]


def tree_depth(node):
    """Number of nodes on the longest root-to-leaf path, counted without recursion."""
    deepest = 0
    stack = [(node, 1)]
    while stack:
        current, depth = stack.pop()
        deepest = max(deepest, depth)
        if isinstance(current, BinaryOpNode):
            stack.append((current.left, depth + 1))
            stack.append((current.right, depth + 1))
        elif isinstance(current, FunctionCallNode):
            stack.extend((arg, depth + 1) for arg in current.args)
    return deepest
