from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


class TokenType(Enum):
    NUMBER = auto()
    IDENTIFIER = auto()
    LPAREN = auto()
    RPAREN = auto()
    COMMA = auto()
    PLUS = auto()
    MINUS = auto()
    MUL = auto()
    DIV = auto()
    MOD = auto()
    EOF = auto()


OPERATOR_TYPES = {
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.MUL,
    '/': TokenType.DIV,
    '%': TokenType.MOD,
}

PUNCTUATION_TYPES = {
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    ',': TokenType.COMMA,
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[Union[float, str]] = None
    position: Optional[int] = None

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r}, {self.position})"
