from .errors import FormulaSyntaxError
from .tokens import Token, TokenType, OPERATOR_TYPES, PUNCTUATION_TYPES


def _is_digit(char):
    return char.isascii() and char.isdigit()


def _is_identifier_start(char):
    return char.isascii() and (char.isalpha() or char == '_')


def _is_identifier_part(char):
    return char.isascii() and (char.isalnum() or char == '_')


class Tokenizer:
    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.current = text[0] if text else None

    def advance(self):
        self.pos += 1
        self.current = self.text[self.pos] if self.pos < len(self.text) else None

    def skip_spaces(self):
        while self.current and self.current.isspace():
            self.advance()

    def number(self):
        start = self.pos
        while self.current and (_is_digit(self.current) or self.current == '.'):
            self.advance()
        literal = self.text[start:self.pos]
        # A run of dots and digits needs at least one digit and at most one dot
        if literal.count('.') > 1 or literal == '.':
            raise FormulaSyntaxError(f"Invalid number literal: {literal}", start)
        return Token(TokenType.NUMBER, float(literal), start)

    def identifier(self):
        start = self.pos
        while self.current and _is_identifier_part(self.current):
            self.advance()
        return Token(TokenType.IDENTIFIER, self.text[start:self.pos], start)

    def generate_tokens(self):
        tokens = []
        while self.current:
            if self.current.isspace():
                self.skip_spaces()
                continue

            if _is_digit(self.current) or self.current == '.':
                tokens.append(self.number())
                continue

            if _is_identifier_start(self.current):
                tokens.append(self.identifier())
                continue

            token_type = OPERATOR_TYPES.get(self.current) or PUNCTUATION_TYPES.get(self.current)
            if token_type is None:
                raise FormulaSyntaxError(f"Unexpected character: {self.current}", self.pos)

            tokens.append(Token(token_type, self.current, self.pos))
            self.advance()

        tokens.append(Token(TokenType.EOF, None, len(self.text)))
        return tokens


def tokenize(text):
    """Split a formula into tokens, ending with a single EOF token."""
    return Tokenizer(text).generate_tokens()
