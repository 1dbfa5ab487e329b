from .ast_nodes import NumberNode, VarNode, BinaryOpNode, FunctionCallNode, tree_depth
from .errors import FormulaSyntaxError, FormulaLimitError
from .tokens import Token, TokenType

DEFAULT_MAX_DEPTH = 50
MAX_NESTING_DEPTH = 100
# Evaluator recursion depth, kept below the interpreter recursion limit
MAX_TREE_DEPTH = 400

ADDITIVE_TYPES = (TokenType.PLUS, TokenType.MINUS)
MULTIPLICATIVE_TYPES = (TokenType.MUL, TokenType.DIV, TokenType.MOD)


class Parser:
    def __init__(self, tokens, max_depth=DEFAULT_MAX_DEPTH):
        tokens = list(tokens)
        if not tokens or tokens[-1].type != TokenType.EOF:
            end = tokens[-1].position if tokens else None
            tokens.append(Token(TokenType.EOF, None, end))
        self.tokens = tokens
        self.index = 0
        self.current = tokens[0]
        self.max_depth = max_depth
        self.depth = 0

    def eat(self, type_):
        if self.current.type == type_:
            self.index += 1
            # Stay on EOF once the input is exhausted
            self.current = self.tokens[min(self.index, len(self.tokens) - 1)]
        elif type_ == TokenType.RPAREN:
            raise FormulaSyntaxError("Expected ')'", self.current.position)
        else:
            raise FormulaSyntaxError(
                f"Unexpected token {self.describe(self.current)}, expected {type_.name}",
                self.current.position,
            )

    @staticmethod
    def describe(token):
        if token.type == TokenType.EOF:
            return "end of expression"
        if token.type == TokenType.NUMBER:
            return str(token.value)
        return repr(token.value)

    def parse(self):
        result = self.expression()
        if self.current.type != TokenType.EOF:
            raise FormulaSyntaxError("Unexpected trailing tokens", self.current.position)
        if tree_depth(result) > MAX_TREE_DEPTH:
            raise FormulaLimitError(
                f"Expression has more than {MAX_TREE_DEPTH} levels of operations"
            )
        return result

    def expression(self):
        return self.addition()

    def addition(self):
        node = self.multiplication()

        while self.current.type in ADDITIVE_TYPES:
            op = self.current
            self.eat(op.type)
            node = BinaryOpNode(node, op.value, self.multiplication())

        return node

    def multiplication(self):
        node = self.primary()

        while self.current.type in MULTIPLICATIVE_TYPES:
            op = self.current
            self.eat(op.type)
            node = BinaryOpNode(node, op.value, self.primary())

        return node

    def enter_group(self, token):
        self.depth += 1
        if self.depth > self.max_depth:
            raise FormulaLimitError(
                f"Expression nested deeper than {self.max_depth} levels", token.position
            )

    def leave_group(self):
        self.depth -= 1

    def primary(self):
        token = self.current

        if token.type == TokenType.NUMBER:
            self.eat(TokenType.NUMBER)
            return NumberNode(token.value)

        if token.type == TokenType.IDENTIFIER:
            name = token.value
            self.eat(TokenType.IDENTIFIER)

            # Function call?
            if self.current.type == TokenType.LPAREN:
                self.enter_group(self.current)
                self.eat(TokenType.LPAREN)
                args = []
                if self.current.type != TokenType.RPAREN:
                    args.append(self.expression())
                    while self.current.type == TokenType.COMMA:
                        self.eat(TokenType.COMMA)
                        args.append(self.expression())
                self.eat(TokenType.RPAREN)
                self.leave_group()
                return FunctionCallNode(name, tuple(args))

            return VarNode(name)

        if token.type == TokenType.LPAREN:
            self.enter_group(token)
            self.eat(TokenType.LPAREN)
            expr = self.expression()
            self.eat(TokenType.RPAREN)
            self.leave_group()
            return expr

        if token.type == TokenType.EOF:
            raise FormulaSyntaxError("Unexpected end of expression", token.position)

        raise FormulaSyntaxError(f"Unexpected token: {self.describe(token)}", token.position)


def parse(tokens, max_depth=DEFAULT_MAX_DEPTH):
    """Build the AST for a token sequence produced by ``tokenize``."""
    return Parser(tokens, max_depth=max_depth).parse()
