from tdcalc import config
from tdcalc.ast import BINOP_TYPES, BinOp, ExprStmt, Group, Num, Program
from tdcalc.errors import ErrorInfo, ErrorType, ParserError
from tdcalc.lexer import Lexer, TokenType


###############################################################################
#                                                                             #
#  PARSER                                                                     #
#                                                                             #
###############################################################################

class Parser:
    def __init__(self, text: str):
        """lex the whole source first, drop whitespace, keep EOF
        """
        self.tokens = [
            token for token in Lexer(text)
            if token.type != TokenType.WS
        ]
        self.pos = 0
        self.depth = 0  # open parentheses around the cursor

    def error(self, error_type, token, message):
        raise ParserError(error_type, token.span, message)

    def log(self, msg):
        if config.SHOULD_LOG_PARSE:
            print(msg)

    def peek(self, offset=0):
        """lookup a token relative to the cursor, None when out of range
        """
        idx = self.pos + offset
        if idx < 0 or idx >= len(self.tokens):
            return None
        return self.tokens[idx]

    def current(self):
        return self.peek(0)

    def consume(self):
        """return the current token and move the cursor forward
        """
        token = self.current()
        self.pos += 1
        return token

    def eat(self, token_type):
        """verify the token type
        """
        token = self.current()
        if token.type != token_type:
            self.error(ErrorType.UNEXPECTED_TOKEN, token,
                       ErrorInfo.unexpected_token(token.span.literal or token.type.value, token_type.value))
        return self.consume()

    def next_statement(self):
        """parse statement

        statement : expr

        None once the cursor reaches EOF
        """
        token = self.current()
        if token is None or token.type == TokenType.EOF:
            return None

        self.log(f'statement at {token.span.start}')
        return ExprStmt(self.expr())

    def expr(self):
        """parse expr

        expr : primary (binop primary)*
        """
        return self.binary_op(0)

    def binary_op(self, min_precedence):
        """precedence climbing

        an operator binding no tighter than `min_precedence` is left for the
        caller, which makes equal precedence operators left-associative
        """
        left = self.primary()

        while self.current().type in BINOP_TYPES:
            op = self.current()
            precedence = BINOP_TYPES[op.type].precedence
            if precedence <= min_precedence:
                break

            self.consume()
            right = self.binary_op(precedence)
            left = BinOp(left=left, op=op, right=right)
            self.log(f'fold: {op.value} (precedence {precedence})')

        return left

    def primary(self):
        """parse primary

        primary : INTEGER_CONST
                | LPAREN expr RPAREN
        """
        token = self.current()
        if token.type == TokenType.INTEGER_CONST:
            self.eat(TokenType.INTEGER_CONST)
            return Num(token)
        elif token.type == TokenType.LPAREN:
            if self.depth >= config.MAX_NESTING:
                self.error(ErrorType.NESTING_TOO_DEEP, token,
                           ErrorInfo.nesting_too_deep(config.MAX_NESTING))
            self.eat(TokenType.LPAREN)
            self.depth += 1
            result = self.expr()
            self.eat(TokenType.RPAREN)
            self.depth -= 1
            return Group(result, token)
        else:
            self.error(ErrorType.EXPECTED_EXPRESSION, token,
                       ErrorInfo.expected_expression(token.span.literal or token.type.value))

    def parse(self):
        """parse program

        program : statement*
        """
        program = Program()
        while True:
            statement = self.next_statement()
            if statement is None:
                break
            program.add_statement(statement)
        return program
