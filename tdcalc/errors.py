from collections import namedtuple
from enum import Enum


class Span(namedtuple('Span', ['start', 'end', 'literal'])):
    """half-open [start, end) offsets into the source, plus the matched text
    """
    __slots__ = ()

    @property
    def length(self):
        return self.end - self.start


class ErrorType(Enum):
    # lexer
    UNRECOGNIZED_CHAR   = 'Unrecognized char'
    # parser, invalid syntax
    UNEXPECTED_TOKEN    = 'Unexpected token'
    EXPECTED_EXPRESSION = 'Expected expression'
    NESTING_TOO_DEEP    = 'Nesting too deep'
    # interpreter
    DIVISION_BY_ZERO    = 'Division by zero'
    INTEGER_OVERFLOW    = 'Integer overflow'


class ErrorInfo:
    # lexer error

    @staticmethod
    def unrecognized_char(item):
        return f'unrecognized char `{item}`'

    # parser error

    @staticmethod
    def unexpected_token(item, want):
        return f'token `{item}` is not expected, want `{want}`'

    @staticmethod
    def expected_expression(item):
        return f'expected an expression, found `{item}`'

    @staticmethod
    def nesting_too_deep(limit):
        return f'more than {limit} nested parentheses'

    # intepreter error

    @staticmethod
    def division_by_zero(item):
        return f'division by zero at `{item}`'

    @staticmethod
    def integer_overflow(item, value):
        return f'result {value} of `{item}` does not fit in 64 bits'


class Error(Exception):
    def __init__(self, error_type, span, message):
        super().__init__(message)
        self.error_type = error_type
        self.span = span
        self.message = message

    def __str__(self):
        return f'{self.__class__.__name__}: <{self.span.start}:{self.span.end}>: {self.message}'

    __repr__ = __str__


class LexerError(Error):
    pass


class ParserError(Error):
    pass


class InterpreterError(Error):
    pass
