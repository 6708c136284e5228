from enum import Enum

from tdcalc import config
from tdcalc.errors import Span, ErrorInfo, ErrorType, LexerError


###############################################################################
#                                                                             #
#  LEXER                                                                      #
#                                                                             #
###############################################################################

# Token types
class TokenType(Enum):
    # misc
    INTEGER_CONST   = 'INTEGER_CONST'
    WS              = 'WS'
    EOF             = 'EOF'
    # opt
    PLUS            = '+'
    MINUS           = '-'
    MUL             = '*'
    DIV             = '/'
    LPAREN          = '('
    RPAREN          = ')'


SINGLE_CHAR_TOKENS = {
    token_type.value: token_type
    for token_type in (TokenType.PLUS, TokenType.MINUS, TokenType.MUL,
                       TokenType.DIV, TokenType.LPAREN, TokenType.RPAREN)
}


# str.isspace() also accepts these separators, Unicode White_Space does not
NON_WHITESPACE_SEPARATORS = '\x1c\x1d\x1e\x1f'


def is_whitespace(char):
    return char.isspace() and char not in NON_WHITESPACE_SEPARATORS


class Token:
    def __init__(self, token_type, value, span):
        """Token

        Args:
          token_type: TokenType
          value: int for INTEGER_CONST, the symbol for operators, else None
          span: Span
        """
        self.type = token_type
        self.value = value
        self.span = span

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value, self.span) == (other.type, other.value, other.span)

    def __str__(self):
        return f'Token({self.type}, {repr(self.value)}, pos={self.span.start}:{self.span.end})'

    def __repr__(self):
        return self.__str__()


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.current_char = self.text[self.pos] if self.text else None

    def error(self):
        char = self.current_char
        span = Span(self.pos, self.pos + 1, char)
        raise LexerError(ErrorType.UNRECOGNIZED_CHAR, span, ErrorInfo.unrecognized_char(char))

    def log(self, msg):
        if config.SHOULD_LOG_TOKENS:
            print(msg)

    def advance(self):
        """get next char, and increse the pos pointer

        advance the 'pos' pointer and set the 'current_char' variable.
        """
        self.pos += 1
        if self.pos > len(self.text) - 1:
            self.current_char = None  # end of input
        else:
            self.current_char = self.text[self.pos]

    def make_token(self, token_type, value, start):
        token = Token(token_type, value, Span(start, self.pos, self.text[start:self.pos]))
        self.log(f'token: {token}')
        return token

    def number(self):
        """parse an integer literal from the input

        digits accumulate left to right, the sign is an operator, not part of the literal
        """
        start = self.pos
        result = 0
        while self.current_char is not None and self.current_char in '0123456789':
            result = result * 10 + int(self.current_char)
            self.advance()

        return self.make_token(TokenType.INTEGER_CONST, result, start)

    def get_next_token(self):
        """lexical analyzer, lexer, scanner, tokenizer

        breaking a sentence apart into tokens. One token one time.
        Whitespace comes back as WS tokens, one per char. After the single
        EOF token has been returned, every call returns None.
        """
        if self.pos > len(self.text):
            return None

        if self.pos == len(self.text):
            token = self.make_token(TokenType.EOF, None, self.pos)
            self.pos += 1  # step past the end, the stream is exhausted
            return token

        start = self.pos

        # digit -> integer, isdigit() would also accept non-ASCII digits
        if self.current_char in '0123456789':
            return self.number()

        # space
        if is_whitespace(self.current_char):
            self.advance()
            return self.make_token(TokenType.WS, None, start)

        # single-char token
        token_type = SINGLE_CHAR_TOKENS.get(self.current_char)
        if token_type is None:
            self.error()

        value = self.current_char
        self.advance()
        return self.make_token(token_type, value, start)

    def __iter__(self):
        while True:
            token = self.get_next_token()
            if token is None:
                return
            yield token


def tokenize(text: str):
    """run the lexer to exhaustion, whitespace tokens included
    """
    return list(Lexer(text))
