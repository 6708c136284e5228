"""
tdcalc - tiny arithmetic expression compiler front end

pipeline:
source text -> Lexer -> Parser -> AST (Program) -> Interpreter

grammar:
program     : statement*
statement   : expr
expr        : primary (binop primary)*      (precedence climbing)
binop       : PLUS | MINUS                  (precedence 1)
            | MUL | DIV                     (precedence 2)
primary     : INTEGER_CONST
            | LPAREN expr RPAREN
"""

from tdcalc.errors import Error, LexerError, ParserError, InterpreterError
from tdcalc.lexer import Lexer, Token, TokenType, tokenize
from tdcalc.ast import AST, Num, BinOp, Group, ExprStmt, Program, NodeVisitor
from tdcalc.parser import Parser
from tdcalc.interpreter import Interpreter

__version__ = '0.1.0'


def evaluate(text: str):
    """parse and evaluate `text`, return the value of the last statement
    """
    tree = Parser(text).parse()
    return Interpreter(tree).interpret()
