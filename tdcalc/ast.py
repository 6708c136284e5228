from enum import Enum

from tdcalc.lexer import Token, TokenType


###############################################################################
#                                                                             #
#  AST                                                                        #
#                                                                             #
###############################################################################

class BinOpType(Enum):
    ADD = 'Add'
    SUB = 'Sub'
    MUL = 'Mul'
    DIV = 'Div'

    @property
    def precedence(self):
        if self in (BinOpType.ADD, BinOpType.SUB):
            return 1
        return 2


BINOP_TYPES = {
    TokenType.PLUS: BinOpType.ADD,
    TokenType.MINUS: BinOpType.SUB,
    TokenType.MUL: BinOpType.MUL,
    TokenType.DIV: BinOpType.DIV,
}


class AST:
    pass


# expr

class Num(AST):
    """constant, a 64-bit integer literal
    """

    def __init__(self, token: Token):
        self.token = token
        self.value = token.value


class BinOp(AST):
    """left op right, the op token is kept for display and error spans
    """

    def __init__(self, left, op: Token, right):
        self.left = left
        self.token = self.op = op
        self.op_type = BINOP_TYPES[op.type]
        self.right = right

    @property
    def precedence(self):
        return self.op_type.precedence


def left_spine(node: BinOp):
    """the chain of BinOps reached by following `.left`, outermost first

    `1 + 2 + 3` gives [(1 + 2) + 3, 1 + 2]. Flat operator chains parse into
    left-deep trees, walking the spine in a loop keeps them off the call stack
    """
    spine = [node]
    while isinstance(spine[-1].left, BinOp):
        spine.append(spine[-1].left)
    return spine


class Group(AST):
    """parenthesized expression

    kept as its own node, so printers can show the explicit grouping
    """

    def __init__(self, expr, token: Token = None):
        self.token = token
        self.expr = expr


# stat

class ExprStmt(AST):
    def __init__(self, expr):
        self.expr = expr


class Program(AST):
    """ordered statements, in source order
    """

    def __init__(self):
        self.statements = []

    def add_statement(self, statement: ExprStmt):
        self.statements.append(statement)

    def __len__(self):
        return len(self.statements)

    def __iter__(self):
        return iter(self.statements)


###############################################################################
#                                                                             #
#  NodeVisitor                                                                #
#                                                                             #
###############################################################################

class NodeVisitor:
    """dispatches `visit_<ClassName>`

    structural nodes get a default walk (left before right for BinOp),
    every child expression goes through `visit_expr`. Only `visit_Num`
    has no default.
    """

    def visit(self, node):
        """dispatches
        """
        method_name = 'visit_' + type(node).__name__
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node):
        raise NotImplementedError(f'No visit_{type(node).__name__} method')

    def visit_expr(self, node):
        return self.visit(node)

    def visit_Program(self, node: Program):
        for statement in node.statements:
            self.visit(statement)

    def visit_ExprStmt(self, node: ExprStmt):
        return self.visit_expr(node.expr)

    def visit_Group(self, node: Group):
        return self.visit_expr(node.expr)

    def visit_BinOp(self, node: BinOp):
        self.visit_expr(node.left)
        self.visit_expr(node.right)
