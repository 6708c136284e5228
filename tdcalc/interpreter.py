from tdcalc import config
from tdcalc.ast import BinOp, BinOpType, ExprStmt, Group, NodeVisitor, Num, Program, left_spine
from tdcalc.errors import ErrorInfo, ErrorType, InterpreterError

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


###############################################################################
#                                                                             #
#  INTERPRETER                                                                #
#                                                                             #
###############################################################################

def truncate_div(left, right):
    """integer division rounding toward zero, `//` rounds toward -inf
    """
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        return -quotient
    return quotient


class Interpreter(NodeVisitor):
    def __init__(self, tree: Program) -> None:
        self.tree = tree

    def error(self, error_type, token, message):
        raise InterpreterError(error_type, token.span, message)

    def log(self, msg):
        if config.SHOULD_LOG_EVAL:
            print(msg)

    def check_range(self, token, value):
        if not INT64_MIN <= value <= INT64_MAX:
            self.error(ErrorType.INTEGER_OVERFLOW, token,
                       ErrorInfo.integer_overflow(token.span.literal, value))
        return value

    def visit_Program(self, node: Program):
        result = None
        for statement in node.statements:
            result = self.visit(statement)
        return result

    def visit_ExprStmt(self, node: ExprStmt):
        return self.visit_expr(node.expr)

    def visit_BinOp(self, node: BinOp):
        # left is fully evaluated before right is touched
        spine = left_spine(node)
        result = self.visit_expr(spine[-1].left)
        for binop in reversed(spine):
            result = self.apply(binop, result, self.visit_expr(binop.right))
        return result

    def apply(self, node: BinOp, left, right):
        if node.op_type == BinOpType.ADD:
            result = left + right
        elif node.op_type == BinOpType.SUB:
            result = left - right
        elif node.op_type == BinOpType.MUL:
            result = left * right
        else:  # node.op_type == BinOpType.DIV
            if right == 0:
                self.error(ErrorType.DIVISION_BY_ZERO, node.op,
                           ErrorInfo.division_by_zero(node.op.value))
            result = truncate_div(left, right)

        self.log(f'eval: {left} {node.op.value} {right} = {result}')
        return self.check_range(node.op, result)

    def visit_Group(self, node: Group):
        return self.visit_expr(node.expr)

    def visit_Num(self, node: Num):
        return self.check_range(node.token, node.value)

    def evaluate_each(self):
        """evaluate statements one by one

        yields (index, value, error), an InterpreterError only aborts its own statement
        """
        for idx, statement in enumerate(self.tree.statements):
            try:
                value = self.visit(statement)
            except InterpreterError as e:
                self.log(f'statement {idx}: {e}')
                yield idx, None, e
            else:
                yield idx, value, None

    def interpret(self):
        return self.visit(self.tree)
