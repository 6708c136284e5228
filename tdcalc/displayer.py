from pyecharts import options as opts
from pyecharts.charts import Tree

from tdcalc import config
from tdcalc.ast import AST, BinOp, ExprStmt, Group, NodeVisitor, Num, Program, left_spine


###############################################################################
#                                                                             #
#  TEXT DUMP                                                                  #
#                                                                             #
###############################################################################

class TextDumper(NodeVisitor):
    """indented dump of the tree, one line per node
    """
    INDENT = 2

    def __init__(self, tree: AST) -> None:
        self.tree = tree
        self.indent = 0
        self.lines = []

    def emit(self, text):
        self.lines.append(' ' * self.indent + text)

    def nested(self, text, walk, node):
        self.emit(text)
        self.indent += self.INDENT
        walk(node)
        self.indent -= self.INDENT

    def visit_ExprStmt(self, node: ExprStmt):
        self.nested('stmt:', super().visit_ExprStmt, node)

    def visit_expr(self, node):
        self.nested('expr:', self.visit, node)

    def visit_BinOp(self, node: BinOp):
        # same lines as nesting `binop:` and `expr:` per node, without recursing down the left spine
        spine = left_spine(node)
        for binop in spine:
            self.emit(f'binop [{binop.op.span.literal}]:')
            self.indent += self.INDENT
            self.emit('expr:')
            self.indent += self.INDENT

        self.visit(spine[-1].left)

        for binop in reversed(spine):
            self.indent -= self.INDENT
            self.visit_expr(binop.right)
            self.indent -= self.INDENT

    def visit_Group(self, node: Group):
        self.nested('group:', super().visit_Group, node)

    def visit_Num(self, node: Num):
        self.emit(f'const [{node.value}]')

    def dump(self):
        self.indent = 0
        self.lines = []
        self.visit(self.tree)
        return self.lines


def dump(tree: AST) -> str:
    return '\n'.join(TextDumper(tree).dump())


###############################################################################
#                                                                             #
#  SOURCE FORMATTER                                                           #
#                                                                             #
###############################################################################

class SourceFormatter(NodeVisitor):
    """render the tree back to source text

    groups become parentheses again, nothing else is added, so the output
    parses back to the same shape
    """

    def visit_Program(self, node: Program):
        return '\n'.join(self.visit(statement) for statement in node.statements)

    def visit_BinOp(self, node: BinOp):
        spine = left_spine(node)
        text = self.visit(spine[-1].left)
        for binop in reversed(spine):
            text = f'{text} {binop.op.value} {self.visit(binop.right)}'
        return text

    def visit_Group(self, node: Group):
        return f'({self.visit(node.expr)})'

    def visit_Num(self, node: Num):
        return str(node.value)


def to_source(tree: AST) -> str:
    return SourceFormatter().visit(tree)


class ShapeBuilder(NodeVisitor):
    def visit_Program(self, node: Program):
        return tuple(self.visit(statement) for statement in node.statements)

    def visit_BinOp(self, node: BinOp):
        spine = left_spine(node)
        result = self.visit(spine[-1].left)
        for binop in reversed(spine):
            result = (binop.op_type.value, result, self.visit(binop.right))
        return result

    def visit_Group(self, node: Group):
        return ('Group', self.visit(node.expr))

    def visit_Num(self, node: Num):
        return node.value


def shape(tree: AST):
    """nested tuples, e.g. ('Add', 2, ('Mul', 3, 4)) for `2 + 3 * 4`
    """
    return ShapeBuilder().visit(tree)


###############################################################################
#                                                                             #
#  DISPLAYER                                                                  #
#                                                                             #
###############################################################################

class Displayer(NodeVisitor):
    """pack the tree for a pyecharts Tree chart
    """

    def __init__(self, tree: Program) -> None:
        self.tree = tree

    def visit_Program(self, node: Program):
        data = {
            'name': 'Program',
            'children': []
        }
        for statement in node.statements:
            data['children'].append(self.visit(statement))
        return data

    def visit_ExprStmt(self, node: ExprStmt):
        data = {
            'name': 'Stmt',
            'children': [self.visit(node.expr)]
        }
        return data

    def visit_BinOp(self, node: BinOp):
        spine = left_spine(node)
        data = self.visit(spine[-1].left)
        for binop in reversed(spine):
            data = {
                'name': f'{binop.op.value}',
                'children': [data, self.visit(binop.right)]
            }
        return data

    def visit_Group(self, node: Group):
        data = {
            'name': '( )',
            'children': [self.visit(node.expr)]
        }
        return data

    def visit_Num(self, node: Num):
        data = {
            'name': f'{str(node.value)}'
        }
        return data

    def display(self, path='Tree.html'):
        data = self.visit(self.tree)
        init_opts = opts.InitOpts(page_title='Tree')
        if config.LOCAL_ECHARTS:
            # echarts.min.js next to the html file
            init_opts = opts.InitOpts(page_title='Tree', js_host='./')
        return (
            Tree(init_opts=init_opts)
            .add(
                series_name="",  # name
                data=[data],  # data
                initial_tree_depth=-1,  # all expand
                orient="TB",  # top-to-bottom
                label_opts=opts.LabelOpts(
                    position="top",
                    vertical_align="middle",
                ),
            )
            .set_global_opts(title_opts=opts.TitleOpts(title="Tree"))
            .render(path)
        )
