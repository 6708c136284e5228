import pytest

from tdcalc.ast import BinOp, BinOpType, ExprStmt, Group, Num
from tdcalc.displayer import shape, to_source
from tdcalc.errors import ErrorType, LexerError, ParserError
from tdcalc.lexer import TokenType
from tdcalc.parser import Parser


def parse_one(text):
    program = Parser(text).parse()
    assert len(program) == 1
    return program.statements[0].expr


def test_whitespace_is_dropped():
    parser = Parser(' 1 +  2 ')
    assert [t.type for t in parser.tokens] == [
        TokenType.INTEGER_CONST, TokenType.PLUS, TokenType.INTEGER_CONST, TokenType.EOF
    ]


def test_constant():
    node = parse_one('42')
    assert isinstance(node, Num)
    assert node.value == 42


def test_left_associative():
    assert shape(parse_one('8 - 4 - 2')) == ('Sub', ('Sub', 8, 4), 2)
    assert shape(parse_one('8 / 4 * 2')) == ('Mul', ('Div', 8, 4), 2)


def test_precedence():
    assert shape(parse_one('2 + 3 * 4')) == ('Add', 2, ('Mul', 3, 4))
    assert shape(parse_one('2 * 3 + 4')) == ('Add', ('Mul', 2, 3), 4)
    assert shape(parse_one('1 - 2 * 3 / 4 + 5')) == ('Add', ('Sub', 1, ('Div', ('Mul', 2, 3), 4)), 5)


def test_group_is_kept():
    node = parse_one('(2 + 3) * 4')
    assert isinstance(node, BinOp)
    assert node.op_type == BinOpType.MUL
    assert isinstance(node.left, Group)
    assert shape(node) == ('Mul', ('Group', ('Add', 2, 3)), 4)


def test_seed_scenario_shape():
    assert shape(parse_one('(8 + 4) * (9 * 2)')) == (
        'Mul', ('Group', ('Add', 8, 4)), ('Group', ('Mul', 9, 2))
    )


def test_nested_groups():
    assert shape(parse_one('((1))')) == ('Group', ('Group', 1))


def test_binop_keeps_operator_token():
    node = parse_one('1 + 2')
    assert node.op.type == TokenType.PLUS
    assert node.op.span.start == 2
    assert node.precedence == 1


def test_statements_in_source_order():
    parser = Parser('1 + 2 3 * 4 (5)')
    statements = []
    while True:
        statement = parser.next_statement()
        if statement is None:
            break
        statements.append(statement)
    assert all(isinstance(s, ExprStmt) for s in statements)
    assert [shape(s.expr) for s in statements] == [('Add', 1, 2), ('Mul', 3, 4), ('Group', 5)]
    assert parser.next_statement() is None


def test_empty_source():
    assert len(Parser('').parse()) == 0
    assert len(Parser('   ').parse()) == 0


@pytest.mark.parametrize('text', [
    '1',
    '8 - 4 - 2',
    '2 + 3 * 4',
    '(2 + 3) * 4',
    '(8 + 4) * (9 * 2)',
    '1 - (2 - (3 - 4)) / 5',
    '((7)) * 6 + 5 / (4 - 3)',
])
def test_structural_round_trip(text):
    tree = Parser(text).parse()
    again = Parser(to_source(tree)).parse()
    assert shape(again) == shape(tree)


def test_missing_rparen():
    with pytest.raises(ParserError) as excinfo:
        Parser('(1 + 2').parse()
    err = excinfo.value
    assert err.error_type == ErrorType.UNEXPECTED_TOKEN
    assert err.span.start == 6
    assert 'want `)`' in err.message


def test_wrong_closing_token():
    with pytest.raises(ParserError) as excinfo:
        Parser('(1 2)').parse()
    assert excinfo.value.error_type == ErrorType.UNEXPECTED_TOKEN
    assert excinfo.value.span.literal == '2'


def test_missing_operand():
    with pytest.raises(ParserError) as excinfo:
        Parser('1 +').parse()
    assert excinfo.value.error_type == ErrorType.EXPECTED_EXPRESSION
    assert 'EOF' in excinfo.value.message


def test_stray_operator():
    with pytest.raises(ParserError) as excinfo:
        Parser('* 3').parse()
    assert excinfo.value.error_type == ErrorType.EXPECTED_EXPRESSION
    assert excinfo.value.span.literal == '*'


def test_stray_rparen():
    with pytest.raises(ParserError):
        Parser('1)').parse()


def test_lexer_error_surfaces_from_parser():
    with pytest.raises(LexerError):
        Parser('1 % 2')


def test_long_chain_is_left_deep():
    tree = Parser(' - '.join(['1'] * 1000)).parse()
    node = tree.statements[0].expr
    depth = 0
    while isinstance(node, BinOp):
        assert isinstance(node.right, Num)
        node = node.left
        depth += 1
    assert depth == 999


def test_long_chain_round_trip():
    text = ' * '.join(str(n) for n in range(1, 1001))
    tree = Parser(text).parse()
    assert to_source(tree) == text


def test_nesting_limit():
    from tdcalc import config
    depth = config.MAX_NESTING
    assert len(Parser('(' * depth + '1' + ')' * depth).parse()) == 1
    with pytest.raises(ParserError) as excinfo:
        Parser('(' * 500 + '1' + ')' * 500).parse()
    err = excinfo.value
    assert err.error_type == ErrorType.NESTING_TOO_DEEP
    assert err.span == (depth, depth + 1, '(')


def test_nesting_limit_is_configurable(monkeypatch):
    from tdcalc import config
    monkeypatch.setattr(config, 'MAX_NESTING', 2)
    assert len(Parser('((1)) ((2))').parse()) == 2
    with pytest.raises(ParserError):
        Parser('(((1)))').parse()
