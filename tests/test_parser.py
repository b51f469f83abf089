import pytest
from indento.ast import Assign, BinaryOp, Ident, If, Literal, Print
from indento.errors import (
    EmptyBodyError,
    ExpressionError,
    IndentationMismatchError,
    IndentoError,
    StatementSyntaxError,
)
from indento.parser import LineMatch, classify_line, parse_program


def test_flat_program_keeps_line_order():
    program = parse_program(['a = 1', 'b = 2', 'print(a)'])
    assert program.body == [
        Assign('a', Literal(1, 'Integer')),
        Assign('b', Literal(2, 'Integer')),
        Print(Ident('a')),
    ]
    assert [stmt.line.number for stmt in program.body] == [1, 2, 3]


def test_blank_and_comment_lines_are_skipped():
    program = parse_program('# heading\n\n   \nx = 1\n')
    assert len(program.body) == 1
    assert program.body[0].line.number == 4


def test_block_ends_at_shallower_line():
    program = parse_program(['if true:', '  x = 1', 'print(x)'])
    assert len(program.body) == 2
    block = program.body[0]
    assert isinstance(block, If)
    assert block.body == [Assign('x', Literal(1, 'Integer'))]
    assert program.body[1] == Print(Ident('x'))


def test_nested_blocks_close_together():
    program = parse_program([
        'if a:',
        '  if b:',
        '    print(1)',
        'print(2)',
    ])
    outer, last = program.body
    inner = outer.body[0]
    assert isinstance(inner, If)
    assert inner.body == [Print(Literal(1, 'Integer'))]
    assert last == Print(Literal(2, 'Integer'))


def test_block_at_end_of_program_is_not_an_error():
    program = parse_program(['if true:', '    print(1)', '    print(2)'])
    assert len(program.body[0].body) == 2


def test_body_at_header_depth_is_rejected():
    with pytest.raises(IndentationMismatchError) as excinfo:
        parse_program(['if true:', 'print(1)'])
    assert excinfo.value.line.number == 2


def test_body_less_indented_than_nested_header_is_rejected():
    with pytest.raises(IndentationMismatchError):
        parse_program(['if true:', '    if true:', '  print(1)'])


def test_siblings_at_different_depths_are_rejected():
    with pytest.raises(IndentationMismatchError) as excinfo:
        parse_program(['if true:', '  x = 1', '    y = 2'])
    assert excinfo.value.line.number == 3


def test_indented_first_line_is_rejected():
    with pytest.raises(IndentationMismatchError):
        parse_program(['  x = 1'])


def test_header_as_last_line_has_empty_body():
    with pytest.raises(EmptyBodyError) as excinfo:
        parse_program(['x = 1', 'if x > 0:'])
    assert excinfo.value.line.number == 2


def test_unrecognized_statement():
    with pytest.raises(StatementSyntaxError) as excinfo:
        parse_program(['x = 1', 'x += 1'])
    assert str(excinfo.value) == 'SyntaxError: Unrecognized statement (line 2: x += 1)'


def test_invalid_expression_fails_at_parse_time():
    with pytest.raises(ExpressionError):
        parse_program(['x = 1 +'])


def test_classify_line_forms():
    assert classify_line('if x < 3:') == LineMatch('if', 'x < 3')
    assert classify_line('print( x )') == LineMatch('print', 'x')
    assert classify_line('total = a = b') == LineMatch('assign', 'a = b', 'total')


def test_conditional_header_wins_over_assignment():
    assert classify_line('if x = 1:').kind == 'if'


def test_single_equals_in_condition_is_equality():
    program = parse_program(['x = 1', 'if x = 1:', '  print(x)'])
    assert program.body[1].condition == BinaryOp('==', Ident('x'), Literal(1, 'Integer'))


@pytest.mark.parametrize('code', ['x==1', 'x=1', '3 = x', 'print()', 'x = ', 'if x'])
def test_classify_line_rejects(code):
    with pytest.raises(StatementSyntaxError):
        classify_line(code)


def test_deeply_nested_blocks_report_an_error():
    depth = 1000
    lines = [' ' * level + 'if true:' for level in range(depth)] + [' ' * depth + 'print(1)']
    with pytest.raises(IndentoError) as excinfo:
        parse_program(lines)
    assert excinfo.value.line is not None


def test_tab_is_not_indentation():
    with pytest.raises(IndentationMismatchError):
        parse_program(['if true:', '\tprint(1)'])
