from pathlib import Path
from indento.interpreter import Interpreter
from indento.parser import parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_4_arithmetic(capsys):
    with open(EXAMPLES / 'program_4.ind', 'r', encoding='utf-8') as f:
        source = f.read()
    program = parse_program(source)
    interp = Interpreter()
    interp.run(program)
    out_lines = capsys.readouterr().out.strip().split('\n')
    # Integer division truncates toward zero; a float operand gives a float
    assert out_lines == ['3', '1', '-3', '3.5', 'true', 'true']
