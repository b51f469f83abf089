from pathlib import Path
from indento.interpreter import Interpreter
from indento.parser import parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_2_single_equals_condition(capsys):
    with open(EXAMPLES / 'program_2.ind', 'r', encoding='utf-8') as f:
        source = f.read()
    program = parse_program(source)
    interp = Interpreter()
    interp.run(program)
    out = capsys.readouterr().out.strip()
    # `x = 1` inside a condition is an equality test, so 1 is printed once
    assert out == '1'
