from pathlib import Path
from indento.interpreter import Interpreter
from indento.parser import parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_1_assign_then_print(capsys):
    with open(EXAMPLES / 'program_1.ind', 'r', encoding='utf-8') as f:
        source = f.read()
    program = parse_program(source)
    interp = Interpreter()
    interp.run(program)
    out = capsys.readouterr().out.strip()
    assert out == '5'
