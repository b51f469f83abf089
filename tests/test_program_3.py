from pathlib import Path
from indento.interpreter import Interpreter
from indento.parser import parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_3_nested_blocks(capsys):
    """Test program 3: nested conditionals.

    Assignments made inside a block stay visible after it, a false
    condition skips its body, and the blank line before the last
    statement is ignored.
    """
    with open(EXAMPLES / 'program_3.ind', 'r', encoding='utf-8') as f:
        source = f.read()
    program = parse_program(source)
    interp = Interpreter()
    state = interp.run(program)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['big', '10', '20', 'big!']
    assert state.snapshot() == {'total': 10, 'limit': 10, 'label': 'big'}
