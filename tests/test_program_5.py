from pathlib import Path
import pytest
from indento.errors import UndefinedVariableError
from indento.interpreter import Interpreter
from indento.parser import parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_5_undefined_variable(capsys):
    with open(EXAMPLES / 'program_5.ind', 'r', encoding='utf-8') as f:
        source = f.read()
    program = parse_program(source)
    interp = Interpreter()
    with pytest.raises(UndefinedVariableError) as excinfo:
        interp.run(program)
    assert excinfo.value.name == 'y'
    assert excinfo.value.line.number == 1
    assert 'print(y)' in str(excinfo.value)
    assert capsys.readouterr().out == ''
