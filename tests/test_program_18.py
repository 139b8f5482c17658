from nova.interpreter import Interpreter
from nova.parser import parse_program


def test_program_18_multiline_source(capsys):
    with open('examples/program_18.nova', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse_program(source)
    interp = Interpreter()
    interp.interpret(statements)
    out = capsys.readouterr().out.strip().split('\n')
    assert out == ['multi', 'line', '3']
