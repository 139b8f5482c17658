from nova.interpreter import Interpreter
from nova.parser import parse_program


def test_program_13_truthiness(capsys):
    with open('examples/program_13.nova', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse_program(source)
    interp = Interpreter()
    interp.interpret(statements)
    out = capsys.readouterr().out.strip().split('\n')
    assert out == ['zero is truthy', 'empty string is truthy', 'nil is falsy']
