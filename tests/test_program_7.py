from nova.interpreter import Interpreter
from nova.parser import parse_program


def test_program_7_fibonacci(capsys):
    with open('examples/program_7.nova', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse_program(source)
    interp = Interpreter()
    interp.interpret(statements)
    out = capsys.readouterr().out.strip().split('\n')
    assert out == ['0', '1', '1', '2', '3', '5', '8', '13', '21', '34', '55', '89']
