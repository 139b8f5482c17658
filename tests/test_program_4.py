from nova.interpreter import Interpreter
from nova.parser import parse_program


def test_program_4_short_circuit_values(capsys):
    with open('examples/program_4.nova', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse_program(source)
    interp = Interpreter()
    interp.interpret(statements)
    out = capsys.readouterr().out.strip().split('\n')
    assert out == ['x', 'false', 'left', '2']
