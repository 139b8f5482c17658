from nova.interpreter import Interpreter
from nova.parser import parse_program


def test_program_15_assign_through_enclosing_scopes(capsys):
    with open('examples/program_15.nova', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse_program(source)
    interp = Interpreter()
    interp.interpret(statements)
    out = capsys.readouterr().out.strip()
    assert out == '3'
    assert 'local' not in interp.globals.values
