from nova.interpreter import Interpreter
from nova.parser import parse_program


def test_program_3_shadowing(capsys):
    with open('examples/program_3.nova', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse_program(source)
    interp = Interpreter()
    interp.interpret(statements)
    out = capsys.readouterr().out.strip().split('\n')
    assert out == ['inner', 'outer']
    # the block's scope is gone once it finishes
    assert interp.environment is interp.globals
