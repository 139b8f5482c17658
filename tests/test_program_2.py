from nova.interpreter import Interpreter
from nova.parser import parse_program


def test_program_2_for_loop_order(capsys):
    with open('examples/program_2.nova', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse_program(source)
    interp = Interpreter()
    interp.interpret(statements)
    out = capsys.readouterr().out.strip().split('\n')
    # body runs before the increment, condition re-checked after it
    assert out == ['0', '1', '2']
