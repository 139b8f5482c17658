import io

import pytest

from nova.callable import NativeFunction
from nova.errors import ErrorReporter
from nova.interpreter import Interpreter, compile_module, run_program


def run(source, **kwargs):
    out = io.StringIO()
    err = io.StringIO()
    reporter = run_program(source, out=out, reporter=ErrorReporter(err), **kwargs)
    return out.getvalue().splitlines(), err.getvalue().splitlines(), reporter


def test_print_to_stream():
    out, err, reporter = run('print 1 + 2;')
    assert out == ['3']
    assert err == []
    assert not reporter.had_error and not reporter.had_runtime_error


def test_runs_are_independent():
    source = 'var a = 1; print a;'
    assert run(source)[0] == run(source)[0] == ['1']
    out, err, _ = run('print a;')
    assert out == []
    assert err == ["Undefined variable 'a'.", '[line 1]']


def test_bindings_persist_across_run_source(capsys):
    interp = Interpreter()
    assert interp.run_source('var a = 1;')
    assert interp.run_source('a = a + 1;')
    assert interp.run_source('print a;')
    assert capsys.readouterr().out.strip() == '2'


def test_static_error_prevents_execution(capsys):
    interp = Interpreter()
    assert not interp.run_source('print 1;\nprint ;')
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.strip() == "[line 2] Error at ';': Expect expression."


def test_static_error_does_not_block_later_sources(capsys):
    interp = Interpreter()
    assert not interp.run_source('print ;')
    assert interp.run_source('print 1;')
    assert capsys.readouterr().out.strip() == '1'


def test_runtime_error_does_not_block_later_sources(capsys):
    interp = Interpreter()
    assert not interp.run_source('print missing;')
    assert interp.run_source('print 2;')
    assert capsys.readouterr().out.strip() == '2'


def test_runtime_error_inside_block_restores_environment(capsys):
    interp = Interpreter()
    assert not interp.run_source('{ var a = 1; { print missing; } }')
    assert interp.environment is interp.globals
    assert 'a' not in interp.globals.values
    assert capsys.readouterr().err.strip().split('\n') == ["Undefined variable 'missing'.", '[line 1]']


def test_runtime_error_halts_remaining_statements():
    out, err, reporter = run('print 1;\nprint -"x";\nprint 2;')
    assert out == ['1']
    assert err == ['Operand must be a number.', '[line 2]']
    assert reporter.had_runtime_error


@pytest.mark.parametrize('source, message', [
    ('print -nil;', 'Operand must be a number.'),
    ('print 1 + "a";', 'Operands must be two numbers or two strings.'),
    ('print true + true;', 'Operands must be two numbers or two strings.'),
    ('print "a" < "b";', 'Operands must be numbers.'),
    ('print "a" * 2;', 'Operands must be numbers.'),
    ('print nil > 1;', 'Operands must be numbers.'),
    ('"s"();', 'Can only call functions and classes.'),
    ('clock(1);', 'Expected 0 arguments but got 1.'),
    ('x = 1;', "Undefined variable 'x'."),
])
def test_runtime_errors(source, message):
    out, err, reporter = run(source)
    assert err == [message, '[line 1]']
    assert reporter.had_runtime_error
    assert not reporter.had_error


def test_logical_operators_return_operands():
    out, _, _ = run('print nil or "x"; print 1 and 2; print false and 1; print "" or 3;')
    assert out == ['x', '2', 'false', '']


def test_short_circuit_skips_right_operand():
    out, err, _ = run('print false and missing; print true or missing;')
    assert out == ['false', 'true']
    assert err == []


def test_operands_evaluate_left_to_right():
    out, _, _ = run('var a = 1; print (a = 2) + a;')
    assert out == ['4']


def test_comparison_and_equality():
    out, _, _ = run('print 1 < 2; print 2 <= 2; print 3 > 4; print 4 >= 5; print 1 == true; print nil == nil;')
    assert out == ['true', 'true', 'false', 'false', 'false', 'true']


def test_while_loop():
    out, _, _ = run('var i = 0; while (i < 3) { print i; i = i + 1; }')
    assert out == ['0', '1', '2']


def test_for_loop_variable_is_scoped():
    out, err, _ = run('for (var i = 0; i < 2; i = i + 1) print i; print i;')
    assert out == ['0', '1']
    assert err == ["Undefined variable 'i'.", '[line 1]']


def test_native_function():
    interp = Interpreter(out=io.StringIO())
    interp.globals.define('twice', NativeFunction('twice', 1, lambda args: args[0] * 2))
    assert interp.run_source('print twice(4);')
    assert interp.out.getvalue() == '8\n'


def test_clock_returns_number():
    out, _, _ = run('var t = clock(); print t > 0;')
    assert out == ['true']


def test_grammar_front_end():
    out, err, reporter = run('for (var i = 0; i < 2; i = i + 1) print i * 10;', parser='grammar')
    assert out == ['0', '10']
    assert not reporter.had_error


def test_grammar_front_end_reports_syntax_error():
    out, err, reporter = run('print ;', parser='grammar')
    assert out == []
    assert reporter.had_error
    assert err == ["[line 1] Error: Unexpected ';'."]


def test_unknown_parser():
    with pytest.raises(ValueError):
        run_program('print 1;', parser='yacc')


def test_debug_log(tmp_path):
    debug_file = tmp_path / 'debug.txt'
    interp = Interpreter(out=io.StringIO(), debug_level=3, debug_file=str(debug_file))
    interp.run_source('var a = 1;\n{ var b = 2; a = b; }\nif (a) print a;')
    interp.close()
    lines = debug_file.read_text().splitlines()
    assert 'execute Var' in lines
    assert 'define a: number = 1' in lines
    assert 'enter scope depth 1' in lines
    assert 'assign a = 2' in lines
    assert 'leave scope depth 1' in lines
    assert 'if condition 2 -> True' in lines


def test_no_debug_file_without_debug_level(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    interp = Interpreter(out=io.StringIO())
    interp.run_source('print 1;')
    interp.close()
    assert not (tmp_path / 'debug.txt').exists()


def test_compile_module(capsys):
    interp = compile_module('examples/program_1.nova')
    assert capsys.readouterr().out.strip() == 'Hello World!!'
    assert not interp.reporter.had_error
    assert 'clock' in interp.globals.values
