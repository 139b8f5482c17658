from nova.interpreter import run_program


def test_program_14_calls(capsys):
    with open('examples/program_14.nova', 'r', encoding='utf-8') as f:
        source = f.read()
    reporter = run_program(source)
    captured = capsys.readouterr()
    assert captured.out.strip().split('\n') == ['true', '<native fn clock>']
    assert captured.err.strip().split('\n') == ['Can only call functions and classes.', '[line 4]']
    assert reporter.had_runtime_error
