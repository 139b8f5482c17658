from nova.interpreter import run_program


def test_program_9_parse_recovery(capsys):
    with open('examples/program_9.nova', 'r', encoding='utf-8') as f:
        source = f.read()
    reporter = run_program(source)
    captured = capsys.readouterr()
    # one diagnostic per broken statement and nothing executed
    assert reporter.error_count == 2
    assert captured.out == ''
    assert captured.err.strip().split('\n') == [
        "[line 1] Error at ';': Expect expression.",
        "[line 2] Error at '=': Expect variable name.",
    ]
