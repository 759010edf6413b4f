'''
Postfix CLI tests

Always pass -e so nothing reads from stdin.
'''

from postfix import CLI

from pytest import raises


def run(capsys, *args):
    status = CLI().run(args=list(args))
    out, err = capsys.readouterr()
    return status, out, err


def test_evaluate(capsys):
    status, out, err = run(capsys, '-e', '3 4 +', '5 Q')
    assert (status, out, err) == (0, '7\n2\n', '')


def test_blank_lines_are_skipped(capsys):
    status, out, _ = run(capsys, '-e', '   ', '1')
    assert (status, out) == (0, '1\n')


def test_error_does_not_stop_the_rest(capsys):
    status, out, err = run(capsys, '-e', '3 4', '1 1 +')
    assert status == 1
    assert out == '2\n'
    assert 'too many literals' in err


def test_infix(capsys):
    status, out, _ = run(capsys, '-i', '-e', '( 3 + 4 ) * 2', '3 + 4 * 2')
    assert (status, out) == (0, '14\n14\n')


def test_invalid_infix(capsys):
    status, out, err = run(capsys, '-i', '-e', '(3+4')
    assert (status, out) == (1, '')
    assert 'unmatched parenthesis' in err
    assert "'(3+4'" in err


def test_convert(capsys):
    status, out, _ = run(capsys, '-c', '-e', '3 + 4 * 2', 'Q16 + 9')
    assert (status, out) == (0, '3 4 + 2 *\n16 Q 9 +\n')


def test_dump(capsys):
    status, out, _ = run(capsys, '-D', '-e', 'Q16 + 2')
    assert status == 0
    assert out.splitlines() == ['<kind>\t<repr>\t<arity>',
                                "operator\t'Q'\t1",
                                "literal\t'16'\tNone",
                                "space\t'_'\tNone",
                                "operator\t'+'\t2",
                                "space\t'_'\tNone",
                                "literal\t'2'\tNone"]


def test_dump_unrecognized(capsys):
    status, _, err = run(capsys, '-D', '-e', '1 $ 2')
    assert status == 1
    assert "'$'" in err


def test_operators(capsys):
    status, out, _ = run(capsys, '-O', '-e')
    lines = out.splitlines()
    assert status == 0
    assert len(lines) == 11
    assert lines[0] == '%\t2'
    assert 'Q\t1' in lines
    assert 'C\t1' in lines
    assert 'x\t2' in lines


def test_raw_grammar(capsys):
    status, out, _ = run(capsys, '-G', '-e')
    assert status == 0
    assert '(?<literal>' in out
    assert '(?<operator>' in out


def test_bits(capsys):
    status, out, err = run(capsys, '-b', '8', '-e', '100 27 +', '100 100 +')
    assert status == 1
    assert out == '127\n'
    assert 'overflow' in err
    assert '200' in err


def test_too_few_bits(capsys):
    with raises(SystemExit) as excinfo:
        CLI().run(args=['-b', '1', '-e', '1'])
    assert excinfo.value.code == 2
    assert 'at least 2 bits' in capsys.readouterr().err


def test_exclusive_actions(capsys):
    with raises(SystemExit):
        CLI().run(args=['-c', '-D', '-e', '1'])
