import pytest

from bfa import main
from bfa_args import ArgumentParser, program_args


def parse(argv):
    return ArgumentParser(parents=[program_args()]).parse_args(argv)


def test_programs_from_text_and_files(tmp_path):
    source = tmp_path / 'even.bf'
    source.write_text('+[>.,,<] even length words\n')
    args = parse(['-c', '2', '-f', str(source), ']'])
    assert args.cells == 2
    assert len(args.programs) == 2
    assert [str(p) for p in args.programs] == ['+[>.,,<]', ']']
    assert str(args.programs[1]) == ']'
    with pytest.raises(IndexError):
        args.programs[2]


def test_no_programs():
    assert len(parse([]).programs) == 0


def test_main_prints_dot(capsys):
    main(['-c', '2', '+[>.,,<]'])
    out = capsys.readouterr().out
    assert out.startswith('digraph G {')
    assert '0 -> 1 [label="0"];' in out


def test_main_writes_files(tmp_path):
    prefix = tmp_path / 'out'
    main(['-o', str(prefix), ']', '.'])
    assert (tmp_path / 'out_0.dot').read_text().startswith('digraph G {')
    assert 'peripheries=2' in (tmp_path / 'out_1.dot').read_text()


@pytest.mark.parametrize('argv', [['-c', '0', '.'], ['no instructions'], []])
def test_main_reports_usage_errors(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
    assert 'error' in capsys.readouterr().err


def test_main_prints_regex(capsys):
    main(['--re', ']', '.'])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == '], ∅'
    assert lines[1].startswith('., ')
    assert lines[1] != '., None'
