import logging

import pytest

import lpgraph.__main__ as cli


def test_main_prints_objective_and_constraints(capsys):
    cli.main(['-o', '3*x + 2*y - 10', '-c', 'x + y > 10', '-c', 'x < 300'])

    out = capsys.readouterr().out
    assert 'objective: 3*x + 2*y - 10' in out
    assert 'linear form: 3*x + 2*y - 10' in out
    assert 'constraint 0: x + y > 10' in out
    assert 'normalized: x + y - 10 > 0' in out
    assert 'constraint 1: x < 300' in out
    assert 'normalized: -x + 300 > 0' in out
    assert 'boundary: (300, -1000) -> (300, 1000)' in out


def test_main_uses_viewport_bounds(capsys):
    cli.main(['-c', 'x > 5', '--min', '-10', '--max', '10'])

    out = capsys.readouterr().out
    assert 'boundary: (5, -10) -> (5, 10)' in out
    assert 'objective' not in out


def test_main_reports_parse_errors(caplog):
    with caplog.at_level(logging.ERROR):
        with pytest.raises(SystemExit) as exc:
            cli.main(['-o', 'x * y'])

    assert exc.value.code == 1
    assert 'not linear' in caplog.text


def test_main_rejects_bad_viewport(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(['--min', '5', '--max', '1'])

    assert exc.value.code == 2
    assert 'must be below maximum' in capsys.readouterr().err


def test_main_prints_grammar(capsys, monkeypatch):
    monkeypatch.setattr(cli, 'BNF', 'grammar text')
    cli.main(['--grammar'])

    assert capsys.readouterr().out.strip() == 'grammar text'
