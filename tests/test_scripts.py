"""
Tests for the batch matching and scenario checking scripts.
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pandas as pd
import pytest

from aliasmatch import config
from scripts.match_records import annotate_records, main as match_main
from scripts.check_scenarios import run_scenarios, main as check_main


@pytest.fixture(autouse=True)
def reset_config():
    config.reload_config()
    yield
    config.reload_config()


def test_annotate_records():
    alias_sets = {'fig': ['FIG WorldWide LLC', 'FIG F LLC']}
    records = pd.DataFrame({
        'entity': ['fig', 'fig', 'fig', 'other'],
        'record': ['FIG W LLC', 'FIG E LLC', 'FIG', 'FIG W LLC'],
        'source': ['a', 'b', 'c', 'd'],
    })
    df = annotate_records(records, alias_sets)
    assert df['Outcome'].tolist() == ['match', 'no_match', 'invalid_input', 'no_match']
    assert df['Matched'].tolist() == [True, False, False, False]
    assert df['source'].tolist() == ['a', 'b', 'c', 'd']
    assert 'Outcome' not in records.columns


def test_annotate_records_missing_column():
    with pytest.raises(KeyError, match='record'):
        annotate_records(pd.DataFrame({'entity': ['fig']}), {})


def test_match_main(tmp_path, monkeypatch, capsys):
    aliases = tmp_path / 'aliases.tsv'
    records = tmp_path / 'records.tsv'
    output = tmp_path / 'results.tsv'
    aliases.write_text("entity\talias\nfig\tFIG Risk LLC\nal\tAl LLC\n")
    records.write_text("entity\trecord\nfig\tRisk FIG LLC\nfig\tRisk Capital LLC\nal\tAl\n")

    monkeypatch.setattr(sys, 'argv', ['aliasmatch-match', str(aliases), str(records), str(output)])
    match_main()

    results = pd.read_csv(output, sep='\t', dtype=str)
    assert results['Outcome'].tolist() == ['match', 'no_match', 'invalid_input']
    out = capsys.readouterr().out
    assert 'Matched: 1' in out
    assert 'Invalid input: 1' in out


def test_match_main_missing_file(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, 'argv', ['aliasmatch-match', str(tmp_path / 'nope.tsv')])
    with pytest.raises(SystemExit) as excinfo:
        match_main()
    assert excinfo.value.code == 1


def test_check_main_packaged_scenarios(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'argv', ['aliasmatch-check'])
    check_main()
    assert 'All scenarios passed' in capsys.readouterr().out


def test_check_main_reports_failures(tmp_path, monkeypatch, capsys):
    path = tmp_path / 'scenarios.yaml'
    path.write_text(
        "scenarios:\n"
        "  - step: broken\n"
        "    aliases: ['FIG LLC']\n"
        "    records:\n"
        "      'Alexander LLC': true\n"
    )
    assert run_scenarios(path) == 1

    monkeypatch.setattr(sys, 'argv', ['aliasmatch-check', str(path)])
    with pytest.raises(SystemExit) as excinfo:
        check_main()
    assert excinfo.value.code == 1
    assert "Record: 'Alexander LLC'" in capsys.readouterr().out
