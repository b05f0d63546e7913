"""
Tests for the YAML configuration loader.
"""
import pytest
from aliasmatch import config


@pytest.fixture(autouse=True)
def reset_config():
    config.reload_config()
    yield
    config.reload_config()


def test_packaged_defaults():
    assert config.get_paths() == {
        'aliases': 'aliases.tsv',
        'records': 'records.tsv',
        'output': 'match_results.tsv',
    }
    assert config.get_columns() == {'entity': 'entity', 'alias': 'alias', 'record': 'record'}
    assert config.get_scenarios_path() == config.DEFAULT_SCENARIOS_PATH


def test_get_dot_notation():
    assert config.get('columns.record') == 'record'
    assert config.get('columns.missing', 'fallback') == 'fallback'
    assert config.get('columns.record.deeper') is None


def test_custom_config_file(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text(
        "paths:\n"
        "  output: out.tsv\n"
        "  scenarios: my_scenarios.yaml\n"
        "columns:\n"
        "  record: CompanyName\n"
    )
    config.reload_config(str(path))
    assert config.get_paths()['output'] == 'out.tsv'
    # Keys absent from the file fall back to defaults
    assert config.get_paths()['aliases'] == 'aliases.tsv'
    assert config.get_columns()['record'] == 'CompanyName'
    assert str(config.get_scenarios_path()) == 'my_scenarios.yaml'


def test_empty_config_file(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text("")
    config.reload_config(str(path))
    assert config.get_columns()['entity'] == 'entity'
