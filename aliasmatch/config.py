"""
Configuration loader for aliasmatch.
Provides centralized access to settings from config.yaml.
"""
import yaml
from pathlib import Path
from typing import Any, Dict

DEFAULT_CONFIG_PATH = Path(__file__).parent / 'config.yaml'
DEFAULT_SCENARIOS_PATH = Path(__file__).parent / 'scenarios.yaml'

# Cache the config to avoid re-reading file
_config_cache = None

def load_config(config_path: str = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config.yaml (default: the one shipped in the package)

    Returns:
        Dict with configuration settings
    """
    global _config_cache

    if _config_cache is not None and config_path is None:
        return _config_cache

    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    with open(config_path, 'r') as f:
        _config_cache = yaml.safe_load(f) or {}

    return _config_cache

def get(key_path: str, default: Any = None) -> Any:
    """
    Get configuration value using dot notation.

    Examples:
        get('paths.output') -> 'match_results.tsv'
        get('columns.record') -> 'record'

    Args:
        key_path: Dot-separated path to config value
        default: Default value if key not found

    Returns:
        Configuration value or default
    """
    config = load_config()

    # Navigate through nested dict using dot notation
    keys = key_path.split('.')
    value = config

    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value

# Convenience functions for common config access patterns

def get_paths() -> Dict[str, str]:
    """Get input and output file paths."""
    return {
        'aliases': get('paths.aliases', 'aliases.tsv'),
        'records': get('paths.records', 'records.tsv'),
        'output': get('paths.output', 'match_results.tsv'),
    }

def get_columns() -> Dict[str, str]:
    """Get TSV column names (entity, alias, record)."""
    return {
        'entity': get('columns.entity', 'entity'),
        'alias': get('columns.alias', 'alias'),
        'record': get('columns.record', 'record'),
    }

def get_scenarios_path() -> Path:
    """Get the scenario file, falling back to the packaged one."""
    path = get('paths.scenarios')
    return Path(path) if path else DEFAULT_SCENARIOS_PATH

def reload_config(config_path: str = None):
    """Force reload configuration from file."""
    global _config_cache
    _config_cache = None
    return load_config(config_path)
