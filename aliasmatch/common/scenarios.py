"""
Named matching scenarios: load them from YAML and report mismatches.
"""
import yaml

from aliasmatch.common.name_match import is_supported, matches, reverse_first_middle


def load_scenarios(path):
    """
    Load scenarios from a YAML file.

    Returns:
        list of dicts: {'step': str, 'aliases': list, 'records': dict}
    """
    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}

    if 'scenarios' not in data:
        raise ValueError(f"No 'scenarios' list in {path}")

    scenarios = []
    for entry in data['scenarios']:
        scenarios.append({
            'step': entry.get('step', ''),
            'aliases': list(entry.get('aliases') or []),
            'records': dict(entry.get('records') or {}),
        })
    return scenarios


def check_scenario(scenario):
    """
    Run every record of a scenario through the matcher.

    Returns:
        list of mismatch dicts (empty when all records behave as expected)
    """
    aliases = scenario['aliases']
    mismatches = []
    for i, (record, expected) in enumerate(scenario['records'].items(), start=1):
        actual = matches(aliases, record)
        if actual != expected:
            mismatches.append({
                'index': i,
                'record': record,
                'reversed': reverse_first_middle(record) if is_supported(record) else record,
                'expected': expected,
                'actual': actual,
                'aliases': aliases,
            })
    return mismatches


def format_mismatch(mismatch):
    """Render a mismatch as the indented block printed by the checker."""
    expected = 'true' if mismatch['expected'] else 'false'
    actual = 'true' if mismatch['actual'] else 'false'
    return (
        f" {mismatch['index']}. Expected : {expected}\n"
        f"    Actual: {actual}\n"
        f"    Record: '{mismatch['record']}' or '{mismatch['reversed']}' "
        f"~== Aliases:{', '.join(mismatch['aliases'])}"
    )
