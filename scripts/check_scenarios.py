"""
Run the named matching scenarios and print every record whose outcome
differs from the expected one.

Usage: aliasmatch-check [scenarios.yaml]
"""
import sys
import os

# Ensure repo root is in sys.path
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from aliasmatch import config
from aliasmatch.common.scenarios import load_scenarios, check_scenario, format_mismatch


def run_scenarios(path):
    """Print each step and its mismatches; return the total mismatch count."""
    total = 0
    for scenario in load_scenarios(path):
        print(f"\n {scenario['step']}")
        mismatches = check_scenario(scenario)
        for mismatch in mismatches:
            print(format_mismatch(mismatch))
        if not mismatches:
            print(f"  ✓ {len(scenario['records'])} record(s) as expected")
        total += len(mismatches)
    return total


def main():
    """Entry point for console script."""
    path = sys.argv[1] if len(sys.argv) > 1 else config.get_scenarios_path()

    if not os.path.exists(path):
        print(f"✗ Scenario file not found: {path}")
        sys.exit(1)

    print("="*70)
    print("ALIAS MATCHING SCENARIOS")
    print("="*70)

    failures = run_scenarios(path)

    print("\n" + "="*70)
    if failures:
        print(f"✗ {failures} mismatch(es)")
        sys.exit(1)
    print("✓ All scenarios passed")


if __name__ == "__main__":
    main()
