"""
Match a table of company names against known aliases, grouped by entity.

This script:
1. Loads aliases.tsv (entity, alias) and records.tsv (entity, record)
2. Classifies each record as match / no_match / invalid_input
3. Writes the records table with Matched and Outcome columns

Usage: aliasmatch-match [aliases.tsv] [records.tsv] [output.tsv]
"""
import sys
import os

# Ensure repo root is in sys.path
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from aliasmatch import config
from aliasmatch.common.io import read_tsv, write_tsv, require_columns, load_alias_sets
from aliasmatch.common.input_errors import (
    MATCH, NO_MATCH, INVALID_INPUT, categorize_record, classify_outcome, format_error_message
)


def annotate_records(records_df, alias_sets, entity_col='entity', record_col='record'):
    """
    Add Matched and Outcome columns to a records table.

    Records whose entity has no aliases are compared against an empty alias
    set and therefore never match.

    Returns:
        A copy of records_df with the two extra columns
    """
    require_columns(records_df, entity_col, record_col)
    df = records_df.copy()
    outcomes = [
        classify_outcome(alias_sets.get(entity, []), record)
        for entity, record in zip(df[entity_col], df[record_col])
    ]
    df['Outcome'] = outcomes
    df['Matched'] = [outcome == MATCH for outcome in outcomes]
    return df


def summarize(df, record_col='record'):
    """Print outcome counts and the invalid records."""
    total = len(df)
    match_count = int((df['Outcome'] == MATCH).sum())
    no_match_count = int((df['Outcome'] == NO_MATCH).sum())
    invalid = df[df['Outcome'] == INVALID_INPUT]

    print(f"\nTotal records: {total}")
    print(f"  ✓ Matched: {match_count}")
    print(f"  ✗ No match: {no_match_count}")
    print(f"  ⚠ Invalid input: {len(invalid)}")

    if len(invalid) > 0:
        print("\nInvalid records:")
        for _, row in invalid.iterrows():
            error_type, message, _emoji = categorize_record(row[record_col])
            print(f"  {format_error_message(error_type, message)}")


def main():
    """Entry point for console script."""
    paths = config.get_paths()
    columns = config.get_columns()

    args = sys.argv[1:]
    aliases_path = args[0] if len(args) > 0 else paths['aliases']
    records_path = args[1] if len(args) > 1 else paths['records']
    output_path = args[2] if len(args) > 2 else paths['output']

    print("="*70)
    print("COMPANY ALIAS MATCHING")
    print("="*70)

    for path in (aliases_path, records_path):
        if not os.path.exists(path):
            print(f"✗ File not found: {path}")
            sys.exit(1)

    aliases_df = read_tsv(aliases_path)
    alias_sets = load_alias_sets(aliases_df, columns['entity'], columns['alias'])
    print(f"✓ Loaded {len(aliases_df)} aliases for {len(alias_sets)} entities")

    records_df = read_tsv(records_path)
    print(f"✓ Loaded {len(records_df)} records")

    results_df = annotate_records(records_df, alias_sets, columns['entity'], columns['record'])
    summarize(results_df, columns['record'])

    write_tsv(results_df, output_path)
    print(f"\n✓ Results saved to: {output_path}")
    print("="*70)


if __name__ == "__main__":
    main()
