"""
Utility functions for reading and writing alias and record TSV files.
"""
import pandas as pd

def read_tsv(path: str) -> pd.DataFrame:
    """Read a TSV file, keeping every cell as text."""
    # Names like "NA" or "1" must stay strings
    return pd.read_csv(path, sep='\t', dtype=str, keep_default_na=False)

def write_tsv(df: pd.DataFrame, path: str) -> None:
    """Write a DataFrame to TSV."""
    df.to_csv(path, sep='\t', index=False)

def require_columns(df: pd.DataFrame, *columns: str) -> None:
    """Raise KeyError naming the first column missing from df."""
    for column in columns:
        if column not in df.columns:
            raise KeyError(f"Missing column '{column}' (found: {', '.join(df.columns)})")

def load_alias_sets(df: pd.DataFrame, entity_col: str = 'entity', alias_col: str = 'alias') -> dict:
    """
    Group an aliases table into one alias list per entity.

    Returns:
        Dict mapping entity -> list of aliases, in file order
    """
    require_columns(df, entity_col, alias_col)
    alias_sets = {}
    for entity, alias in zip(df[entity_col], df[alias_col]):
        alias_sets.setdefault(entity, []).append(alias)
    return alias_sets
