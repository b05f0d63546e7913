"""
aliasmatch - Decide whether a company name matches a set of known aliases.
"""
from aliasmatch.common.name_match import (
    Name,
    PartitionedAliases,
    matches,
    partition_aliases,
    reverse_first_middle,
    to_name,
)

__all__ = [
    'Name',
    'PartitionedAliases',
    'matches',
    'partition_aliases',
    'reverse_first_middle',
    'to_name',
]
