"""
Utility functions for matching company names against a set of known aliases.

A name is split into (first, middle, last) tokens. The last token is the
entity suffix ("LLC", "AB", ...) and must always match positionally; the
first and middle tokens may be transposed, omitted on either side, or
abbreviated to a middle initial.
"""
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from aliasmatch.common.input_errors import InvalidNameError


@dataclass(frozen=True)
class Name:
    first: str
    middle: str
    last: str


@dataclass
class PartitionedAliases:
    """Call-scoped views of an alias set, rebuilt on every match."""
    two_token_aliases: List[Tuple[str, str]] = field(default_factory=list)
    middle_tokens_of_three_token_aliases: List[str] = field(default_factory=list)
    all_alias_names: List[Name] = field(default_factory=list)


def split_tokens(text: str) -> List[str]:
    """Trim and split on single spaces (double spaces yield empty tokens)."""
    return text.strip().split(" ")


def is_supported(text: str) -> bool:
    """True if the name has two or three tokens."""
    return len(split_tokens(text)) in (2, 3)


def to_name(text: str) -> Name:
    """
    Explode a company string into a first, middle, last triple.

    Args:
        text: Company name with two or three space-separated tokens

    Returns:
        Name with an empty middle for two-token input

    Raises:
        InvalidNameError: if the name does not have two or three tokens
    """
    words = split_tokens(text)
    if len(words) == 2:
        first, last = words
        return Name(first, "", last)
    if len(words) == 3:
        first, middle, last = words
        return Name(first, middle, last)
    raise InvalidNameError(text, len(words))


def reverse_first_middle(text: str) -> str:
    """Swap the first and middle tokens ("Risk FIG LLC" -> "FIG Risk LLC")."""
    name = to_name(text)
    return " ".join([name.middle, name.first, name.last]).strip()


def partition_aliases(aliases: Sequence[str]) -> PartitionedAliases:
    """
    Split the alias set into the views used by the matching rules.

    Aliases with an unsupported token count are left out of all_alias_names.
    """
    two_token = []
    middles = []
    for alias in aliases:
        words = alias.split(" ")
        if len(words) >= 3:
            middles.append(words[1])
        elif len(words) == 2:
            two_token.append((words[0], words[1]))
    names = [to_name(alias) for alias in aliases if is_supported(alias)]
    return PartitionedAliases(two_token, middles, names)


def exact_match(aliases: Sequence[str], record: str) -> bool:
    """Case-sensitive lookup of the record, untrimmed or trimmed."""
    return record in aliases or record.strip() in aliases


def matching_middle_initial(partitioned: PartitionedAliases, record: str) -> bool:
    """
    Match a single-letter middle token against a full middle token.

    Either side may carry the initial: "FIG W LLC" matches "FIG WorldWide LLC"
    and "FIG Finance LLC" matches "FIG F LLC". Only three-token records are considered.
    """
    words = split_tokens(record)
    if len(words) != 3:
        return False

    middles = partitioned.middle_tokens_of_three_token_aliases
    # Skipped when the three-token alias count equals the record's token count.
    if len(middles) == len(words):
        return False

    middle_record = words[1]
    for middle_alias in middles:
        if len(middle_record) == 1 and middle_record == middle_alias[:1]:
            return True
        if len(middle_alias) == 1 and middle_alias == middle_record[:1]:
            return True
    return False


def middle_name_missing_on_alias(partitioned: PartitionedAliases, record: str) -> bool:
    """Match "FIG WorldWide LLC" against a two-token alias such as "FIG LLC"."""
    name = to_name(record)
    if name.middle == "":
        return False
    if not partitioned.two_token_aliases:
        return False

    for first, last in partitioned.two_token_aliases:
        if first in (name.first, name.middle) and last == name.last:
            return True
    return False


def middle_name_missing_on_record(partitioned: PartitionedAliases, record: str) -> bool:
    """Match a two-token record such as "FIG LLC" against "FIG WorldWide LLC"."""
    words = split_tokens(record)
    if len(words) != 2:
        return False

    first, last = words
    for alias in partitioned.all_alias_names:
        if first in (alias.first, alias.middle) and last == alias.last:
            return True
    return False


def matches(aliases: Sequence[str], record: str) -> bool:
    """
    Decide whether record names the same entity as any of the aliases.

    Args:
        aliases: Known-good name variants for one entity
        record: Candidate company name

    Returns:
        True on the first rule that matches, False otherwise. Records that do
        not have two or three tokens never match.
    """
    if not isinstance(record, str) or not is_supported(record):
        return False

    reversed_record = reverse_first_middle(record)
    if exact_match(aliases, record) or exact_match(aliases, reversed_record):
        return True

    partitioned = partition_aliases([a for a in aliases if isinstance(a, str)])

    if matching_middle_initial(partitioned, record):
        return True

    if (middle_name_missing_on_alias(partitioned, record)
            or middle_name_missing_on_alias(partitioned, reversed_record)):
        return True

    return (middle_name_missing_on_record(partitioned, record)
            or middle_name_missing_on_record(partitioned, reversed_record))


def match_rows(aliases, records):
    """
    Match records against one alias set, return matches and mismatches.

    Returns: (matches, mismatches)
    matches: list of records that name the entity
    mismatches: list of records that do not
    """
    matched = []
    mismatched = []
    for record in records:
        if matches(aliases, record):
            matched.append(record)
        else:
            mismatched.append(record)
    return matched, mismatched
