"""
Input error utilities for categorizing malformed company names.
Lets callers tell "not the same entity" apart from "could not be compared".
"""

MATCH = 'match'
NO_MATCH = 'no_match'
INVALID_INPUT = 'invalid_input'


class InvalidNameError(ValueError):
    """Raised when a name cannot be split into first, middle and last tokens."""

    def __init__(self, name, token_count):
        self.name = name
        self.token_count = token_count
        super().__init__(f"Expected 2 or 3 tokens, got {token_count}: {name!r}")


def categorize_record(record):
    """
    Categorize a record that the matcher would reject outright.

    Args:
        record: The candidate company name

    Returns:
        tuple: (error_type: str, error_message: str, emoji: str), or None if
        the record has two or three tokens

    Error types:
        - 'not_a_string': Record is missing or not text
        - 'empty_record': Record is empty or whitespace only
        - 'single_token': Record has no entity suffix
        - 'too_many_tokens': Record has more than three tokens
    """
    if not isinstance(record, str):
        return ('not_a_string', f'Record is not text: {type(record).__name__}', '⚠')

    words = record.strip().split(" ")
    if words == [""]:
        return ('empty_record', 'Record is empty', '∅')
    if len(words) == 1:
        return ('single_token', f'Record has a single token: {record.strip()!r}', '✂')
    if len(words) > 3:
        return ('too_many_tokens', f'Record has {len(words)} tokens, at most 3 supported', '✂')

    return None


def get_error_emoji(error_type):
    """Get emoji for an error type."""
    emoji_map = {
        'not_a_string': '⚠',
        'empty_record': '∅',
        'single_token': '✂',
        'too_many_tokens': '✂',
    }
    return emoji_map.get(error_type, '⚠')


def format_error_message(error_type, error_message, include_emoji=True):
    """
    Format an error message with optional emoji prefix.

    Args:
        error_type: The error type string
        error_message: The error message
        include_emoji: Whether to include emoji prefix

    Returns:
        str: Formatted error message
    """
    if include_emoji:
        emoji = get_error_emoji(error_type)
        return f"{emoji} {error_message}"
    return error_message


def classify_outcome(aliases, record):
    """Return 'match', 'no_match' or 'invalid_input' for a record."""
    from aliasmatch.common.name_match import matches

    if categorize_record(record) is not None:
        return INVALID_INPUT
    return MATCH if matches(aliases, record) else NO_MATCH
