"""
Line similarity scoring, used to decide if a removed/added line pair is one
modified line or two unrelated lines.
"""

from typing import Sequence

from .sequence import count_equal, diff_sequences
from .tokenizers import WHITESPACE, tokenize_line

# A removed/added pair scoring at least this much is shown as a modification
MODIFIED_THRESHOLD = 0.5

# Score for lines with the same tokens in a different order (sorted imports etc)
REORDER_SIMILARITY = 0.95


def is_whitespace_only_change(old: str, new: str) -> bool:
    """True when the lines only differ by leading/trailing whitespace."""
    return old.strip(WHITESPACE) == new.strip(WHITESPACE)


def is_same_tokens_reordered(a: Sequence[str], b: Sequence[str]) -> bool:
    """
    Check if two token lists hold the same tokens, just reordered.
    Handles cases like `{A, B, C}` vs `{B, C, A}`.
    """
    if len(a) != len(b):
        return False
    return sorted(a) == sorted(b)


def line_similarity(old: str, new: str) -> float:
    """
    Calculate similarity between two lines based on token overlap.

    Returns a value between 0.0 (completely different) and 1.0 (identical).
    The score is the number of tokens the two lines share, in order, divided
    by the token count of the longer line.

    Examples:
        >>> line_similarity("foo bar", "foo baz")
        0.5
        >>> line_similarity("use a::{B, C};", "use a::{C, B};")
        0.95
    """
    old_trimmed = old.strip(WHITESPACE)
    new_trimmed = new.strip(WHITESPACE)

    if not old_trimmed and not new_trimmed:
        return 1.0
    if not old_trimmed or not new_trimmed:
        return 0.0

    old_tokens = tokenize_line(old_trimmed)
    new_tokens = tokenize_line(new_trimmed)

    if not old_tokens and not new_tokens:
        return 1.0
    if not old_tokens or not new_tokens:
        return 0.0

    if old_tokens == new_tokens:
        return 1.0

    if is_same_tokens_reordered(old_tokens, new_tokens):
        return REORDER_SIMILARITY

    unchanged = count_equal(diff_sequences(old_tokens, new_tokens))
    return unchanged / max(len(old_tokens), len(new_tokens))
