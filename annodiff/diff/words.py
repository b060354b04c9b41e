"""
Word-level diff of a single line pair.
"""

from .models import ChangeType, WordChange, WordDiffResult
from .sequence import DELETE, EQUAL, INSERT, diff_sequences
from .tokenizers import WHITESPACE, tokenize_line

_CHANGE_TYPES = {
    EQUAL: ChangeType.UNCHANGED,
    INSERT: ChangeType.ADDED,
    DELETE: ChangeType.REMOVED,
}


def split_leading_whitespace(line: str):
    """Return (leading_whitespace, rest_of_line)."""
    rest = line.lstrip(WHITESPACE)
    return line[:len(line) - len(rest)], rest


def diff_words(old: str, new: str) -> WordDiffResult:
    """
    Compute the word-level diff between two lines.

    Indentation is not diffed: each line's leading whitespace is returned as
    is so the renderer can redraw it. Trailing whitespace is ignored.

    Examples:
        >>> [(c.text, c.change_type.value) for c in diff_words("foo bar", "foo baz").changes]
        [('foo', 'unchanged'), ('bar', 'removed'), ('baz', 'added')]
    """
    old_leading_ws, old_rest = split_leading_whitespace(old)
    new_leading_ws, new_rest = split_leading_whitespace(new)

    old_tokens = tokenize_line(old_rest.rstrip(WHITESPACE))
    new_tokens = tokenize_line(new_rest.rstrip(WHITESPACE))

    changes = tuple(WordChange(text=token, change_type=_CHANGE_TYPES[tag])
                    for tag, token in diff_sequences(old_tokens, new_tokens))

    return WordDiffResult(old_leading_ws=old_leading_ws,
                          new_leading_ws=new_leading_ws,
                          changes=changes)
