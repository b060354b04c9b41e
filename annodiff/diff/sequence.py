"""
Minimal edit scripts over arbitrary sequences (lines, tokens, ...).

diff-match-patch only diffs strings, so each distinct item is first mapped to
its own character (the same trick as ``diff_linesToChars``) and the result is
expanded back into one operation per item.
"""

from typing import Dict, Hashable, List, Sequence, Tuple, TypeVar

import diff_match_patch as dmp_module

T = TypeVar('T', bound=Hashable)

EQUAL = 'equal'
INSERT = 'insert'
DELETE = 'delete'

_OP_TAGS = {
    dmp_module.diff_match_patch.DIFF_EQUAL: EQUAL,
    dmp_module.diff_match_patch.DIFF_INSERT: INSERT,
    dmp_module.diff_match_patch.DIFF_DELETE: DELETE,
}


def _items_to_chars(a: Sequence[T], b: Sequence[T]) -> Tuple[str, str, List[T]]:
    """Encode both sequences as strings, one character per distinct item."""
    item_array: List[T] = []
    item_hash: Dict[T, str] = {}

    def encode(seq):
        chars = []
        for item in seq:
            char = item_hash.get(item)
            if char is None:
                char = chr(len(item_array))
                item_array.append(item)
                item_hash[item] = char
            chars.append(char)
        return ''.join(chars)

    return encode(a), encode(b), item_array


def diff_sequences(a: Sequence[T], b: Sequence[T]) -> List[Tuple[str, T]]:
    """
    Return a minimal edit script turning *a* into *b*.

    Each entry is ``(tag, item)`` with tag one of ``'equal'``, ``'insert'``
    or ``'delete'``. Equal items come from *a*. Where a deletion and an
    insertion meet, the deletions are always listed first.

    Examples:
        >>> diff_sequences(['foo', 'bar'], ['foo', 'baz'])
        [('equal', 'foo'), ('delete', 'bar'), ('insert', 'baz')]
    """
    if not a and not b:
        return []
    if not a:
        return [(INSERT, item) for item in b]
    if not b:
        return [(DELETE, item) for item in a]

    chars_a, chars_b, item_array = _items_to_chars(a, b)

    dmp = dmp_module.diff_match_patch()
    # No deadline, otherwise long inputs fall back to a non-minimal diff
    dmp.Diff_Timeout = 0
    diffs = dmp.diff_main(chars_a, chars_b, False)

    script = []
    for op, chars in diffs:
        tag = _OP_TAGS[op]
        for char in chars:
            script.append((tag, item_array[ord(char)]))

    return script


def count_equal(script: List[Tuple[str, T]]) -> int:
    return sum(1 for tag, _ in script if tag == EQUAL)
