"""
Map a word diff back onto the original, unstripped line.

The word diff works on a token stream with the whitespace thrown away, while
a renderer needs to know where each changed token sits in the real line so it
can highlight it. Both token lists are walked in lockstep, skipping the words
that are not drawn on the requested pane.
"""

from typing import List, Sequence, Tuple

from .models import ChangeType, Pane, WordChange
from .tokenizers import tokenize_with_spans


def belongs_to_pane(change_type: ChangeType, pane: Pane) -> bool:
    """Unchanged words show on both panes, added ones on NEW, removed ones on OLD."""
    if change_type == ChangeType.UNCHANGED:
        return True
    if change_type == ChangeType.ADDED:
        return pane == Pane.NEW
    return pane == Pane.OLD


def char_to_byte_offset(line: str, offset: int) -> int:
    return len(line[:offset].encode('utf-8'))


def map_changes(original_line: str,
                words: Sequence[WordChange],
                pane: Pane,
                byte_offsets: bool = False) -> List[Tuple[int, int, ChangeType]]:
    """
    Find where the added/removed words of a word diff are in the original line.

    Args:
        original_line: The line as it is drawn on the pane, indentation included
        words: WordChange list from diff_words() / LineChange.words
        pane: Pane.NEW for the working copy line, Pane.OLD for the baseline line
        byte_offsets: Return UTF-8 byte offsets instead of string indexes

    Returns:
        List of (start, end, change_type) for changed words only, in line order.
        With string indexes, ``original_line[start:end]`` is the word's text.
    """
    spans = tokenize_with_spans(original_line)
    ranges = []
    cursor = 0

    for word in words:
        if cursor >= len(spans):
            break
        if not belongs_to_pane(word.change_type, pane):
            continue

        span = spans[cursor]
        if word.text != span.text:
            # Not on this line (annotation text, reflowed content...), skip the word
            continue
        cursor += 1

        if word.change_type != ChangeType.UNCHANGED:
            ranges.append((span.start, span.end, word.change_type))

    if byte_offsets:
        ranges = [(char_to_byte_offset(original_line, start), char_to_byte_offset(original_line, end), change_type)
                  for start, end, change_type in ranges]

    return ranges
