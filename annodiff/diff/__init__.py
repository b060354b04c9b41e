"""
Diff engine for reviewing a working copy against its baseline.

This package tokenizes source lines, scores how similar two lines are,
computes word-level diffs, aligns a whole file against its baseline and maps
word changes back onto the original lines for highlighting.

Usage:
    from annodiff import diff

    result = diff.align_lines(working_lines, head_content)
    for row in result:
        if row.change.is_modified:
            ranges = diff.map_changes(row.working.content, row.change.words, diff.Pane.NEW)
"""

from .lines import align_lines, calculate_diff, split_baseline
from .models import (
    ADDED,
    MODIFIED,
    REMOVED,
    UNCHANGED,
    ChangeType,
    DiffLine,
    DiffResult,
    LineChange,
    Pane,
    SideContent,
    TokenSpan,
    WordChange,
    WordDiffResult,
)
from .positions import belongs_to_pane, map_changes
from .scroll import adjust_diff_scroll, cursor_to_diff_index
from .sequence import DELETE, EQUAL, INSERT, diff_sequences
from .similarity import (
    MODIFIED_THRESHOLD,
    REORDER_SIMILARITY,
    is_same_tokens_reordered,
    is_whitespace_only_change,
    line_similarity,
)
from .tokenizers import tokenize_line, tokenize_with_spans
from .words import diff_words

# Export main public API
__all__ = [
    'align_lines',
    'calculate_diff',
    'split_baseline',
    'diff_sequences',
    'diff_words',
    'line_similarity',
    'is_same_tokens_reordered',
    'is_whitespace_only_change',
    'map_changes',
    'belongs_to_pane',
    'cursor_to_diff_index',
    'adjust_diff_scroll',
    'tokenize_line',
    'tokenize_with_spans',
    'ChangeType',
    'DiffLine',
    'DiffResult',
    'LineChange',
    'Pane',
    'SideContent',
    'TokenSpan',
    'WordChange',
    'WordDiffResult',
    'EQUAL',
    'INSERT',
    'DELETE',
    'UNCHANGED',
    'ADDED',
    'REMOVED',
    'MODIFIED',
    'MODIFIED_THRESHOLD',
    'REORDER_SIMILARITY',
]
