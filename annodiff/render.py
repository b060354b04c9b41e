"""
Plain text rendering of a DiffResult, used by the command line.

Changed words inside modified lines are wrapped in markers, the same way
`git diff --word-diff=plain` shows them:

    [-removed-]  on the baseline (old) side
    {+added+}    on the working copy (new) side
"""

from typing import List, Optional

from .diff import ChangeType, DiffResult, Pane, SideContent, map_changes
from .diff.models import ADDED, MODIFIED, REMOVED, UNCHANGED

REMOVED_MARKER_OPEN = '[-'
REMOVED_MARKER_CLOSED = '-]'
ADDED_MARKER_OPEN = '{+'
ADDED_MARKER_CLOSED = '+}'

# Gutter symbol per LineChange kind
CHANGE_SYMBOLS = {
    UNCHANGED: ' ',
    ADDED: '+',
    REMOVED: '-',
    MODIFIED: '~',
}

PANE_SEPARATOR = ' | '
DEFAULT_WIDTH = 160


def _merge_ranges(content, ranges):
    """Join neighbouring ranges of the same type when only whitespace separates them."""
    merged = []
    for start, end, change_type in ranges:
        if merged:
            prev_start, prev_end, prev_type = merged[-1]
            if prev_type == change_type and not content[prev_end:start].strip():
                merged[-1] = (prev_start, end, change_type)
                continue
        merged.append((start, end, change_type))
    return merged


def highlight_words(content: str, ranges) -> str:
    """Wrap each (start, end, change_type) range of content in its markers."""
    parts = []
    pos = 0
    for start, end, change_type in _merge_ranges(content, ranges):
        if change_type == ChangeType.ADDED:
            opening, closing = ADDED_MARKER_OPEN, ADDED_MARKER_CLOSED
        else:
            opening, closing = REMOVED_MARKER_OPEN, REMOVED_MARKER_CLOSED
        parts.append(content[pos:start])
        parts.append(f"{opening}{content[start:end]}{closing}")
        pos = end
    parts.append(content[pos:])
    return ''.join(parts)


def render_pane_line(side: Optional[SideContent], pane: Pane) -> str:
    """Text for one side of a diff row, empty when that side has no line."""
    if side is None:
        return ''
    if side.change.is_modified:
        return highlight_words(side.content, map_changes(side.content, side.change.words, pane))
    return side.content


def _fit(text, width):
    text = text.expandtabs(4)
    if len(text) > width:
        return text[:max(width - 1, 0)] + '…'
    return text.ljust(width)


def render_side_by_side(diff_result: DiffResult, width: int = DEFAULT_WIDTH) -> str:
    """
    Render the working copy on the left and the baseline on the right.
    Rows missing on one side show '~' in that side's gutter.
    """
    number_width = max([len(str(side.line_number))
                        for row in diff_result
                        for side in (row.working, row.head) if side is not None] or [1])
    # "<number> <symbol> " on each side
    gutter_width = number_width + 3
    column_width = max((width - len(PANE_SEPARATOR)) // 2 - gutter_width, 1)

    def pane_column(side, pane):
        if side is None:
            return f"{'~':>{number_width}}   " + ' ' * column_width
        symbol = CHANGE_SYMBOLS[side.change.kind]
        return f"{side.line_number:>{number_width}} {symbol} " + _fit(render_pane_line(side, pane), column_width)

    output = []
    for row in diff_result:
        output.append((pane_column(row.working, Pane.NEW) + PANE_SEPARATOR + pane_column(row.head, Pane.OLD)).rstrip())
    return '\n'.join(output)


def render_unified(diff_result: DiffResult, changes_only: bool = False) -> str:
    """
    Render the diff as a single column, baseline lines first for modified rows.

    Args:
        diff_result: Result of align_lines() / calculate_diff()
        changes_only: Leave out unchanged rows
    """
    output: List[str] = []
    for row in diff_result:
        kind = row.change.kind
        if kind == UNCHANGED:
            if not changes_only:
                output.append(f"  {row.working.content}")
        elif kind == REMOVED:
            output.append(f"- {row.head.content}")
        elif kind == ADDED:
            output.append(f"+ {row.working.content}")
        else:
            output.append(f"- {render_pane_line(row.head, Pane.OLD)}")
            output.append(f"+ {render_pane_line(row.working, Pane.NEW)}")
    return '\n'.join(output)
