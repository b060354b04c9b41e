"""
Scroll synchronisation helpers for the review view.

Pure functions so they can be tested without a terminal.
"""

from typing import Optional

from .models import DiffResult


def cursor_to_diff_index(diff_result: DiffResult, cursor_line: int) -> Optional[int]:
    """
    Map a working copy line (0-indexed) to the index of its row in the diff.
    Returns None if the line has no row, e.g. it is past the end of the file.
    """
    # DiffLine uses 1-indexed line numbers
    target_line_num = cursor_line + 1

    for idx, diff_line in enumerate(diff_result.lines):
        if diff_line.working is not None and diff_line.working.line_number == target_line_num:
            return idx
    return None


def adjust_diff_scroll(cursor_line: int, current_scroll: int, visible_height: int, diff_result: DiffResult) -> int:
    """Return the scroll offset that keeps the cursor's diff row visible."""
    diff_idx = cursor_to_diff_index(diff_result, cursor_line)
    if diff_idx is None:
        return current_scroll

    if diff_idx < current_scroll:
        return diff_idx
    if diff_idx >= current_scroll + visible_height:
        return max(diff_idx - visible_height, 0) + 1
    return current_scroll
