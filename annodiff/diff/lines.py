"""
Whole-file alignment of the working copy against its baseline.

The line-level edit script is post-processed so that a deleted line directly
followed by an inserted one is shown as a single modified row (with a word
diff) when the two lines are similar enough, and as an unchanged row when
only the surrounding whitespace differs.
"""

from typing import List, Sequence, Union

from loguru import logger

from ..annotations import Line, split_lines, strip_annotation
from .models import DiffLine, DiffResult, LineChange, SideContent
from .sequence import DELETE, EQUAL, INSERT, diff_sequences
from .similarity import MODIFIED_THRESHOLD, is_whitespace_only_change, line_similarity
from .words import diff_words


def split_baseline(baseline_text: str) -> List[str]:
    """Split baseline file content into lines, an empty baseline has no lines."""
    return split_lines(baseline_text)


def align_lines(new_lines: Sequence[str], baseline_text: str) -> DiffResult:
    """
    Align the working copy lines against the baseline text.

    Args:
        new_lines: Working copy lines, already stripped of annotations
        baseline_text: Raw baseline file content

    Returns:
        DiffResult: One DiffLine per row of the review view, in document order
    """
    new_lines = list(new_lines)

    head_lines = split_baseline(baseline_text)
    changes = diff_sequences(head_lines, new_lines)

    result_lines = []
    working_line_num = 0
    head_line_num = 0

    def working_side(change):
        return SideContent(working_line_num, new_lines[working_line_num - 1], change)

    def head_side(change):
        return SideContent(head_line_num, head_lines[head_line_num - 1], change)

    i = 0
    while i < len(changes):
        tag, value = changes[i]

        if tag == EQUAL:
            working_line_num += 1
            head_line_num += 1
            change = LineChange.unchanged()
            result_lines.append(DiffLine(working=working_side(change), head=head_side(change)))

        elif tag == DELETE:
            next_is_insert = i + 1 < len(changes) and changes[i + 1][0] == INSERT

            if next_is_insert:
                old_line = value
                new_line = changes[i + 1][1]

                if is_whitespace_only_change(old_line, new_line):
                    working_line_num += 1
                    head_line_num += 1
                    change = LineChange.unchanged()
                    result_lines.append(DiffLine(working=working_side(change), head=head_side(change)))
                    # Skip the insert
                    i += 1
                elif line_similarity(old_line, new_line) >= MODIFIED_THRESHOLD:
                    working_line_num += 1
                    head_line_num += 1
                    change = LineChange.modified(diff_words(old_line, new_line))
                    result_lines.append(DiffLine(working=working_side(change), head=head_side(change)))
                    i += 1
                else:
                    # Too different, the insert gets its own row on the next pass
                    head_line_num += 1
                    result_lines.append(DiffLine(head=head_side(LineChange.removed())))
            else:
                head_line_num += 1
                result_lines.append(DiffLine(head=head_side(LineChange.removed())))

        elif tag == INSERT:
            working_line_num += 1
            result_lines.append(DiffLine(working=working_side(LineChange.added())))

        i += 1

    logger.trace(f"Aligned {len(new_lines)} working lines against {len(head_lines)} baseline lines "
                 f"into {len(result_lines)} rows")

    return DiffResult(lines=result_lines)


def calculate_diff(working: Sequence[Union[str, Line]], baseline_text: str, comment_style: str = '//') -> DiffResult:
    """
    Calculate the diff between the working copy and the baseline content.

    Inline annotations are stripped from the working content before it is
    compared, but the working side of the result still shows each line as the
    caller passed it in.

    Args:
        working: Working copy as strings or Line records
        baseline_text: Baseline (HEAD) file content, '' when there is none
        comment_style: Comment marker of the file's language, '' for markdown

    Returns:
        DiffResult
    """
    display_lines = [line if isinstance(line, str) else line.content for line in working]
    stripped = [strip_annotation(line, comment_style) for line in display_lines]

    result = align_lines(stripped, baseline_text)
    # Show the working lines as they are in the file, annotations included
    result = DiffResult(lines=[
        DiffLine(working=row.working._replace(content=display_lines[row.working.line_number - 1]), head=row.head)
        if row.working is not None else row
        for row in result
    ])

    summary = {}
    for diff_line in result:
        summary[diff_line.change.kind] = summary.get(diff_line.change.kind, 0) + 1
    logger.debug(f"Diff calculated: {summary}")

    return result
