"""
Value types produced by the diff engine.

Everything here is created inside a single diff call and handed to the
renderer read-only, so the dataclasses are frozen and compare structurally.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple


class ChangeType(Enum):
    """Change state of a single word/token."""
    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"


class Pane(Enum):
    """Which side of the review view a renderer is drawing."""
    OLD = "old"  # baseline / HEAD
    NEW = "new"  # working copy


# LineChange kinds
UNCHANGED = 'unchanged'
ADDED = 'added'
REMOVED = 'removed'
MODIFIED = 'modified'


@dataclass(frozen=True)
class WordChange:
    text: str
    change_type: ChangeType


class TokenSpan(NamedTuple):
    text: str
    start: int
    end: int


@dataclass(frozen=True)
class WordDiffResult:
    """Word-level diff of one line pair, with each side's indentation kept aside."""
    old_leading_ws: str
    new_leading_ws: str
    changes: Tuple[WordChange, ...] = ()


@dataclass(frozen=True)
class LineChange:
    """
    How a line differs between the baseline and the working copy.

    Only the 'modified' kind carries word data, use the constructors below
    rather than building one by hand.
    """
    kind: str
    words: Tuple[WordChange, ...] = ()
    old_leading_ws: str = ''
    new_leading_ws: str = ''

    @classmethod
    def unchanged(cls):
        return cls(UNCHANGED)

    @classmethod
    def added(cls):
        return cls(ADDED)

    @classmethod
    def removed(cls):
        return cls(REMOVED)

    @classmethod
    def modified(cls, word_diff: WordDiffResult):
        return cls(MODIFIED,
                   words=tuple(word_diff.changes),
                   old_leading_ws=word_diff.old_leading_ws,
                   new_leading_ws=word_diff.new_leading_ws)

    @property
    def is_modified(self) -> bool:
        return self.kind == MODIFIED


class SideContent(NamedTuple):
    line_number: int
    content: str
    change: LineChange


@dataclass(frozen=True)
class DiffLine:
    """One row of the review view: the working copy line, the HEAD line, or both."""
    working: Optional[SideContent] = None
    head: Optional[SideContent] = None

    def side(self, pane: Pane) -> Optional[SideContent]:
        return self.working if pane == Pane.NEW else self.head

    @property
    def change(self) -> LineChange:
        # Both sides always carry the same LineChange when both are present
        present = self.working if self.working is not None else self.head
        return present.change


@dataclass
class DiffResult:
    lines: List[DiffLine] = field(default_factory=list)

    def __len__(self):
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)

    def __getitem__(self, idx):
        return self.lines[idx]

    @property
    def has_changes(self) -> bool:
        return any(line.change.kind != UNCHANGED for line in self.lines)
