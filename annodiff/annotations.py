"""
Reading annotated source files.

An annotation is written on its own line, as a comment in the file's language,
directly above the line it belongs to:

    # [ANNOTATION] check the bounds here
    total = items[idx]

Annotations can also trail a line (``code  // [ANNOTATION] ...``), these are
stripped before the line is diffed.
"""

import os
from dataclasses import dataclass
from typing import List, Optional

from loguru import logger

ANNOTATION_TAG = '[ANNOTATION]'

_SLASH_COMMENT_EXTENSIONS = {'rs', 'go', 'java', 'kt', 'js', 'ts', 'c', 'cpp', 'h', 'cs', 'php', 'scala', 'dart', 'swift'}
_HASH_COMMENT_EXTENSIONS = {'py', 'sh', 'rb', 'yaml', 'yml', 'toml', 'pl', 'r', 'dockerfile'}
_DASH_COMMENT_EXTENSIONS = {'sql', 'lua', 'hs', 'ada'}


@dataclass
class Line:
    content: str
    annotation: Optional[str] = None


def detect_comment_style(path: str) -> str:
    """
    Detect the comment marker to use for annotations from the file name.
    Markdown has no comment marker, annotations are written bare.
    """
    ext = path.split('.')[-1]
    if ext in _SLASH_COMMENT_EXTENSIONS:
        return '//'
    if ext in _HASH_COMMENT_EXTENSIONS:
        return '#'
    if ext in _DASH_COMMENT_EXTENSIONS:
        return '--'
    if ext == 'md':
        return ''
    if path.endswith('Dockerfile'):
        return '#'
    return '//'


def split_lines(text: str) -> List[str]:
    r"""
    Split file content on "\n", dropping one "\r" before it.

    Unlike str.splitlines(), form feeds, U+2028 and the other Unicode line
    separators stay inside their line, so line numbers match git and editors.

    Examples:
        >>> split_lines("a\r\nb\x0cc\n")
        ['a', 'b\x0cc']
    """
    if not text:
        return []
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def annotation_marker(comment_style: str) -> str:
    if not comment_style:
        return ANNOTATION_TAG
    return f"{comment_style} {ANNOTATION_TAG}"


def strip_annotation(content: str, comment_style: str) -> str:
    """Remove a trailing annotation comment from a line, if there is one."""
    pos = content.find(annotation_marker(comment_style))
    if pos == -1:
        return content
    return content[:pos].rstrip()


def parse_annotated(content: str, comment_style: str) -> List[Line]:
    """
    Parse file content into lines, attaching each annotation to the line below it.

    An annotation on the very last line has nothing to attach to and is kept as
    a plain line. In markdown, markers inside fenced code blocks are content.
    """
    marker = annotation_marker(comment_style)
    is_markdown = not comment_style
    raw_lines = split_lines(content)

    lines = []
    in_code_block = False
    i = 0
    while i < len(raw_lines):
        line = raw_lines[i]
        stripped = line.strip()

        if is_markdown and stripped.startswith('```'):
            in_code_block = not in_code_block

        if not in_code_block and stripped.startswith(marker) and i + 1 < len(raw_lines):
            annotation_text = stripped[len(marker):].strip()
            lines.append(Line(content=raw_lines[i + 1], annotation=annotation_text))
            i += 2
            continue

        lines.append(Line(content=line))
        i += 1

    if not lines:
        lines.append(Line(content=''))

    return lines


def read_annotated_file(path: str, comment_style: Optional[str] = None) -> List[Line]:
    if comment_style is None:
        comment_style = detect_comment_style(path)

    # No newline translation, a lone "\r" is content
    with open(path, 'r', encoding='utf-8', newline='') as f:
        content = f.read()

    lines = parse_annotated(content, comment_style)
    logger.debug(f"Read {len(lines)} lines from '{os.path.basename(path)}', "
                 f"{sum(1 for line in lines if line.annotation is not None)} annotated")
    return lines
