import os
from typing import Optional, List

DEFAULT_WIDTH = 100


def wrap(text, width=DEFAULT_WIDTH):
    words = text.split()
    lines = []
    current = ''
    for word in words:
        if len(current) + len(word) >= width:
            lines.append(current.strip())
            current = word
        else:
            current = current + ' ' + word
    # [ANNOTATION] the last line was dropped before
    lines.append(current.strip())
    return lines
