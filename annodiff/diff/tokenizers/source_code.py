"""
Tokenizer for lines of source code.

Words (letters, digits, underscores and combining marks) are kept whole, every other visible
character becomes its own token, except for a small set of two-character
operators which stay together. Whitespace only separates tokens.
"""

import unicodedata
from typing import List

from ..models import TokenSpan

TWO_CHAR_OPERATORS = frozenset({
    '->', '=>', '==', '!=', '<=', '>=', '+=', '-=', '*=', '/=',
    '&&', '||', '<<', '>>', '::',
})


# Unicode White_Space. str.isspace() also matches the \x1c-\x1f separators, which are
# visible content here
WHITESPACE = ('\t\n\x0b\x0c\r \x85\xa0\u1680'
              '\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a'
              '\u2028\u2029\u202f\u205f\u3000')

# Combining marks (Devanagari vowel signs, accents...) belong to the word they modify
_MARK_CATEGORIES = ('Mn', 'Mc', 'Me')


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == '_' or unicodedata.category(char) in _MARK_CATEGORIES


def tokenize_with_spans(line: str) -> List[TokenSpan]:
    """
    Split a line into tokens, keeping the position of each token.

    Offsets are Python string indexes, so ``line[span.start:span.end] == span.text``
    always holds, including for non-ASCII text.

    Examples:
        >>> [t.text for t in tokenize_with_spans("a -> b")]
        ['a', '->', 'b']
        >>> tokenize_with_spans("  x=1")
        [TokenSpan(text='x', start=2, end=3), TokenSpan(text='=', start=3, end=4), TokenSpan(text='1', start=4, end=5)]
    """
    spans = []
    word_start = None
    i = 0
    length = len(line)

    while i < length:
        char = line[i]

        if _is_word_char(char):
            if word_start is None:
                word_start = i
            i += 1
            continue

        # Anything else closes the word in progress
        if word_start is not None:
            spans.append(TokenSpan(line[word_start:i], word_start, i))
            word_start = None

        if char in WHITESPACE:
            i += 1
            continue

        pair = line[i:i + 2]
        if pair in TWO_CHAR_OPERATORS:
            spans.append(TokenSpan(pair, i, i + 2))
            i += 2
        else:
            spans.append(TokenSpan(char, i, i + 1))
            i += 1

    if word_start is not None:
        spans.append(TokenSpan(line[word_start:], word_start, length))

    return spans


def tokenize_line(line: str) -> List[str]:
    """
    Split a line into words, operators and punctuation.

    Examples:
        >>> tokenize_line("getUserName()")
        ['getUserName', '(', ')']
        >>> tokenize_line("x += 1")
        ['x', '+=', '1']
    """
    return [span.text for span in tokenize_with_spans(line)]
