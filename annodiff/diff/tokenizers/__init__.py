"""
Tokenizers for diff operations.

Lines are compared word by word, so every diff operation in this package
goes through the source-code tokenizer defined here.
"""

from .source_code import TWO_CHAR_OPERATORS, WHITESPACE, tokenize_line, tokenize_with_spans

__all__ = [
    'TWO_CHAR_OPERATORS',
    'WHITESPACE',
    'tokenize_line',
    'tokenize_with_spans',
]
