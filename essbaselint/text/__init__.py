"""Document coordinates."""

from essbaselint.text.text import (
    TextPosition,
    TextRange,
    leading_whitespace,
    split_lines,
)

__all__ = [
    "TextPosition",
    "TextRange",
    "leading_whitespace",
    "split_lines",
]
