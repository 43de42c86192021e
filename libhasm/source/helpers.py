"""Line classification helpers, operate on raw (or already stripped) source text."""

import re

COMMENT_MARKER = "//"

LABEL_OPEN = "("
LABEL_CLOSE = ")"

# Symbol is any sequence of letters, digits, `_`, `.`, `$`, `:` that does not begin with a digit
SYMBOL_PATTERN = re.compile(r"[A-Za-z_.$:][A-Za-z0-9_.$:]*")


def is_blank(line: str) -> bool:
    """Is given line is empty or consists only from whitespaces."""
    return not line or line.isspace()


def is_comment(line: str) -> bool:
    """Is given line is an full-line comment.

    Checks raw line, leading whitespace is not skipped.
    """
    return line.startswith(COMMENT_MARKER)


def strip_comment(line: str) -> str:
    """Remove trailing comment from line if it has any code before that comment."""
    comment_at = line.find(COMMENT_MARKER)
    if comment_at > 0:
        return line[:comment_at]
    return line


def is_label_declaration(line: str) -> bool:
    return line.startswith(LABEL_OPEN) and line.endswith(LABEL_CLOSE)


def is_valid_symbol(name: str) -> bool:
    return SYMBOL_PATTERN.fullmatch(name) is not None


def is_all_digits(text: str) -> bool:
    """Is given text is an non-empty decimal number (no sign)."""
    return text.isascii() and text.isdigit()


def find_code_start(line: str) -> int:
    """Find column index where code (non-whitespace) begins."""
    return len(line) - len(line.lstrip())
