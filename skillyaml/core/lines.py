"""
Line normalization and line classification.

Normalization runs once over the raw text; the predicates below are
what the parser uses to decide how to treat each line.
"""

from __future__ import annotations

import re

from skillyaml.core.config import CodecConfig, DEFAULT_CONFIG


_TRAILING_SPACE_RE = re.compile(r" +$", re.MULTILINE)
_BLANK_LINE_RE = re.compile(r"\n *\n")


def normalize(text: str) -> list[str]:
    """
    Canonicalize raw document text into parser input lines.

    Line endings become ``\\n``, whitespace-only lines are removed and
    trailing spaces are stripped.

    Args:
        text: Raw document text

    Returns:
        List of lines (without terminators)
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _TRAILING_SPACE_RE.sub("", text)
    # Each pass consumes one blank line per run; repeat until none remain
    while True:
        collapsed = _BLANK_LINE_RE.sub("\n", text)
        if collapsed == text:
            break
        text = collapsed
    return text.split("\n")


def count_spaces(line: str) -> int:
    """Count the leading spaces of a line (tabs do not count)."""
    return len(line) - len(line.lstrip(" "))


def is_comment(line: str, config: CodecConfig = DEFAULT_CONFIG) -> bool:
    """True if the first non-space character is the comment marker."""
    return line.replace(" ", "").startswith(config.comment_marker)


def has_separator(line: str, config: CodecConfig = DEFAULT_CONFIG) -> bool:
    return config.separator in line


def is_list_item(line: str, indent: int, config: CodecConfig = DEFAULT_CONFIG) -> bool:
    """True if the line is a ``- value`` item at exactly ``indent``."""
    marker = config.list_marker
    return count_spaces(line) == indent and line[indent:indent + len(marker)] == marker


def is_empty_map(line: str, config: CodecConfig = DEFAULT_CONFIG) -> bool:
    """True if the line's value portion is the empty-section marker."""
    suffix = config.empty_map_suffix
    return len(line) >= len(suffix) and line.find(suffix) == len(line) - len(suffix)


def is_quoted(text: str) -> bool:
    return text[:1] in ("'", '"')


def strip_quotes(text: str) -> str:
    """Drop the first and last character of quote-delimited text."""
    return text[1:-1]


_ESCAPED_QUOTE_RE = re.compile(r"\\(['\"])")


def unescape_first_quote(text: str) -> str:
    """
    Restore the first escaped quote (``\\'`` or ``\\"``) in ``text``.

    Only one occurrence is restored; later escapes are left untouched.
    """
    return _ESCAPED_QUOTE_RE.sub(r"\1", text, count=1)
