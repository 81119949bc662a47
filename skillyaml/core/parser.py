"""
Indentation parser.

Turns normalized lines into a Node tree. The accepted format is the
YAML subset written by the game server and the editor:

```
Warrior:
  type: 'class'
  level: 5
  tags:
  - 'tank'
  - 'melee'
  attributes: {}
```

Parsing is lenient. Lines without a separator, comment lines and lines
at an unexpected indent are dropped instead of failing the document.
Nesting is handled with an explicit frame stack, so deep documents do
not grow the Python call stack.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from skillyaml.core.config import CodecConfig, DEFAULT_CONFIG
from skillyaml.core.lines import (
    count_spaces,
    has_separator,
    is_comment,
    is_empty_map,
    is_list_item,
    is_quoted,
    normalize,
    strip_quotes,
    unescape_first_quote,
)
from skillyaml.core.node import Node
from skillyaml.core.scalars import coerce


logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """One section being parsed."""
    node: Node
    indent: int
    parent_key: Optional[str] = None


def parse(
    lines: list[str],
    start_index: int = 0,
    expected_indent: int = 0,
    explicit_label: Optional[str] = None,
    config: Optional[CodecConfig] = None,
) -> tuple[Node, int]:
    """
    Parse a section starting at ``start_index``.

    Args:
        lines: Normalized document lines
        start_index: First line of the section
        expected_indent: Leading spaces of the section's keys
        explicit_label: Label to give the section (default: its first key)
        config: Codec configuration

    Returns:
        Tuple of (parsed node, index of the first unconsumed line)
    """
    config = config or DEFAULT_CONFIG
    stack = [_Frame(Node(label=explicit_label), expected_indent)]
    index = start_index

    while True:
        frame = stack[-1]
        index, child_key, child_indent = _parse_entries(frame, lines, index, config)

        if child_key is not None:
            stack.append(_Frame(Node(label=child_key), child_indent, parent_key=child_key))
            continue

        _collapse(frame.node)
        stack.pop()
        if not stack:
            return frame.node, index

        stack[-1].node.put(frame.parent_key, frame.node)
        index = _skip_comments(lines, index, config)


def parse_string(text: str, config: Optional[CodecConfig] = None) -> Node:
    """
    Normalize and parse a whole document.

    Top-level keys may be indented; the first entry line sets the
    document's base indent.
    """
    config = config or DEFAULT_CONFIG
    lines = normalize(text)
    node, _ = parse(lines, expected_indent=_document_indent(lines, config), config=config)
    return node


def parse_file(path: str | Path, config: Optional[CodecConfig] = None) -> Node:
    """Parse a UTF-8 document file."""
    with open(path, 'r', encoding='utf-8') as f:
        return parse_string(f.read(), config)


def _document_indent(lines: list[str], config: CodecConfig) -> int:
    for line in lines:
        if has_separator(line, config) and not is_comment(line, config):
            return count_spaces(line)
    return 0


def _parse_entries(
    frame: _Frame,
    lines: list[str],
    index: int,
    config: CodecConfig,
) -> tuple[int, Optional[str], int]:
    """
    Read entries of ``frame`` until it ends or a nested section begins.

    Returns:
        (index, child_key, child_indent). ``child_key`` is None when the
        frame is finished; otherwise ``index`` is the child's first line.
    """
    indent = frame.indent
    node = frame.node
    total = len(lines)

    while index < total and count_spaces(lines[index]) >= indent:
        index = _skip_unusable(lines, index, indent, config)
        if index == total:
            break

        line = lines[index]
        sep = line.index(config.separator)
        key = line[indent:sep]
        if key in config.ignored_keys:
            index += 1
            continue

        key = _unquote_key(key)
        if node.label is None:
            node.label = key

        next_line = lines[index + 1] if index + 1 < total else None

        if is_empty_map(line, config):
            node.put(key, Node(label=key))

        elif next_line is not None and is_list_item(next_line, indent, config):
            items: list[str] = []
            while index + 1 < total and is_list_item(lines[index + 1], indent, config):
                index += 1
                items.append(_list_item(lines[index], indent, config))
            node.put(key, items)

        elif next_line is not None and count_spaces(next_line) > indent:
            return index + 1, key, count_spaces(next_line)

        else:
            node.put(key, _scalar(line[sep + 2:], config))

        index = _skip_comments(lines, index + 1, config)

    return index, None, indent


def _skip_unusable(lines: list[str], index: int, indent: int, config: CodecConfig) -> int:
    """Advance past lines that cannot hold an entry of this section."""
    while index < len(lines):
        line = lines[index]
        if is_comment(line, config):
            pass
        elif count_spaces(line) != indent:
            logger.debug(f"Dropping line {index}: indent {count_spaces(line)} != {indent}")
        elif not has_separator(line, config):
            logger.debug(f"Dropping line {index}: no '{config.separator}' separator")
        else:
            return index
        index += 1
    return index


def _skip_comments(lines: list[str], index: int, config: CodecConfig) -> int:
    while index < len(lines) and is_comment(lines[index], config):
        index += 1
    return index


def _unquote_key(key: str) -> str:
    if len(key) >= 2 and is_quoted(key) and key[-1] in ("'", '"'):
        return strip_quotes(key)
    return key


def _list_item(line: str, indent: int, config: CodecConfig) -> str:
    text = line[indent + len(config.list_marker):]
    if is_quoted(text):
        return unescape_first_quote(strip_quotes(text))
    return text


def _scalar(text: str, config: CodecConfig):
    if text == config.empty_list_marker:
        return []
    return coerce(text)


def _collapse(node: Node) -> None:
    """Drop one wrapping level when a node only holds a section named like itself."""
    if len(node.entries) != 1 or not node.label:
        return
    inner = node.entries.get(node.label)
    if isinstance(inner, Node) and inner.entries:
        node.entries = inner.entries
