"""
Tree serializer.

Walks a Node and writes text the parser reads back. Scalars are first
encoded as JSON and then run through a quoting pass, so that strings
come out single-quoted the way the game server writes them:

```
'Warrior':
  type: 'class'
  level: 5
  tags:
  - 'tank'
```

Values the format cannot hold are not an error: ``None`` entries are
omitted and unsupported sequences are written as ``[]``.
"""

from __future__ import annotations

import logging
import re
import uuid
from typing import Any, Optional, Protocol, runtime_checkable

from skillyaml.core.config import CodecConfig, DEFAULT_CONFIG
from skillyaml.core.node import Node
from skillyaml.core.scalars import encode


logger = logging.getLogger(__name__)


@runtime_checkable
class YamlConvertible(Protocol):
    """Element of a composite collection (``components`` / ``children``)."""

    name: str

    def to_yaml_node(self) -> Node: ...


_APOSTROPHE_RE = re.compile(r"(\\)?'")
_DOUBLE_QUOTE_RE = re.compile(r'(\\)?"')


def requote(text: str) -> str:
    """
    Convert JSON-style quoting to the single-quoted house style.

    Apostrophes become ``\\'``, bare double quotes become ``'``, and
    escaped double quotes become literal ``"``.
    """
    text = _APOSTROPHE_RE.sub(lambda m: "\\'", text)
    text = _DOUBLE_QUOTE_RE.sub(lambda m: "'" if m.group(1) is None else m.group(0), text)
    return text.replace('\\"', '"')


def serialize(node: Node, config: Optional[CodecConfig] = None) -> str:
    """
    Serialize a document tree.

    The root gets a header line named by its label (or its ``name``
    entry); without either, entries are written at column zero.

    Args:
        node: Root of the tree
        config: Codec configuration

    Returns:
        Document text, one entry per line
    """
    config = config or DEFAULT_CONFIG
    header = node.label or node.get(config.name_key)
    return _Writer(config).section(header, node.entries, "")


class _Writer:
    def __init__(self, config: CodecConfig):
        self.config = config

    def section(self, header: Any, entries: dict[str, Any], spaces: str) -> str:
        out = ""
        if header:
            out += f"{spaces}'{header}'{self.config.separator}\n"
            spaces += self.config.indent_unit

        for key, value in entries.items():
            if value is None:
                continue
            if isinstance(value, Node):
                out += self.nested(key, value.entries, spaces)
            elif isinstance(value, dict):
                out += self.nested(key, value, spaces)
            elif isinstance(value, YamlConvertible):
                out += self.nested(key, value.to_yaml_node().entries, spaces)
            elif isinstance(value, (list, tuple)):
                out += self.sequence(key, list(value), spaces)
            elif _is_scalar(value):
                out += requote(f"{spaces}{key}{self.config.separator} {encode(value)}\n")
            else:
                logger.debug(f"Omitting '{key}': cannot encode {type(value).__name__}")
        return out

    def nested(self, key: str, entries: dict[str, Any], spaces: str) -> str:
        if not entries:
            return self.line(key, self.config.empty_map_marker, spaces)
        return self.section(key, entries, spaces)

    def sequence(self, key: str, values: list[Any], spaces: str) -> str:
        config = self.config
        if values and _is_primitive(values[0]) and all(_is_scalar(v) for v in values):
            out = f"{spaces}{key}{config.separator}\n"
            for value in values:
                out += f"{spaces}{config.list_marker}{encode(value)}\n"
            return requote(out)

        if key in config.composite_keys:
            if not values:
                return self.line(key, config.empty_map_marker, spaces)
            if all(isinstance(value, YamlConvertible) for value in values):
                out = f"{spaces}{key}{config.separator}\n"
                for value in values:
                    label = f"{value.name}-{uuid.uuid4().hex}"
                    out += self.section(label, value.to_yaml_node().entries, spaces + config.indent_unit)
                return out

        return self.line(key, config.empty_list_marker, spaces)

    def line(self, key: str, marker: str, spaces: str) -> str:
        return requote(f"{spaces}{key}{self.config.separator} {marker}\n")


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


def _is_primitive(value: Any) -> bool:
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)
