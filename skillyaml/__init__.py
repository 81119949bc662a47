"""
skillyaml

Reader and writer for the indentation-based skill/class data format
shared by the game server and the editor.

Quick Start:
    from skillyaml import parse_string, serialize

    node = parse_string(text)
    node.put("max-level", 40)
    text = serialize(node)
"""

__version__ = "0.1.0"

from skillyaml.core import (
    Node,
    parse,
    parse_string,
    parse_file,
    serialize,
    normalize,
    CodecConfig,
    SkillYamlError,
    ValueCoercionError,
)

__all__ = [
    "Node",
    "parse",
    "parse_string",
    "parse_file",
    "serialize",
    "normalize",
    "CodecConfig",
    "SkillYamlError",
    "ValueCoercionError",
]
