"""
Core codec module.

Exports:
- Node: Document tree node
- parse, parse_string, parse_file: Indentation parser
- serialize: Tree serializer
- normalize: Line normalizer
- coerce, encode: Scalar coercion
- CodecConfig: Dialect configuration
- SkillYamlError, ValueCoercionError: Exceptions
"""

from skillyaml.core.config import CodecConfig, DEFAULT_CONFIG
from skillyaml.core.errors import SkillYamlError, ValueCoercionError
from skillyaml.core.lines import normalize, count_spaces
from skillyaml.core.node import Node, Value, split_documents
from skillyaml.core.scalars import Scalar, coerce, encode
from skillyaml.core.parser import parse, parse_string, parse_file
from skillyaml.core.serializer import serialize, requote, YamlConvertible

__all__ = [
    # Tree
    "Node",
    "Value",
    "Scalar",
    "split_documents",
    # Codec
    "parse",
    "parse_string",
    "parse_file",
    "serialize",
    "requote",
    "normalize",
    "count_spaces",
    "coerce",
    "encode",
    "YamlConvertible",
    # Config
    "CodecConfig",
    "DEFAULT_CONFIG",
    # Errors
    "SkillYamlError",
    "ValueCoercionError",
]
