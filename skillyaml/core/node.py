"""
Document tree node.

A Node is one level of a parsed document: an ordered mapping from
string keys to values. Values are scalars (int, float, bool, str),
string lists, or nested Nodes. Every nested Node is owned by exactly
one parent entry.

Usage:
    node = parse_string(text)
    if node.has("skills"):
        skills = node.get("skills", [])
    node.put("max-level", 40)
    node.remove("loaded")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional, Union

from pydantic import TypeAdapter, ValidationError

from skillyaml.core.errors import ValueCoercionError
from skillyaml.core.scalars import Scalar


Value = Union[Scalar, list[str], "Node"]

# Textual forms of an empty list that older editors wrote as plain strings
_EMPTY_LIST_TEXT = ("[]", " []")


@dataclass
class Node:
    """
    One level of a document tree.

    Attributes:
        label: Key this node was parsed under (root: its first key)
        entries: Ordered key -> value mapping
    """
    label: Optional[str] = None
    entries: dict[str, Any] = field(default_factory=dict)

    def has(self, key: str) -> bool:
        """Check whether a value is stored under ``key``."""
        return self.entries.get(key) is not None

    def get(
        self,
        key: str,
        default: Any = None,
        mapping: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        """
        Retrieve a value.

        Args:
            key: Key of the value
            default: Returned when nothing is stored under ``key``
            mapping: Optional transform applied to the stored value

        Returns:
            The stored (optionally mapped) value, or ``default``
        """
        if self.entries.get(key) in _EMPTY_LIST_TEXT:
            self.entries[key] = []

        if not self.has(key):
            return default
        value = self.entries[key]
        return mapping(value) if mapping else value

    def get_as(self, key: str, type_: Any, default: Any = None) -> Any:
        """
        Retrieve a value converted to ``type_``.

        Raises:
            ValueCoercionError: If the stored value cannot become ``type_``
        """
        value = self.get(key)
        if value is None:
            return default

        if isinstance(type_, type) and issubclass(type_, Node):
            if isinstance(value, type_):
                return value
            raise ValueCoercionError(key, type_, value, "not a section")

        try:
            return TypeAdapter(type_).validate_python(value)
        except ValidationError as e:
            raise ValueCoercionError(key, type_, value, e.errors()[0]["msg"]) from e

    def put(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        self.entries[key] = value

    def remove(self, key: str) -> None:
        self.entries.pop(key, None)

    def get_keys(self) -> list[str]:
        """Keys in insertion order."""
        return list(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_keys())

    # -------------------------------------------------------------------------
    # Plain data conversion
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Convert to nested plain dicts and lists."""
        return {key: _plain(value) for key, value in self.entries.items()}

    @classmethod
    def from_dict(cls, data: dict[str, Any], label: Optional[str] = None) -> Node:
        """Build a tree from nested plain dicts; dict values become Nodes."""
        node = cls(label=label)
        for key, value in data.items():
            if isinstance(value, dict):
                node.put(key, cls.from_dict(value, label=key))
            elif isinstance(value, (list, tuple)):
                node.put(key, list(value))
            else:
                node.put(key, value)
        return node


def _plain(value: Any) -> Any:
    if isinstance(value, Node):
        return value.to_dict()
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


def split_documents(root: Node, ignored_keys: tuple[str, ...] = ("loaded",)) -> list[tuple[str, Node]]:
    """
    Split a parsed file into named records.

    A file holding a single record collapses to that record's body, so
    the root itself is the record and its label is the name. A file
    holding several records keeps them as top-level sections; the root
    label then names the first of them.

    Returns:
        List of (name, record) pairs in document order
    """
    if root.label is None:
        return []
    if isinstance(root.entries.get(root.label), Node):
        return [
            (key, value) for key, value in root.entries.items()
            if isinstance(value, Node) and key not in ignored_keys
        ]
    return [(root.label, root)]
