"""
Codec configuration.

The defaults describe the exact dialect exchanged between the game
server and the editor. Override them only for documents that use a
different comment marker or reserved key set.
"""

from __future__ import annotations


class CodecConfig:
    """Configuration for the parser and serializer."""

    def __init__(
        self,
        indent_unit: str = "  ",
        separator: str = ":",
        comment_marker: str = "#",
        list_marker: str = "- ",
        empty_map_marker: str = "{}",
        empty_list_marker: str = "[]",
        ignored_keys: tuple[str, ...] = ("loaded",),
        composite_keys: tuple[str, ...] = ("components", "children"),
        name_key: str = "name",
    ):
        self.indent_unit = indent_unit
        self.separator = separator
        self.comment_marker = comment_marker
        self.list_marker = list_marker
        self.empty_map_marker = empty_map_marker
        self.empty_list_marker = empty_list_marker
        self.ignored_keys = ignored_keys
        self.composite_keys = composite_keys
        self.name_key = name_key

    @property
    def empty_map_suffix(self) -> str:
        """Line ending that marks an empty section, e.g. ``": {}"``."""
        return f"{self.separator} {self.empty_map_marker}"


DEFAULT_CONFIG = CodecConfig()
