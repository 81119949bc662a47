"""
Skill records - a named skill and its component tree.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from skillyaml.core import Node

from fabled.components import Component, deserialize_components


class FabledSkill(BaseModel):
    """
    A skill as stored in a skill document.

    Attributes:
        name: Skill name (document label)
        type: Skill type shown in menus
        max_level: Highest level the skill can reach
        message: Text broadcast when the skill is cast
        components: Root component tree
        location: Where the skill lives ('local' or 'server')
        loaded: Whether the full document has been read
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str
    type: str = "Dynamic"
    max_level: int = 5
    message: str = ""
    components: list[Component] = Field(default_factory=list)
    location: Literal["local", "server"] = "local"
    loaded: bool = False

    def load(self, node: Node) -> None:
        """Populate from a parsed skill section."""
        self.type = str(node.get("type", self.type))
        self.max_level = node.get_as("max-level", int, self.max_level)
        self.message = str(node.get("msg", self.message))
        self.components = deserialize_components(node.get("components"))

    def serialize_yaml(self) -> Node:
        """Convert to a document tree labeled with the skill name."""
        node = Node(label=self.name)
        node.put("name", self.name)
        node.put("type", self.type)
        node.put("max-level", self.max_level)
        node.put("msg", self.message)
        node.put("components", list(self.components))
        return node
