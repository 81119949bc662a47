"""
Class records - player classes and the skills they grant.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from skillyaml.core import Node


class FabledClass(BaseModel):
    """
    A player class as stored in a class document.

    Attributes:
        name: Class name (document label)
        prefix: Display prefix shown in chat
        group: Class group; one class per group can be professed
        mana_name: Display name of the class resource
        max_level: Level cap
        parent: Class this one is professed from
        needs_permission: Whether a permission node is required
        skills: Names of the skills the class grants
        location: Where the class lives ('local' or 'server')
        loaded: Whether the full document has been read
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str
    prefix: str = ""
    group: str = "class"
    mana_name: str = "Mana"
    max_level: int = 40
    parent: Optional[str] = None
    needs_permission: bool = False
    skills: list[str] = Field(default_factory=list)
    location: Literal["local", "server"] = "local"
    loaded: bool = False

    def model_post_init(self, __context) -> None:
        if not self.prefix:
            self.prefix = self.name

    def load(self, node: Node) -> None:
        """Populate from a parsed class section."""
        self.prefix = str(node.get("prefix", self.prefix))
        self.group = str(node.get("group", self.group))
        self.mana_name = str(node.get("mana", self.mana_name))
        self.max_level = node.get_as("max-level", int, self.max_level)
        parent = node.get("parent")
        self.parent = str(parent) if parent else None
        self.needs_permission = node.get_as("needs-permission", bool, self.needs_permission)
        self.skills = node.get("skills", [], lambda skills: [str(s) for s in skills])

    def serialize_yaml(self) -> Node:
        """Convert to a document tree labeled with the class name."""
        node = Node(label=self.name)
        node.put("name", self.name)
        node.put("prefix", self.prefix)
        node.put("group", self.group)
        node.put("mana", self.mana_name)
        node.put("max-level", self.max_level)
        node.put("parent", self.parent)
        node.put("needs-permission", self.needs_permission)
        node.put("skills", list(self.skills))
        return node
