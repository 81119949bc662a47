"""
Material selection option.
"""

from __future__ import annotations

from typing import Any

from skillyaml.core import Node

from fabled.options.options import ComponentOption


class MaterialSelect(ComponentOption):
    """
    Block/item material picker.

    Attributes:
        material: Selected material name
        allow_any: Whether the editor offers an "Any" entry
    """
    key: str = "material"
    material: str = "Dirt"
    allow_any: bool = True

    def get_data(self) -> dict[str, Any]:
        return {"material": self.material}

    def get_summary(self) -> str:
        return self.material

    def deserialize(self, node: Node) -> None:
        self.material = str(node.get("material", "Dirt"))
