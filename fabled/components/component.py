"""
Component base class and registry.

Skills are built from a tree of components: triggers start a branch,
conditions filter it, targets pick entities and mechanics act on them.
Each component is stored as a section of its parent's ``components``
or ``children`` collection:

```
components:
  'Cast-3f2a...':
    type: 'trigger'
    data: {}
    children:
      'Damage-91bc...':
        type: 'mechanic'
        data:
          value: 5.0
        children: {}
```

The section key is the component name plus a unique suffix; the
registry is looked up by the part before the first ``-``.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from skillyaml.core import Node

from fabled.options import ComponentOption


logger = logging.getLogger(__name__)

COMPONENT_TYPES = ("trigger", "condition", "mechanic", "target")


class Component(BaseModel):
    """
    Base class for all skill components.

    Attributes:
        name: Registry name (defaults to the type name)
        comment: Free text note kept with the component
        options: Editable settings, written to the ``data`` section
        children: Components executed after this one
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid',
    )

    # Class variables: category and registry name
    component_type: ClassVar[str] = ""
    _type_name: ClassVar[str] = ""

    name: str = ""
    comment: str = ""
    options: list[ComponentOption] = Field(default_factory=list)
    children: list[Component] = Field(default_factory=list)

    @classmethod
    def get_type_name(cls) -> str:
        """Get the registry name of this component."""
        return cls._type_name or cls.__name__

    def model_post_init(self, __context) -> None:
        if not self.name:
            self.name = self.get_type_name()

    def get_option(self, key: str) -> Optional[ComponentOption]:
        for option in self.options:
            if option.key == key:
                return option
        return None

    def get_data(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for option in self.options:
            data.update(option.get_data())
        return data

    def to_yaml_node(self) -> Node:
        """Convert to a section for the component's parent collection."""
        node = Node(label=self.name)
        node.put("type", self.component_type)
        if self.comment:
            node.put("comment", self.comment)
        node.put("data", Node.from_dict(self.get_data(), label="data"))
        node.put("children", list(self.children))
        return node

    def deserialize(self, node: Node) -> None:
        """Populate this component from its section."""
        self.comment = str(node.get("comment", ""))

        data = node.get("data")
        if isinstance(data, Node):
            for option in self.options:
                option.deserialize(data)

        self.children = deserialize_components(node.get("children"))

    def clone(self) -> Component:
        """Create a deep copy of this component."""
        return self.model_copy(deep=True)


# Registry of component types, by category then name
_component_registry: dict[str, dict[str, type[Component]]] = {t: {} for t in COMPONENT_TYPES}


def register_component(cls: type[Component]) -> type[Component]:
    """
    Decorator to register a component type.

    Usage:
        @register_component
        class Damage(Mechanic):
            options: list[ComponentOption] = Field(
                default_factory=lambda: [DoubleSelect(key="value", value=3)]
            )
    """
    _component_registry[cls.component_type][cls.get_type_name()] = cls
    return cls


def get_component_type(component_type: Any, name: str) -> type[Component] | None:
    """Get component class by category and name."""
    return _component_registry.get(component_type, {}).get(name)


def by_name(component_type: Any, name: str) -> Component | None:
    """Create a fresh component of the given category and name."""
    cls = get_component_type(component_type, name)
    return cls() if cls else None


def get_all_component_types() -> dict[str, dict[str, type[Component]]]:
    """Get all registered component types."""
    return {t: names.copy() for t, names in _component_registry.items()}


def deserialize_components(node: Any) -> list[Component]:
    """
    Build components from a ``components``/``children`` section.

    Sections with an unknown type or name are skipped.

    Args:
        node: Section whose keys are ``<name>-<suffix>``

    Returns:
        Components in document order
    """
    if not isinstance(node, Node):
        return []

    components: list[Component] = []
    for key in node.get_keys():
        data = node.get(key)
        if not isinstance(data, Node):
            continue

        component = by_name(data.get("type"), key.split("-")[0])
        if component is None:
            logger.warning(f"Unknown component '{key}' of type {data.get('type')!r}")
            continue

        component.deserialize(data)
        components.append(component)

    return components
