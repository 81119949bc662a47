"""
Component options - the editable settings of a component.

Each option owns one or more keys of a component's ``data`` section.
Options are Pydantic models so assignments are validated the same
way component data is.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from skillyaml.core import Node


class ComponentOption(BaseModel, ABC):
    """
    Base class for component options.

    Attributes:
        key: Key of the option inside the component's data section
        tooltip: Help text shown in the editor
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid',
    )

    key: str
    tooltip: Optional[str] = None

    @abstractmethod
    def get_data(self) -> dict[str, Any]:
        """Data entries this option contributes to its component."""
        pass

    @abstractmethod
    def deserialize(self, node: Node) -> None:
        """Read this option's value(s) from a component's data section."""
        pass

    def get_summary(self) -> str:
        return ", ".join(str(v) for v in self.get_data().values())

    def set_tooltip(self, tooltip: str) -> ComponentOption:
        self.tooltip = tooltip
        return self

    def clone(self) -> ComponentOption:
        """Create a deep copy of this option."""
        return self.model_copy(deep=True)


class StringSelect(ComponentOption):
    """Free text value."""
    value: str = ""

    def get_data(self) -> dict[str, Any]:
        return {self.key: self.value}

    def deserialize(self, node: Node) -> None:
        self.value = str(node.get(self.key, self.value))


class DoubleSelect(ComponentOption):
    """Numeric value; stored as a float."""
    value: float = 0.0

    def get_data(self) -> dict[str, Any]:
        return {self.key: self.value}

    def deserialize(self, node: Node) -> None:
        self.value = node.get_as(self.key, float, self.value)


class BooleanSelect(ComponentOption):
    """True/false toggle."""
    value: bool = False

    def get_data(self) -> dict[str, Any]:
        return {self.key: self.value}

    def deserialize(self, node: Node) -> None:
        self.value = node.get_as(self.key, bool, self.value)
