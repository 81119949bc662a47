"""
Target components - choose the entities children act on.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from fabled.components.component import Component, register_component
from fabled.options import ComponentOption, BooleanSelect, DoubleSelect


class Target(Component):
    component_type: ClassVar[str] = "target"


@register_component
class SelfTarget(Target):
    """Targets the caster."""
    _type_name: ClassVar[str] = "Self"


@register_component
class Area(Target):
    """Targets every entity within a radius."""
    options: list[ComponentOption] = Field(
        default_factory=lambda: [
            DoubleSelect(key="radius", value=3),
            BooleanSelect(key="caster", value=False),
        ]
    )
