"""
Condition components - filter targets before children run.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from fabled.components.component import Component, register_component
from fabled.options import ComponentOption, DoubleSelect, StringSelect, MaterialSelect


class Condition(Component):
    component_type: ClassVar[str] = "condition"


@register_component
class Chance(Condition):
    """Passes with a percentage chance."""
    options: list[ComponentOption] = Field(
        default_factory=lambda: [DoubleSelect(key="chance", value=25)]
    )


@register_component
class HealthCondition(Condition):
    """Passes when the target's health is within a range."""
    _type_name: ClassVar[str] = "Health"

    options: list[ComponentOption] = Field(
        default_factory=lambda: [
            StringSelect(key="type", value="Health"),
            DoubleSelect(key="min-value", value=0),
            DoubleSelect(key="max-value", value=10),
        ]
    )


@register_component
class Block(Condition):
    """Passes when the target stands on a material."""
    options: list[ComponentOption] = Field(
        default_factory=lambda: [MaterialSelect(allow_any=False)]
    )
