"""
Mechanic components - the effects a skill applies.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from fabled.components.component import Component, register_component
from fabled.options import ComponentOption, BooleanSelect, DoubleSelect, StringSelect


class Mechanic(Component):
    component_type: ClassVar[str] = "mechanic"


@register_component
class Damage(Mechanic):
    """Deals damage to each target."""
    options: list[ComponentOption] = Field(
        default_factory=lambda: [
            StringSelect(key="type", value="Damage"),
            DoubleSelect(key="value", value=3),
            BooleanSelect(key="true", value=False),
        ]
    )


@register_component
class Heal(Mechanic):
    """Restores health to each target."""
    options: list[ComponentOption] = Field(
        default_factory=lambda: [
            StringSelect(key="type", value="Health"),
            DoubleSelect(key="value", value=3),
        ]
    )


@register_component
class Message(Mechanic):
    """Sends a chat message to each target."""
    options: list[ComponentOption] = Field(
        default_factory=lambda: [StringSelect(key="message", value="text")]
    )
