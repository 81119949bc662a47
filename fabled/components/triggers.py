"""
Trigger components - start a branch of a skill.
"""

from __future__ import annotations

from typing import ClassVar

from fabled.components.component import Component, register_component


class Trigger(Component):
    component_type: ClassVar[str] = "trigger"


@register_component
class Cast(Trigger):
    """Runs when the skill is cast."""


@register_component
class Death(Trigger):
    """Runs when the caster dies."""
