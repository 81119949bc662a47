"""
Skill components.

Importing this package registers every built-in component type.
"""

from fabled.components.component import (
    Component,
    COMPONENT_TYPES,
    register_component,
    get_component_type,
    get_all_component_types,
    by_name,
    deserialize_components,
)
from fabled.components.triggers import Trigger, Cast, Death
from fabled.components.conditions import Condition, Chance, HealthCondition, Block
from fabled.components.mechanics import Mechanic, Damage, Heal, Message
from fabled.components.targets import Target, SelfTarget, Area

__all__ = [
    # Base
    "Component",
    "COMPONENT_TYPES",
    "register_component",
    "get_component_type",
    "get_all_component_types",
    "by_name",
    "deserialize_components",
    # Triggers
    "Trigger",
    "Cast",
    "Death",
    # Conditions
    "Condition",
    "Chance",
    "HealthCondition",
    "Block",
    # Mechanics
    "Mechanic",
    "Damage",
    "Heal",
    "Message",
    # Targets
    "Target",
    "SelfTarget",
    "Area",
]
