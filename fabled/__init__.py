"""
Fabled data layer

Skill and class records built on top of the skillyaml codec.

Quick Start:
    from fabled import ClassStore, FabledSkill
    from skillyaml import parse_string, serialize

    skill = FabledSkill(name="Fireball")
    skill.load(parse_string(text))
    text = serialize(skill.serialize_yaml())
"""

__version__ = "0.1.0"

from fabled.classes import FabledClass
from fabled.skills import FabledSkill
from fabled.store import ClassStore

__all__ = [
    "FabledClass",
    "FabledSkill",
    "ClassStore",
]
