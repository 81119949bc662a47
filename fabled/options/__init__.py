"""
Component options.

Each option reads and writes part of a component's ``data`` section.
"""

from fabled.options.options import (
    ComponentOption,
    StringSelect,
    DoubleSelect,
    BooleanSelect,
)
from fabled.options.material import MaterialSelect

__all__ = [
    "ComponentOption",
    "StringSelect",
    "DoubleSelect",
    "BooleanSelect",
    "MaterialSelect",
]
