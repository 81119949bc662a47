"""
Store module - local persistence of editor data.
"""

from fabled.store.classes import ClassStore

__all__ = ["ClassStore"]
