"""Static game data loading."""

from skillyaml.resources.database import Database

__all__ = ["Database"]
