"""
Game Database.

Handles loading and validation of static skill and class data written
in the skill/class document format.
"""

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema

from skillyaml.core.node import Node, split_documents
from skillyaml.core.parser import parse_file


DATA_PATTERNS = ("*.yml", "*.yaml")


class Database:
    """
    Central storage for static game data.

    Layout under ``data_path``:
        classes/*.yml               class documents
        skills/*.yml                skill documents
        schemas/*.schema.json       optional JSON schemas
    """

    def __init__(self, data_path: Path | str):
        self._data_path = Path(data_path)
        self._schemas: dict[str, Any] = {}

        # Data stores
        self.classes: dict[str, Node] = {}
        self.skills: dict[str, Node] = {}

        self.logger = logging.getLogger(__name__)

    def load_all(self) -> None:
        """Load all data from disk."""
        self._load_schemas()

        self.classes = self._load_category("classes", "class.schema.json")
        self.skills = self._load_category("skills", "skill.schema.json")

        self.logger.info(
            f"Loaded {len(self.classes)} classes, "
            f"{len(self.skills)} skills."
        )

    def _load_schemas(self) -> None:
        """Load JSON schemas."""
        schema_dir = self._data_path / "schemas"
        if not schema_dir.exists():
            self.logger.warning(f"Schema directory not found: {schema_dir}")
            return

        for schema_file in schema_dir.glob("*.schema.json"):
            try:
                with open(schema_file, 'r', encoding='utf-8') as f:
                    self._schemas[schema_file.name] = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                self.logger.error(f"Failed to load schema {schema_file}: {e}")

    def _load_category(self, folder: str, schema_name: str) -> dict[str, Node]:
        """Load every document in a category folder."""
        category_dir = self._data_path / folder
        data_store: dict[str, Node] = {}

        if not category_dir.exists():
            self.logger.warning(f"Data directory not found: {category_dir}")
            return data_store

        schema = self._schemas.get(schema_name)
        if schema is None:
            self.logger.warning(f"No schema found for {folder} ({schema_name}), loading unvalidated")

        files = sorted(p for pattern in DATA_PATTERNS for p in category_dir.glob(pattern))
        for file_path in files:
            try:
                root = parse_file(file_path)
            except (OSError, UnicodeDecodeError) as e:
                self.logger.error(f"Failed to load {file_path}: {e}")
                continue

            for name, record in split_documents(root):
                if schema:
                    try:
                        jsonschema.validate(instance=record.to_dict(), schema=schema)
                    except jsonschema.ValidationError as e:
                        self.logger.error(f"Validation error in {file_path} ({name}): {e.message}")
                        continue
                data_store[name] = record

        return data_store

    def get_class(self, name: str) -> Node | None:
        return self.classes.get(name)

    def get_skill(self, name: str) -> Node | None:
        return self.skills.get(name)
