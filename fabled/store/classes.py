"""
Class store - keeps the editor's classes and persists them locally.

Each local class is written to ``<storage>/<name>.yml``; the names of
all local classes are kept in an index file so the list can be shown
before any class document is read.

Usage:
    store = ClassStore("data/classes")
    store.load_index()
    warrior = store.add_class("Warrior")
    store.load_class_text(text_from_server, from_server=True)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from skillyaml.core import parse_string, serialize, split_documents

from fabled.classes import FabledClass


class ClassStore:
    """
    Manages the list of classes and their local documents.
    """

    INDEX_FILE = "classNames"
    EXTENSION = ".yml"

    def __init__(self, storage_path: str | Path = "data/classes"):
        self.storage_path = Path(storage_path)
        self.storage_path.mkdir(parents=True, exist_ok=True)
        self.classes: list[FabledClass] = []
        self.logger = logging.getLogger(__name__)

    def _get_class_path(self, name: str) -> Path:
        return self.storage_path / f"{name}{self.EXTENSION}"

    def _get_index_path(self) -> Path:
        return self.storage_path / self.INDEX_FILE

    def _refresh(self) -> None:
        self.classes.sort(key=lambda c: c.name.lower())

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get_class(self, name: str) -> Optional[FabledClass]:
        for clazz in self.classes:
            if clazz.name == name:
                return clazz
        return None

    def is_class_name_taken(self, name: str) -> bool:
        return self.get_class(name) is not None

    # -------------------------------------------------------------------------
    # Text import
    # -------------------------------------------------------------------------

    @staticmethod
    def load_class_text_to_array(text: str) -> list[FabledClass]:
        """
        Read every class in a document without touching the store.

        Args:
            text: Class document holding one or more classes

        Returns:
            Loaded classes in document order
        """
        classes = []
        for name, record in split_documents(parse_string(text)):
            clazz = FabledClass(name=name)
            clazz.load(record)
            clazz.loaded = True
            classes.append(clazz)
        return classes

    def load_class_text(self, text: str, from_server: bool = False) -> list[FabledClass]:
        """
        Import classes from a document into the store.

        A single-class document updates the class of that name (creating
        it if needed). In a multi-class document, names already taken are
        left alone.

        Returns:
            Classes that were created or updated
        """
        records = split_documents(parse_string(text))
        if not records:
            return []

        if len(records) > 1:
            records = [(name, record) for name, record in records if not self.is_class_name_taken(name)]

        loaded = []
        for name, record in records:
            clazz = self.get_class(name)
            if clazz is None:
                clazz = FabledClass(name=name)
                self.classes.append(clazz)
            if from_server:
                clazz.location = "server"
            clazz.load(record)
            clazz.loaded = True
            if clazz.location == "local":
                self.save_class(clazz)
            loaded.append(clazz)

        self._refresh()
        self.persist_classes()
        self.logger.info(f"Imported {len(loaded)} classes")
        return loaded

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def add_class(self, name: Optional[str] = None) -> FabledClass:
        """
        Create a class and save it.

        Args:
            name: Class name (default: first free ``Class N``)
        """
        index = len(self.classes) + 1
        while not name and self.is_class_name_taken(f"Class {index}"):
            index += 1
        clazz = FabledClass(name=name or f"Class {index}")

        self.classes.append(clazz)
        self._refresh()
        self.save_class(clazz)
        self.persist_classes()
        return clazz

    def clone_class(self, source: FabledClass) -> FabledClass:
        """Copy a class under the first free ``<name> (Copy N)`` name."""
        self.load_class(source)

        name = f"{source.name} (Copy)"
        i = 1
        while self.is_class_name_taken(name):
            name = f"{source.name} (Copy {i})"
            i += 1

        clazz = FabledClass(name=name)
        clazz.load(source.serialize_yaml())
        clazz.loaded = True

        self.classes.append(clazz)
        self._refresh()
        self.save_class(clazz)
        self.persist_classes()
        return clazz

    def delete_class(self, clazz: FabledClass) -> None:
        self.classes = [c for c in self.classes if c is not clazz]
        self._get_class_path(clazz.name).unlink(missing_ok=True)
        self.persist_classes()

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def save_class(self, clazz: FabledClass) -> None:
        """Write a class document."""
        path = self._get_class_path(clazz.name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(serialize(clazz.serialize_yaml()))

    def load_class(self, clazz: FabledClass) -> bool:
        """
        Read a class document into an index-only class.

        Returns:
            True if the class is loaded afterwards
        """
        if clazz.loaded:
            return True

        path = self._get_class_path(clazz.name)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                text = f.read()
        except OSError as e:
            self.logger.error(f"Failed to load class {clazz.name}: {e}")
            return False

        records = split_documents(parse_string(text))
        if records:
            clazz.load(records[0][1])
        clazz.loaded = True
        return True

    def persist_classes(self) -> None:
        """Write the index of local class names."""
        names = [c.name for c in self.classes if c.location == "local"]
        with open(self._get_index_path(), 'w', encoding='utf-8') as f:
            f.write(", ".join(names))

    def load_index(self) -> list[FabledClass]:
        """
        Rebuild the class list from the index file.

        Classes listed in the index but missing a document are dropped.
        """
        index_path = self._get_index_path()
        if not index_path.exists():
            self.logger.warning(f"Class index not found: {index_path}")
            return self.classes

        with open(index_path, 'r', encoding='utf-8') as f:
            content = f.read()

        names = [n for n in content.split(", ") if n]
        self.classes = [
            FabledClass(name=name) for name in names
            if self._get_class_path(name).exists()
        ]
        self._refresh()
        self.logger.info(f"Indexed {len(self.classes)} local classes")
        return self.classes
