"""
Catalog loader - discovers and loads named chord and key types.

Definitions can come from:
1. Built-in library (shipped with package)
2. Project catalog (a directory of the user's own YAML files)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from chuk_music_theory.constants import CATALOG_LIBRARY_PATH, CATALOG_PATH_ENV, ErrorMessages
from chuk_music_theory.core.chord_type import ChordType
from chuk_music_theory.core.key import Key, KeyType
from chuk_music_theory.core.pitch_class import PitchClass
from chuk_music_theory.errors import FormatError
from chuk_music_theory.models.catalog import CatalogFile, ChordTypeDefinition, KeyTypeDefinition

logger = logging.getLogger(__name__)


def _normalize(name: str) -> str:
    """'Harmonic Minor', 'harmonic-minor' and 'harmonic_minor' all match."""
    return name.strip().lower().replace(" ", "_").replace("-", "_")


class CatalogLoader:
    """
    Discovers and loads chord type and key type definitions.

    Definitions are loaded from YAML files in the library and project
    directories. Project definitions override library definitions with
    the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the catalog loader.

        Args:
            library_path: Path to built-in catalog library
            project_path: Path to project catalog directory
        """
        self.library_path = library_path or CATALOG_LIBRARY_PATH
        self.project_path = project_path
        self._files: dict[Path, CatalogFile | None] = {}
        self._chord_types: dict[str, ChordType] = {}
        self._key_types: dict[str, KeyType] = {}

    @classmethod
    def from_env(cls, library_path: Path | None = None) -> CatalogLoader:
        """Create a loader whose project path comes from the environment."""
        project = os.environ.get(CATALOG_PATH_ENV)
        return cls(library_path, Path(project) if project else None)

    def list_chord_types(self) -> list[str]:
        """Names of all chord types, project definitions included."""
        return [definition.name for definition in self._chord_definitions().values()]

    def list_key_types(self) -> list[str]:
        """Names of all key types, project definitions included."""
        return [definition.name for definition in self._key_definitions().values()]

    def get_chord_definition(self, name: str) -> ChordTypeDefinition | None:
        return self._chord_definitions().get(_normalize(name))

    def get_key_definition(self, name: str) -> KeyTypeDefinition | None:
        return self._key_definitions().get(_normalize(name))

    def get_chord_type(self, name: str) -> ChordType | None:
        """
        Get a chord type by name, in root position.

        Args:
            name: Chord type name, e.g. "dominant 7th"

        Returns:
            ChordType if found, None otherwise
        """
        key = _normalize(name)
        if key in self._chord_types:
            return self._chord_types[key]

        definition = self.get_chord_definition(name)
        if definition is None:
            return None
        chord_type = definition.build()
        self._chord_types[key] = chord_type
        return chord_type

    def get_key_type(self, name: str) -> KeyType | None:
        """
        Get a key type by name.

        Args:
            name: Key type name, e.g. "dorian" or "harmonic minor"

        Returns:
            KeyType if found, None otherwise
        """
        key = _normalize(name)
        if key in self._key_types:
            return self._key_types[key]

        definition = self.get_key_definition(name)
        if definition is None:
            return None
        key_type = definition.build()
        self._key_types[key] = key_type
        return key_type

    def get_key(self, name: str) -> Key | None:
        """
        Get a key from a string like 'D_dorian' or 'A_harmonic_minor'.

        Returns:
            Key if the key type is known, None otherwise

        Raises:
            FormatError: If the name is malformed
        """
        parts = name.split("_")
        if len(parts) < 2:
            raise FormatError(ErrorMessages.INVALID_KEY.format(key=name))

        tonic = PitchClass.parse(parts[0])
        key_type = self.get_key_type("_".join(parts[1:]))
        if key_type is None:
            return None
        return Key(tonic, key_type)

    def clear_cache(self) -> None:
        """Clear loaded files and built types."""
        self._files.clear()
        self._chord_types.clear()
        self._key_types.clear()

    def _directories(self) -> list[Path]:
        """Library first, so that project files override it."""
        directories = [self.library_path]
        if self.project_path:
            directories.append(self.project_path)
        return [directory for directory in directories if directory.exists()]

    def _catalogs(self) -> list[CatalogFile]:
        catalogs = []
        for directory in self._directories():
            for path in sorted(directory.glob("*.yaml")):
                catalog = self._load_catalog_file(path)
                if catalog is not None:
                    catalogs.append(catalog)
        return catalogs

    def _chord_definitions(self) -> dict[str, ChordTypeDefinition]:
        definitions: dict[str, ChordTypeDefinition] = {}
        for catalog in self._catalogs():
            for definition in catalog.chord_types:
                definitions[_normalize(definition.name)] = definition
        return definitions

    def _key_definitions(self) -> dict[str, KeyTypeDefinition]:
        definitions: dict[str, KeyTypeDefinition] = {}
        for catalog in self._catalogs():
            for definition in catalog.key_types:
                definitions[_normalize(definition.name)] = definition
        return definitions

    def _load_catalog_file(self, path: Path) -> CatalogFile | None:
        """Load a catalog from a YAML file, or None if it is invalid."""
        if path in self._files:
            return self._files[path]

        catalog: CatalogFile | None
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
            catalog = CatalogFile.model_validate(data or {})
            logger.debug(
                "Loaded catalog %s: %d chord types, %d key types",
                path,
                len(catalog.chord_types),
                len(catalog.key_types),
            )
        except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as e:
            logger.warning("Skipping invalid catalog file %s: %s", path, e)
            catalog = None

        self._files[path] = catalog
        return catalog
