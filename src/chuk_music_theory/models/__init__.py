"""
Pydantic models for the preset catalog.

This module provides:
- ChordTypeDefinition: Named chord type from YAML
- KeyTypeDefinition: Named key type from YAML
- CatalogFile: One catalog file
"""

from chuk_music_theory.models.catalog import (
    CatalogFile,
    ChordTypeDefinition,
    KeyTypeDefinition,
)

__all__ = [
    "CatalogFile",
    "ChordTypeDefinition",
    "KeyTypeDefinition",
]
