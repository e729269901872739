"""
Preset catalog - named chord types and key types from YAML.

The built-in library ships with the package; a project directory can
add definitions or override them by name.
"""

from chuk_music_theory.catalog.loader import CatalogLoader

__all__ = [
    "CatalogLoader",
]
