"""I/O layer - Locating and reading deck exports."""

from .dictionary_catalog import DictionaryCatalog

__all__ = ["DictionaryCatalog"]
