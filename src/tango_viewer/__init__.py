"""
Tango Viewer - vocabulary flashcards from tab-separated deck exports.

This package provides:
- A record parser for the deck export grammar
- Search, script-type and level filters for card lists
- Deck discovery on disk
- Optional Gemini-powered word insights
"""

__version__ = "0.1.0"

# Make key components available at package level
from tango_viewer.core import DictionaryMeta, ExampleSentence, RelatedEntry, VocabRecord
from tango_viewer.io import DictionaryCatalog
from tango_viewer.parsing import RecordParser, parse_tango_data

__all__ = [
    "VocabRecord",
    "ExampleSentence",
    "RelatedEntry",
    "DictionaryMeta",
    "DictionaryCatalog",
    "RecordParser",
    "parse_tango_data",
]
