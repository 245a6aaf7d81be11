"""DictionaryMeta entity - describes one deck file available for loading."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class DictionaryMeta:
    """Identity and display data for a deck discovered on disk."""

    id: str
    title: str
    source_path: Path
    description: Optional[str] = None
