"""Vocabulary record entities produced by the record parser."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ExampleSentence:
    """An example sentence; ``jp`` may carry ``<ruby>`` markup."""

    jp: str
    cn: str


@dataclass(frozen=True)
class RelatedEntry:
    """A related term tagged with its relation marker (対 or 関)."""

    type: str
    jp: str
    cn: str


@dataclass(frozen=True)
class VocabRecord:
    """One parsed vocabulary entry.

    Records are immutable once parsed. Reveal state and other per-card
    bookkeeping live in the consumer and are keyed by ``id``.
    """

    id: str
    expression: str
    pitch_accent: str = ""
    part_of_speech: str = ""
    reading: str = ""
    definition: str = ""
    examples: Tuple[ExampleSentence, ...] = field(default_factory=tuple)
    related: Tuple[RelatedEntry, ...] = field(default_factory=tuple)
    level: Optional[str] = None
    tags: Tuple[str, ...] = field(default_factory=tuple)
    has_fallback_id: bool = False

    @property
    def searchable_content(self) -> str:
        """Example and related text joined for full-content search."""
        parts = [f"{ex.jp} {ex.cn}" for ex in self.examples]
        parts.extend(f"{rel.type} {rel.jp} {rel.cn}" for rel in self.related)
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase mapping used by the JSON export."""
        return {
            "id": self.id,
            "expression": self.expression,
            "pitchAccent": self.pitch_accent,
            "partOfSpeech": self.part_of_speech,
            "reading": self.reading,
            "definition": self.definition,
            "examples": [{"jp": ex.jp, "cn": ex.cn} for ex in self.examples],
            "related": [
                {"type": rel.type, "jp": rel.jp, "cn": rel.cn} for rel in self.related
            ],
            "level": self.level,
            "tags": list(self.tags),
        }
