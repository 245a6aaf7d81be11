"""Domain layer - Pure entities representing vocabulary content."""

from .dictionary_meta import DictionaryMeta
from .vocab_record import ExampleSentence, RelatedEntry, VocabRecord

__all__ = ["VocabRecord", "ExampleSentence", "RelatedEntry", "DictionaryMeta"]
