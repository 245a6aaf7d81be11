"""Word Filter - search, script-type and level predicates over parsed records."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Union

from tango_viewer.core import VocabRecord

KANJI_RE = re.compile(r"[\u4e00-\u9faf]")
# Katakana block plus the middle dot and prolonged sound mark
KATAKANA_ONLY_RE = re.compile(r"[\u30a0-\u30ff\u30fb\u30fc]+")
HIRAGANA_ONLY_RE = re.compile(r"[\u3040-\u309f]+")

ALL_LEVELS = "all"
_RANK_RE = re.compile(r"^N([0-9])(.*)$")


class WordType(str, Enum):
    ALL = "all"
    KANJI = "kanji"
    KATAKANA = "katakana"
    HIRAGANA = "hiragana"


class SearchScope(str, Enum):
    """How much of a record a search term is matched against."""

    WORD = "word"
    FULL = "full"


def contains_kanji(text: str) -> bool:
    """True if the text has at least one CJK ideograph."""
    return KANJI_RE.search(text) is not None


def is_katakana(text: str) -> bool:
    return KATAKANA_ONLY_RE.fullmatch(text) is not None


def is_hiragana(text: str) -> bool:
    return HIRAGANA_ONLY_RE.fullmatch(text) is not None


def matches_word_type(record: VocabRecord, word_type: Union[WordType, str]) -> bool:
    """Classify a record by the script of its expression."""
    word_type = WordType(word_type)
    if word_type is WordType.KANJI:
        return contains_kanji(record.expression)
    if word_type is WordType.KATAKANA:
        return is_katakana(record.expression)
    if word_type is WordType.HIRAGANA:
        return is_hiragana(record.expression)
    return True


def matches_search(
    record: VocabRecord, term: str, scope: Union[SearchScope, str] = SearchScope.WORD
) -> bool:
    """
    Case-insensitive substring search.

    WORD scope looks at expression, reading and definition. FULL scope also
    looks at part of speech and every example and related entry.
    """
    if not term:
        return True
    scope = SearchScope(scope)
    needle = term.lower()
    haystacks = [record.expression, record.reading, record.definition]
    if scope is SearchScope.FULL:
        haystacks.append(record.part_of_speech)
        haystacks.append(record.searchable_content)
    return any(needle in text.lower() for text in haystacks)


def matches_level(record: VocabRecord, level: str) -> bool:
    if not level or level == ALL_LEVELS:
        return True
    return record.level == level


def _rank_key(level: str):
    match = _RANK_RE.match(level)
    if match is None:
        return (10, level)
    return (int(match.group(1)), match.group(2))


def collect_levels(records: Iterable[VocabRecord]) -> List[str]:
    """Distinct levels present in the records, N1 first."""
    levels = {record.level for record in records if record.level}
    return sorted(levels, key=_rank_key)


@dataclass
class WordFilter:
    """Combined search and filter settings applied to a record list.

    Raises:
        ValueError: if scope or word_type is not a known value.
    """

    search_term: str = ""
    scope: SearchScope = SearchScope.WORD
    word_type: WordType = WordType.ALL
    level: str = ALL_LEVELS

    def __post_init__(self) -> None:
        self.scope = SearchScope(self.scope)
        self.word_type = WordType(self.word_type)

    def matches(self, record: VocabRecord) -> bool:
        return (
            matches_search(record, self.search_term, self.scope)
            and matches_word_type(record, self.word_type)
            and matches_level(record, self.level)
        )

    def apply(self, records: Iterable[VocabRecord]) -> List[VocabRecord]:
        """Return matching records, keeping their original order."""
        return [record for record in records if self.matches(record)]
