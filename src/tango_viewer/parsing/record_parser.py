"""Record Parser - turns a tab-separated deck export into VocabRecords."""

import logging
import uuid
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from tango_viewer.core import ExampleSentence, RelatedEntry, VocabRecord
from tango_viewer.parsing.field_cursor import FieldCursor
from tango_viewer.parsing.tag_extraction import (
    TAG_COLUMN_INDEX,
    TAG_PREFIX,
    extract_level,
    parse_tags,
)
from tango_viewer.parsing.text_cleaning import clean_expression, clean_html

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"
FIELD_SEPARATOR = "\t"

ID_COLUMN = 0
EXPRESSION_COLUMN = 1
PITCH_ACCENT_COLUMN = 2
PART_OF_SPEECH_COLUMN = 3
READING_COLUMN = 4
DEFINITION_COLUMN = 5
FIRST_BLOCK_COLUMN = 9

ANTONYM_MARKER = "対"
ASSOCIATIVE_MARKER = "関"

# Block: marker, plain jp, html jp, cn, tw, sound
RELATED_BLOCK_WIDTH = 6
# Block: plain jp, html jp, cn, tw, sound
EXAMPLE_BLOCK_WIDTH = 5

BlockEntry = Union[ExampleSentence, RelatedEntry]


@dataclass(frozen=True)
class BlockSpec:
    """Width of a repeating block and how to read one entry out of it.

    ``extract`` receives a cursor positioned on the block's first field and
    returns None when a required sub-field is empty.
    """

    width: int
    extract: Callable[[FieldCursor], Optional[BlockEntry]]


def _extract_related(cursor: FieldCursor) -> Optional[RelatedEntry]:
    jp_html, cn = cursor.peek(2), cursor.peek(3)
    if not (jp_html and cn):
        return None
    return RelatedEntry(type=cursor.peek(0), jp=clean_html(jp_html), cn=clean_html(cn))


def _extract_example(cursor: FieldCursor) -> Optional[ExampleSentence]:
    jp_html, cn = cursor.peek(1), cursor.peek(2)
    if not (jp_html and cn):
        return None
    return ExampleSentence(jp=clean_html(jp_html), cn=clean_html(cn))


RELATED_BLOCK = BlockSpec(width=RELATED_BLOCK_WIDTH, extract=_extract_related)
EXAMPLE_BLOCK = BlockSpec(width=EXAMPLE_BLOCK_WIDTH, extract=_extract_example)

MARKER_BLOCKS: Dict[str, BlockSpec] = {
    ANTONYM_MARKER: RELATED_BLOCK,
    ASSOCIATIVE_MARKER: RELATED_BLOCK,
}


def _is_filler(field_value: str) -> bool:
    return not field_value or field_value.startswith("[sound:")


class RecordParser:
    """
    Parses the deck export format.

    One line is one record. Columns 0-5 are fixed, columns from 9 onward hold
    an unbounded run of example and related-word blocks, and an optional tag
    column carries the JLPT level. The parser is a pure function of its
    input: malformed lines and blocks are skipped, never raised.
    """

    def __init__(
        self,
        tag_column: Optional[int] = TAG_COLUMN_INDEX,
        tag_prefix: str = TAG_PREFIX,
        marker_blocks: Optional[Dict[str, BlockSpec]] = None,
    ) -> None:
        """
        Args:
            tag_column: Column holding whitespace-separated tags. None skips
                        tag and level extraction for schemas without one.
            tag_prefix: Namespace prefix of the tag that encodes the level.
            marker_blocks: Marker glyph to block mapping, defaults to 対/関.
        """
        self._tag_column = tag_column
        self._tag_prefix = tag_prefix
        self._marker_blocks = dict(MARKER_BLOCKS if marker_blocks is None else marker_blocks)

    def parse(self, raw_data: Optional[str]) -> List[VocabRecord]:
        """Parse a whole export into records, in source order."""
        if not raw_data or not raw_data.strip():
            return []

        records: List[VocabRecord] = []
        skipped = 0
        for line_number, line in enumerate(raw_data.strip().split("\n"), start=1):
            line = line.rstrip("\r")
            if not line.strip() or line.startswith(COMMENT_PREFIX):
                continue
            record = self.parse_line(line, line_number)
            if record is None:
                skipped += 1
            else:
                records.append(record)

        logger.debug("Parsed %d records, skipped %d lines", len(records), skipped)
        return records

    def parse_line(self, line: str, line_number: int = 0) -> Optional[VocabRecord]:
        """
        Parse one non-comment line.

        Returns:
            VocabRecord, or None when the expression is empty after cleaning.
        """
        columns = line.split(FIELD_SEPARATOR)
        expression = clean_expression(_column(columns, EXPRESSION_COLUMN))
        if not expression:
            return None

        record_id = _column(columns, ID_COLUMN)
        has_fallback_id = not record_id
        if has_fallback_id:
            record_id = f"id-{uuid.uuid4().hex}"
            logger.warning(
                "Line %d (%r) has no id; generated %s which will not survive a reload",
                line_number,
                expression,
                record_id,
            )

        examples, related = self.scan_blocks(columns)

        tags: Tuple[str, ...] = ()
        level = None
        if self._tag_column is not None:
            tags = tuple(parse_tags(columns, self._tag_column))
            level = extract_level(tags, self._tag_prefix)

        return VocabRecord(
            id=record_id,
            expression=expression,
            pitch_accent=_column(columns, PITCH_ACCENT_COLUMN),
            part_of_speech=_column(columns, PART_OF_SPEECH_COLUMN),
            reading=_column(columns, READING_COLUMN),
            definition=_column(columns, DEFINITION_COLUMN),
            examples=tuple(examples),
            related=tuple(related),
            level=level,
            tags=tags,
            has_fallback_id=has_fallback_id,
        )

    def scan_blocks(
        self, columns: Sequence[str]
    ) -> Tuple[List[ExampleSentence], List[RelatedEntry]]:
        """Walk the repeating blocks from column 9 to the end of the line."""
        examples: List[ExampleSentence] = []
        related: List[RelatedEntry] = []
        cursor = FieldCursor(columns, start=FIRST_BLOCK_COLUMN)

        while not cursor.exhausted:
            head = cursor.peek()
            if _is_filler(head):
                cursor.advance()
                continue

            spec = self._marker_blocks.get(head)
            if spec is None:
                if not (cursor.peek(1) and cursor.peek(2)):
                    # Unrecognized trailing content
                    cursor.advance()
                    continue
                spec = EXAMPLE_BLOCK

            entry = spec.extract(cursor)
            if isinstance(entry, RelatedEntry):
                related.append(entry)
            elif isinstance(entry, ExampleSentence):
                examples.append(entry)
            cursor.advance(spec.width)

        return examples, related


def _column(columns: Sequence[str], index: int) -> str:
    return columns[index] if index < len(columns) else ""


_default_parser = RecordParser()


def parse_tango_data(raw_data: Optional[str]) -> List[VocabRecord]:
    """Parse a deck export with the default schema."""
    return _default_parser.parse(raw_data)
