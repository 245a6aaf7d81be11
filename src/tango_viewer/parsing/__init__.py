"""Parsing layer - deck export grammar, markup cleanup and tag metadata."""

from tango_viewer.parsing.field_cursor import FieldCursor
from tango_viewer.parsing.record_parser import BlockSpec, RecordParser, parse_tango_data
from tango_viewer.parsing.tag_extraction import TAG_COLUMN_INDEX, TAG_PREFIX, extract_level, parse_tags
from tango_viewer.parsing.text_cleaning import clean_expression, clean_html, strip_sound_tags

__all__ = [
    "BlockSpec",
    "FieldCursor",
    "RecordParser",
    "parse_tango_data",
    "parse_tags",
    "extract_level",
    "TAG_PREFIX",
    "TAG_COLUMN_INDEX",
    "clean_html",
    "clean_expression",
    "strip_sound_tags",
]
