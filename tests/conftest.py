"""Shared fixtures for building deck export lines."""

import pytest

TAG_COLUMN = 36


def _build_line(
    id="w1",
    expression="猫",
    pitch_accent="0",
    part_of_speech="noun",
    reading="ねこ",
    definition="cat",
    blocks=(),
    tags=None,
):
    columns = [id, expression, pitch_accent, part_of_speech, reading, definition, "", "", ""]
    columns.extend(blocks)
    if tags is not None:
        assert len(columns) <= TAG_COLUMN, "blocks overlap the tag column"
        columns.extend([""] * (TAG_COLUMN - len(columns)))
        columns.append(tags)
    return "\t".join(columns)


@pytest.fixture
def build_line():
    """Provide a factory for tab-separated export lines (blocks start at column 9)."""
    return _build_line
