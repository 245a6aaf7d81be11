"""Tag column parsing and JLPT level extraction."""

import re
from typing import Iterable, List, Optional, Sequence

TAG_PREFIX = "eggrolls-JLPT10k-v3::"
TAG_COLUMN_INDEX = 36

_ORDINAL_PREFIX_RE = re.compile(r"^[0-9]+-")
RANK_CODE_RE = re.compile(r"^N[0-9]")


def parse_tags(columns: Sequence[str], column_index: int = TAG_COLUMN_INDEX) -> List[str]:
    """Split the tag column on whitespace runs, dropping empty tokens."""
    if column_index >= len(columns):
        return []
    return columns[column_index].split()


def extract_level(tags: Iterable[str], prefix: str = TAG_PREFIX) -> Optional[str]:
    """
    Find the rank code (N5 ... N1) encoded in a namespaced tag.

    Tags look like ``eggrolls-JLPT10k-v3::03-N3::verbs``. Each segment after
    the namespace may carry an ordinal ``NN-`` prefix which is ignored.

    Returns:
        The first matching segment, e.g. ``"N3"``, or None.
    """
    for tag in tags:
        if not tag.startswith(prefix):
            continue
        for segment in tag[len(prefix):].split("::"):
            if not segment:
                continue
            cleaned = _ORDINAL_PREFIX_RE.sub("", segment)
            if RANK_CODE_RE.match(cleaned):
                return cleaned
    return None
