"""Dictionary Catalog - discovers deck exports on disk and loads them."""

import logging
from itertools import takewhile
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from tango_viewer.core import DictionaryMeta, VocabRecord
from tango_viewer.parsing import RecordParser

logger = logging.getLogger(__name__)

TITLE_HEADER = "#title:"
DESCRIPTION_HEADER = "#description:"
_HEADER_SCAN_LIMIT = 4096


class DictionaryCatalog:
    """Data Factory responsible for locating deck files and handing their text to the parser."""

    def __init__(
        self,
        directory: Path,
        pattern: str = "*.txt",
        parser: Optional[RecordParser] = None,
    ) -> None:
        self._directory = Path(directory)
        self._pattern = pattern
        self._parser = parser or RecordParser()
        self._entries: Optional[Dict[str, DictionaryMeta]] = None

    @property
    def directory(self) -> Path:
        return self._directory

    def discover(self) -> List[DictionaryMeta]:
        """
        Scan the directory for deck files.

        Returns:
            One DictionaryMeta per file, sorted by file name. Empty when the
            directory does not exist.
        """
        if not self._directory.is_dir():
            logger.debug("Dictionary directory %s does not exist", self._directory)
            self._entries = {}
            return []

        entries: Dict[str, DictionaryMeta] = {}
        for path in sorted(self._directory.glob(self._pattern)):
            if not path.is_file():
                continue
            title, description = self._read_header(path)
            meta = DictionaryMeta(
                id=path.stem,
                title=title or _title_from_stem(path.stem),
                source_path=path,
                description=description,
            )
            entries[meta.id] = meta

        logger.debug("Discovered %d dictionaries in %s", len(entries), self._directory)
        self._entries = entries
        return list(entries.values())

    def get(self, deck_id: str) -> DictionaryMeta:
        """Look up a discovered deck.

        Raises:
            KeyError: if no deck with this id exists.
        """
        if self._entries is None:
            self.discover()
        try:
            return self._entries[deck_id]
        except KeyError:
            raise KeyError(f"Unknown dictionary: {deck_id}") from None

    def read_text(self, meta: DictionaryMeta) -> str:
        """Read a deck file as UTF-8, tolerating a byte order mark.

        Raises:
            RuntimeError: if the file cannot be read or decoded.
        """
        try:
            return meta.source_path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise RuntimeError(f"Failed to read dictionary '{meta.id}': {e}") from e

    def load(self, deck_id: str) -> List[VocabRecord]:
        """Read and parse a deck by id."""
        meta = self.get(deck_id)
        records = self._parser.parse(self.read_text(meta))
        logger.info("Loaded %d records from %s", len(records), meta.source_path.name)
        return records

    def _read_header(self, path: Path) -> Tuple[Optional[str], Optional[str]]:
        """Pull ``#title:`` from the first line and ``#description:`` from the leading comment lines."""
        try:
            with open(path, "r", encoding="utf-8-sig") as f:
                head = f.read(_HEADER_SCAN_LIMIT)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read header of %s: %s", path, e)
            return None, None

        title = description = None
        comment_lines = takewhile(lambda line: line.startswith("#"), head.splitlines())
        for line_index, line in enumerate(comment_lines):
            if line_index == 0 and line.lower().startswith(TITLE_HEADER):
                title = line[len(TITLE_HEADER):].strip() or None
            elif line.lower().startswith(DESCRIPTION_HEADER):
                description = line[len(DESCRIPTION_HEADER):].strip() or None
        return title, description


def _title_from_stem(stem: str) -> str:
    return stem.replace("_", " ").replace("-", " ").title()
