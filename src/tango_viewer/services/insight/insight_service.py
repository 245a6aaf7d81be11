"""Insight Service - per-word study notes from a language model."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from tango_viewer.core import VocabRecord


@dataclass
class InsightResult:
    """Result of an insight request."""

    text: Optional[str]
    model: Optional[str]
    error: Optional[str] = None

    def is_success(self) -> bool:
        """Return True when the call produced a usable explanation."""
        return self.error is None and self.text is not None


class InsightService(ABC):
    """
    Abstract service explaining a vocabulary record in depth.

    Implementations (e.g., GeminiInsightService) handle API calls.
    """

    @abstractmethod
    def explain_word(self, record: VocabRecord, api_key: str) -> InsightResult:
        """Explain nuance, extra examples and a mnemonic for a word.

        Args:
            record: Parsed vocabulary record to explain.
            api_key: Gemini API key for authentication.

        Returns:
            InsightResult with explanation text or error message.
        """
        pass
