"""Insight services - abstract interface and Gemini implementation."""

from tango_viewer.services.insight.insight_service import InsightResult, InsightService
from tango_viewer.services.insight.gemini_insight_service import GeminiInsightService

__all__ = [
    "InsightService",
    "InsightResult",
    "GeminiInsightService",
]
