"""Services layer - filtering, configuration and external integrations."""

from tango_viewer.services.settings_manager import SettingsManager
from tango_viewer.services.word_filter import (
	SearchScope,
	WordFilter,
	WordType,
	collect_levels,
	contains_kanji,
	is_hiragana,
	is_katakana,
	matches_level,
	matches_search,
	matches_word_type,
)

# Insight services
from tango_viewer.services.insight import InsightService, InsightResult, GeminiInsightService

__all__ = [
	"SettingsManager",
	"SearchScope",
	"WordFilter",
	"WordType",
	"collect_levels",
	"contains_kanji",
	"is_hiragana",
	"is_katakana",
	"matches_level",
	"matches_search",
	"matches_word_type",
	"InsightService",
	"InsightResult",
	"GeminiInsightService",
]
