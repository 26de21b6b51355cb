"""Services layer - business logic and external integrations."""

from context_lingo.services.settings_manager import SettingsManager
from context_lingo.services.vocabulary_store import VocabularyStore, is_saved

# Text processing services
from context_lingo.services.text_processing import WORD_CHARACTERS, clean_word, is_word, tokenize

# Gateway services
from context_lingo.services.gateway import (
	ANALYSIS_RESPONSE_SCHEMA,
	AnalysisPayload,
	GatewayError,
	GatewayErrorReason,
	GeminiGateway,
	TextUnderstandingGateway,
	parse_analysis,
)

# Background workers
from context_lingo.services.api_workers import AnalysisWorker, TranslationWorker, WorkerSignals

__all__ = [
	"SettingsManager",
	"VocabularyStore",
	"is_saved",
	"WORD_CHARACTERS",
	"clean_word",
	"is_word",
	"tokenize",
	"ANALYSIS_RESPONSE_SCHEMA",
	"AnalysisPayload",
	"GatewayError",
	"GatewayErrorReason",
	"GeminiGateway",
	"TextUnderstandingGateway",
	"parse_analysis",
	"AnalysisWorker",
	"TranslationWorker",
	"WorkerSignals",
]
