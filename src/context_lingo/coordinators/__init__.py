"""Coordinators - Orchestration layer connecting UI with business logic."""

from .translation_coordinator import TranslationCoordinator
from .vocabulary_coordinator import VocabularyCoordinator
from .word_analysis_coordinator import WordAnalysisCoordinator

__all__ = [
    "TranslationCoordinator",
    "VocabularyCoordinator",
    "WordAnalysisCoordinator",
]
