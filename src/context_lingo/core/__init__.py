"""Domain layer - Pure entities representing reading sessions and vocabulary."""

from .analysis_result import AnalysisResult
from .app_status import AppStatus
from .selection_state import SelectionState
from .token import Token
from .vocabulary_item import VocabularyItem

__all__ = ["AnalysisResult", "AppStatus", "SelectionState", "Token", "VocabularyItem"]
