"""Selection state - which word is selected and what is known about it."""

from dataclasses import dataclass
from typing import Optional

from .analysis_result import AnalysisResult


@dataclass(frozen=True)
class SelectionState:
    """Snapshot of the current word selection.

    Attributes:
        selected_word: Original clicked token text (used for highlighting).
        analysis: Loaded analysis for the selected word, if any.
        is_loading: True while an analysis request is in flight.
    """

    selected_word: Optional[str] = None
    analysis: Optional[AnalysisResult] = None
    is_loading: bool = False

    @classmethod
    def empty(cls) -> "SelectionState":
        return cls()

    @classmethod
    def loading(cls, word: str) -> "SelectionState":
        return cls(selected_word=word, analysis=None, is_loading=True)

    def with_analysis(self, analysis: AnalysisResult) -> "SelectionState":
        return SelectionState(selected_word=self.selected_word, analysis=analysis, is_loading=False)

    def failed(self) -> "SelectionState":
        return SelectionState(selected_word=self.selected_word, analysis=None, is_loading=False)

    @property
    def has_result(self) -> bool:
        return self.selected_word is not None and self.analysis is not None
