"""Vocabulary entity - a saved analysis of a word in a specific sentence."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Tuple

from .analysis_result import AnalysisResult


@dataclass(frozen=True)
class VocabularyItem:
    """A user-saved analysis.

    Attributes:
        id: Unique identifier, stable for the lifetime of the store.
        word: The clicked word exactly as it appeared in the source text.
        analysis: The analysis that was on screen when the word was saved.
        created_at: When the item was saved.
    """

    id: str
    word: str
    analysis: AnalysisResult
    created_at: datetime

    @property
    def dedup_key(self) -> Tuple[str, str]:
        return (self.word, self.analysis.sentence)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "word": self.word,
            "analysis": self.analysis.to_dict(),
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VocabularyItem":
        """Raises KeyError, TypeError or ValueError on malformed data."""
        if not isinstance(data, dict):
            raise ValueError(f"Vocabulary item must be an object, got {type(data).__name__}")
        return cls(
            id=str(data["id"]),
            word=str(data["word"]),
            analysis=AnalysisResult.from_dict(data["analysis"]),
            created_at=datetime.fromisoformat(data["createdAt"]),
        )
