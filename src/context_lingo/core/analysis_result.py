"""AnalysisResult entity - contextual explanation of a single word."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class AnalysisResult:
    """Explanation of a word as it is used in a specific paragraph.

    The phrase fields are paired: either both are set (the word belongs to an
    idiom, phrasal verb, or slang expression) or both are None.
    """

    word_in_context: str
    phrase_detected: Optional[str]
    phrase_explanation: Optional[str]
    sentence: str
    sentence_translation: str
    nuance: str

    # Wire names used by the gateway schema and persisted vocabulary
    FIELD_NAMES = {
        "word_in_context": "wordInContext",
        "phrase_detected": "phraseDetected",
        "phrase_explanation": "phraseExplanation",
        "sentence": "sentence",
        "sentence_translation": "sentenceTranslation",
        "nuance": "nuance",
    }

    def __post_init__(self):
        for name in ("word_in_context", "sentence", "sentence_translation", "nuance"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{self.FIELD_NAMES[name]} must be a string")
        for name in ("phrase_detected", "phrase_explanation"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{self.FIELD_NAMES[name]} must be a string or null")
        if (self.phrase_detected is None) != (self.phrase_explanation is None):
            raise ValueError("phraseDetected and phraseExplanation must be set together")

    @property
    def has_phrase(self) -> bool:
        return self.phrase_detected is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using wire (camelCase) field names."""
        return {wire: getattr(self, attr) for attr, wire in self.FIELD_NAMES.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisResult":
        """Build from a wire-format dict.

        Raises:
            ValueError: if data is not a dict, a mandatory field is missing,
                or the phrase fields are not paired.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Analysis must be an object, got {type(data).__name__}")
        missing = [
            wire
            for attr, wire in cls.FIELD_NAMES.items()
            if attr not in ("phrase_detected", "phrase_explanation") and data.get(wire) is None
        ]
        if missing:
            raise ValueError(f"Missing required field(s): {', '.join(missing)}")
        return cls(**{attr: data.get(wire) for attr, wire in cls.FIELD_NAMES.items()})
