"""Text-understanding gateway - boundary to the external translation/analysis service."""

from abc import ABC, abstractmethod
from enum import Enum

from context_lingo.core import AnalysisResult


class GatewayErrorReason(str, Enum):
    TRANSPORT = "transport"
    EMPTY_RESPONSE = "empty_response"
    SCHEMA_MISMATCH = "schema_mismatch"


class GatewayError(Exception):
    """Raised when the external service cannot produce a usable result."""

    def __init__(self, reason: GatewayErrorReason, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message

    def __str__(self) -> str:
        return self.message


class TextUnderstandingGateway(ABC):
    """
    Abstract service for paragraph translation and word-in-context analysis.

    Implementations (e.g., GeminiGateway) handle API calls and response parsing.
    """

    @abstractmethod
    def translate_paragraph(self, text: str) -> str:
        """Translate a whole paragraph into the target language.

        Args:
            text: Non-empty English paragraph.

        Returns:
            Translated text with no extraneous formatting.

        Raises:
            GatewayError: on transport failure or empty response.
        """
        pass

    @abstractmethod
    def analyze_word(self, paragraph: str, word: str) -> AnalysisResult:
        """Explain a word as it is used in the paragraph.

        Args:
            paragraph: Full source paragraph for context.
            word: Cleaned word to analyze.

        Returns:
            AnalysisResult conforming to the fixed schema.

        Raises:
            GatewayError: on transport failure, empty response, or a response
                that does not match the schema.
        """
        pass
