"""Response schema and validation for word-in-context analysis."""

from typing import Optional

from google.genai import types
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from context_lingo.core import AnalysisResult
from context_lingo.services.gateway.gateway import GatewayError, GatewayErrorReason

ANALYSIS_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "wordInContext": types.Schema(
            type=types.Type.STRING,
            description="The specific meaning of the clicked word in this context ({language}).",
        ),
        "phraseDetected": types.Schema(
            type=types.Type.STRING,
            description=(
                "If the word is part of a phrase/idiom (e.g., 'float an idea', 'shoot it out back'), "
                "return the full English phrase. If literal/standalone, return null."
            ),
            nullable=True,
        ),
        "phraseExplanation": types.Schema(
            type=types.Type.STRING,
            description="Explanation of the detected phrase ({language}). Null if no phrase detected.",
            nullable=True,
        ),
        "sentence": types.Schema(
            type=types.Type.STRING,
            description="The complete English sentence containing the target word.",
        ),
        "sentenceTranslation": types.Schema(
            type=types.Type.STRING,
            description="Fluent translation of that specific sentence ({language}).",
        ),
        "nuance": types.Schema(
            type=types.Type.STRING,
            description="Notes on tone, formality, or hidden meaning ({language}).",
        ),
    },
    required=["wordInContext", "sentence", "sentenceTranslation", "nuance"],
)


class AnalysisPayload(BaseModel):
    """Validated shape of an analysis response."""

    model_config = ConfigDict(extra="ignore")

    wordInContext: str
    phraseDetected: Optional[str] = None
    phraseExplanation: Optional[str] = None
    sentence: str
    sentenceTranslation: str
    nuance: str = Field(description="Tone and formality notes")

    @field_validator("phraseDetected", "phraseExplanation", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _phrase_fields_paired(self) -> "AnalysisPayload":
        if (self.phraseDetected is None) != (self.phraseExplanation is None):
            raise ValueError("phraseDetected and phraseExplanation must be present together")
        return self

    def to_result(self) -> AnalysisResult:
        return AnalysisResult.from_dict(self.model_dump())


def schema_for_language(language: str) -> types.Schema:
    """Return the response schema with descriptions naming the target language."""
    properties = {
        name: prop.model_copy(update={"description": (prop.description or "").replace("{language}", language)})
        for name, prop in ANALYSIS_RESPONSE_SCHEMA.properties.items()
    }
    return ANALYSIS_RESPONSE_SCHEMA.model_copy(update={"properties": properties})


def parse_analysis(raw_json: Optional[str]) -> AnalysisResult:
    """Parse and validate a raw JSON analysis response.

    Raises:
        GatewayError: EMPTY_RESPONSE if there is no text, SCHEMA_MISMATCH if
            the text is not valid JSON or does not fit the schema.
    """
    if not raw_json or not raw_json.strip():
        raise GatewayError(GatewayErrorReason.EMPTY_RESPONSE, "Empty response from API")
    try:
        payload = AnalysisPayload.model_validate_json(raw_json)
    except ValidationError as e:
        raise GatewayError(
            GatewayErrorReason.SCHEMA_MISMATCH,
            f"Malformed analysis response: {e.error_count()} problem(s)",
        ) from e
    return payload.to_result()
