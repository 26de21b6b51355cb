"""Gemini Gateway - translation and word analysis via Google Gemini API."""

import google.genai as genai
from google.genai import types

from context_lingo.core import AnalysisResult
from context_lingo.log import get_logger
from context_lingo.services.gateway.analysis_schema import parse_analysis, schema_for_language
from context_lingo.services.gateway.gateway import GatewayError, GatewayErrorReason, TextUnderstandingGateway
from context_lingo.services.settings_manager import SettingsManager

logger = get_logger(__name__)


class GeminiGateway(TextUnderstandingGateway):
    """
    Gateway using Google Gemini API.

    Settings (API key, model, target language) are read on every call so that
    edits to the .env file take effect after SettingsManager.reload_env().
    Failures are raised as GatewayError; nothing is retried here.
    """

    THINKING_BUDGET = 100

    TRANSLATION_PROMPT = """Translate the following English paragraph into natural, fluent {language}.
Capture the nuance and tone (e.g., informal, corporate, sarcastic).
Do not add any preamble or markdown code blocks, just return the raw text string.

Paragraph:
\"\"\"
{text}
\"\"\""""

    ANALYSIS_PROMPT = """You are an expert English tutor. Analyze the word "{word}" found in the context of the following paragraph.

Paragraph:
\"\"\"
{paragraph}
\"\"\"

Goal: Explain to a {language}-speaking student what this word means *specifically in this context*.
If it is part of an idiom, phrasal verb, or slang (e.g. "float" in "float an idea", or "shoot" in "shoot it out back"), identify that phrase.
Write every explanation in {language}.
"""

    def __init__(self, settings_manager: SettingsManager):
        self.settings_manager = settings_manager

    def translate_paragraph(self, text: str) -> str:
        language = self.settings_manager.get_target_language()
        prompt = self.TRANSLATION_PROMPT.format(language=language, text=text)
        response_text = self._generate(
            prompt,
            types.GenerateContentConfig(
                thinking_config=types.ThinkingConfig(thinking_budget=self.THINKING_BUDGET),
            ),
            kind="translation",
        )
        if not response_text or not response_text.strip():
            raise GatewayError(GatewayErrorReason.EMPTY_RESPONSE, "Empty response from API")
        return response_text.strip()

    def analyze_word(self, paragraph: str, word: str) -> AnalysisResult:
        language = self.settings_manager.get_target_language()
        prompt = self.ANALYSIS_PROMPT.format(word=word, paragraph=paragraph, language=language)
        response_text = self._generate(
            prompt,
            types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=schema_for_language(language),
                thinking_config=types.ThinkingConfig(thinking_budget=self.THINKING_BUDGET),
            ),
            kind="analysis",
        )
        result = parse_analysis(response_text)
        logger.debug("Analysis for '%s' parsed (phrase: %s)", word, result.phrase_detected)
        return result

    def _generate(self, prompt: str, config: types.GenerateContentConfig, kind: str):
        """Issue one generate_content call and return the response text."""
        api_key = self.settings_manager.get_gemini_api_key()
        if not api_key:
            raise GatewayError(
                GatewayErrorReason.TRANSPORT,
                "API key not configured. Add GEMINI_API_KEY to .env file.",
            )
        model_name = self.settings_manager.get_model_name()

        logger.debug("%s request: model=%s prompt_chars=%d", kind, model_name, len(prompt))
        try:
            client = genai.Client(api_key=api_key)
            response = client.models.generate_content(
                model=model_name,
                contents=prompt,
                config=config,
            )
        except Exception as exc:
            logger.warning("%s request failed: %s: %s", kind, type(exc).__name__, exc)
            raise GatewayError(GatewayErrorReason.TRANSPORT, self._describe_failure(exc)) from exc

        text = response.text
        logger.debug("%s response: %d chars", kind, len(text or ""))
        return text

    @staticmethod
    def _describe_failure(exc: Exception) -> str:
        """Translate a client exception into a message fit for the user."""
        error_msg = str(exc).lower()
        if "429" in error_msg or "resource_exhausted" in error_msg or "quota" in error_msg or "rate_limit" in error_msg:
            return "API quota exceeded. Please try again later."
        if "api_key" in error_msg or "authentication" in error_msg or "invalid" in error_msg:
            return f"Invalid API key or request: {exc}"
        if "deadline" in error_msg or "timeout" in error_msg:
            return "Request timed out. Please check your connection."
        return f"Request failed: {exc}"
