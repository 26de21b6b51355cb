"""Gateway services - abstract text-understanding interface and Gemini implementation."""

from context_lingo.services.gateway.gateway import GatewayError, GatewayErrorReason, TextUnderstandingGateway
from context_lingo.services.gateway.analysis_schema import ANALYSIS_RESPONSE_SCHEMA, AnalysisPayload, parse_analysis
from context_lingo.services.gateway.gemini_gateway import GeminiGateway

__all__ = [
    "TextUnderstandingGateway",
    "GatewayError",
    "GatewayErrorReason",
    "AnalysisPayload",
    "ANALYSIS_RESPONSE_SCHEMA",
    "parse_analysis",
    "GeminiGateway",
]
