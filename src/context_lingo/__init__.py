"""
ContextLingo - A context-aware reading companion for English learners.

This package provides a desktop application for reading English text with:
- Fluent paragraph translation
- Click-to-analyze word explanations grounded in context
- Idiom and phrasal verb detection
- A persistent personal vocabulary list
"""

__version__ = "0.1.0"

# Make key components available at package level
from context_lingo.core import AnalysisResult, SelectionState, Token, VocabularyItem
from context_lingo.services.text_processing import tokenize

__all__ = [
    "AnalysisResult",
    "SelectionState",
    "Token",
    "VocabularyItem",
    "tokenize",
]
