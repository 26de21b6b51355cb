"""Text processing services - tokenization and word cleaning."""

from context_lingo.services.text_processing.tokenizer import (
    WORD_CHARACTERS,
    clean_word,
    is_word,
    tokenize,
)

__all__ = [
    "WORD_CHARACTERS",
    "clean_word",
    "is_word",
    "tokenize",
]
