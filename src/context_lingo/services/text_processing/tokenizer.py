"""Tokenizer - lossless split of English text into word and non-word pieces."""

import re
from typing import List

from context_lingo.core import Token

# Basic Latin letters, digits, apostrophes (straight and typographic) and hyphens.
# Shared by tokenization and click cleaning so a clickable token never cleans to nothing.
WORD_CHARACTERS = "A-Za-z0-9'’\\-"

_WORD_RUN = re.compile(f"([{WORD_CHARACTERS}]+)")
_NON_WORD_CHAR = re.compile(f"[^{WORD_CHARACTERS}]")
_ALNUM = re.compile(r"[A-Za-z0-9]")


def is_word(piece: str) -> bool:
    """Return True if the piece contains at least one letter or digit."""
    return bool(_ALNUM.search(piece))


def tokenize(text: str) -> List[Token]:
    """
    Split text into an ordered list of tokens.

    Runs of word characters become candidate words; everything between them
    (whitespace, punctuation, line breaks) is kept verbatim so that joining the
    token texts reproduces the input exactly.

    Args:
        text: Arbitrary source text, possibly empty.

    Returns:
        List of non-empty Token objects in source order.
    """
    tokens: List[Token] = []
    position = 0
    for piece in _WORD_RUN.split(text):
        if not piece:
            continue
        tokens.append(Token(text=piece, is_word=is_word(piece), position=position))
        position += len(piece)
    return tokens


def clean_word(raw: str) -> str:
    """Strip every character that cannot be part of a word."""
    return _NON_WORD_CHAR.sub("", raw)
