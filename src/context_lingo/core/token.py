"""Token entity - a single piece of tokenized source text."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """Represents a word or non-word piece of the source paragraph."""

    text: str
    """Exact source text of this piece (never empty)."""

    is_word: bool
    """True when the piece contains at least one letter or digit."""

    position: int
    """Character offset of the piece in the source text."""

    @property
    def end(self) -> int:
        """Character offset just past the end of this piece."""
        return self.position + len(self.text)
