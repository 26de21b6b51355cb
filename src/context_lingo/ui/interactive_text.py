"""Interactive Text - renders tokenized text with clickable words."""

import html
from typing import Dict, List, Optional

from PySide6.QtCore import QUrl, Signal
from PySide6.QtWidgets import QTextBrowser

from context_lingo.core import Token
from context_lingo.services import tokenize


class InteractiveText(QTextBrowser):
    """
    Read-only view of the source paragraph.

    Every word token is rendered as an anchor whose href carries the token's
    character position; non-word tokens are rendered verbatim. Tokens whose
    text equals the selected word are highlighted.

    Signals:
    - word_clicked: emitted with the exact text of the clicked word token
    """

    word_clicked = Signal(str)

    ANCHOR_SCHEME = "token"
    WORD_STYLE = "color: #1e293b; text-decoration: none;"
    SELECTED_STYLE = (
        "color: #312e81; background-color: #e0e7ff; text-decoration: none; "
        "font-weight: 600;"
    )

    def __init__(self):
        super().__init__()
        self.setOpenLinks(False)
        self.setOpenExternalLinks(False)
        self.anchorClicked.connect(self._on_anchor_clicked)

        self.tokens: List[Token] = []
        self._tokens_by_position: Dict[int, Token] = {}
        self.selected_word: Optional[str] = None

    def set_text(self, text: str) -> None:
        """Tokenize and render new source text, clearing the selection."""
        self.tokens = tokenize(text)
        self._tokens_by_position = {t.position: t for t in self.tokens if t.is_word}
        self.selected_word = None
        self._render()

    def set_selected_word(self, word: Optional[str]) -> None:
        if word == self.selected_word:
            return
        self.selected_word = word
        self._render()

    def to_html(self) -> str:
        """Build the rich-text document for the current tokens."""
        parts = []
        for token in self.tokens:
            escaped = html.escape(token.text)
            if not token.is_word:
                parts.append(escaped)
                continue
            style = self.SELECTED_STYLE if token.text == self.selected_word else self.WORD_STYLE
            parts.append(
                f'<a href="{self.ANCHOR_SCHEME}:{token.position}" style="{style}">{escaped}</a>'
            )
        body = "".join(parts)
        return (
            '<div style="white-space: pre-wrap; font-family: serif; font-size: 18px; line-height: 150%;">'
            f"{body}</div>"
        )

    def _render(self) -> None:
        scroll = self.verticalScrollBar().value()
        self.setHtml(self.to_html())
        self.verticalScrollBar().setValue(scroll)

    def _on_anchor_clicked(self, url: QUrl) -> None:
        if url.scheme() != self.ANCHOR_SCHEME:
            return
        try:
            position = int(url.path())
        except ValueError:
            return
        token = self._tokens_by_position.get(position)
        if token is not None:
            self.word_clicked.emit(token.text)
