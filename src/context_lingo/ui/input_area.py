"""Input Area - paragraph entry and translate action."""

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPlainTextEdit, QPushButton, QVBoxLayout, QWidget


class InputArea(QWidget):
    """Text box for the source paragraph with a translate button."""

    translate_requested = Signal(str)

    def __init__(self):
        super().__init__()
        self._translating = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        headline = QLabel("Master English in Context")
        headline.setStyleSheet("font-size: 22px; font-weight: bold;")
        layout.addWidget(headline)

        blurb = QLabel(
            "Paste a paragraph to get a fluent translation. Click any word to understand "
            "its nuance, detect idioms, and see sentence-level breakdowns."
        )
        blurb.setWordWrap(True)
        blurb.setStyleSheet("color: gray;")
        layout.addWidget(blurb)

        self.editor = QPlainTextEdit()
        self.editor.setPlaceholderText("Paste an English paragraph here...")
        self.editor.setMinimumHeight(180)
        self.editor.textChanged.connect(self._update_button)
        layout.addWidget(self.editor, 1)

        actions_layout = QHBoxLayout()
        actions_layout.addStretch()
        self.translate_button = QPushButton("Start Learning")
        self.translate_button.clicked.connect(self._on_translate_clicked)
        actions_layout.addWidget(self.translate_button)
        layout.addLayout(actions_layout)

        self._update_button()

    def text(self) -> str:
        return self.editor.toPlainText()

    def set_text(self, text: str) -> None:
        self.editor.setPlainText(text)

    def clear(self) -> None:
        self.editor.clear()
        self.set_translating(False)

    def set_translating(self, translating: bool) -> None:
        """Lock the editor and show progress while a translation runs."""
        self._translating = translating
        self.editor.setReadOnly(translating)
        self.translate_button.setText("Translating..." if translating else "Start Learning")
        self._update_button()

    def _update_button(self) -> None:
        self.translate_button.setEnabled(bool(self.text().strip()) and not self._translating)

    def _on_translate_clicked(self) -> None:
        text = self.text()
        if text.strip():
            self.translate_requested.emit(text)
