"""Analysis Panel - shows the contextual analysis of the selected word."""

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from context_lingo.core import SelectionState


def _section_title(text: str) -> QLabel:
    label = QLabel(text.upper())
    label.setStyleSheet("font-weight: bold; font-size: 11px; color: #4f46e5;")
    return label


def _body_label() -> QLabel:
    label = QLabel()
    label.setWordWrap(True)
    label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
    return label


class AnalysisPanel(QWidget):
    """Side panel with empty, loading, and result views."""

    save_clicked = Signal()

    EMPTY_MESSAGE = "Click a word to analyze\n\nSee detailed context, phrase detection, and sentence breakdown."

    EMPTY_PAGE = 0
    LOADING_PAGE = 1
    RESULT_PAGE = 2

    def __init__(self):
        super().__init__()

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(8, 8, 8, 8)

        self.stack = QStackedWidget()
        main_layout.addWidget(self.stack)

        # Empty state
        empty = QWidget()
        empty_layout = QVBoxLayout(empty)
        empty_layout.addStretch()
        self.empty_label = QLabel(self.EMPTY_MESSAGE)
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setWordWrap(True)
        self.empty_label.setStyleSheet("color: gray;")
        empty_layout.addWidget(self.empty_label)
        empty_layout.addStretch()
        self.stack.addWidget(empty)

        # Loading state
        loading = QWidget()
        loading_layout = QVBoxLayout(loading)
        loading_layout.addStretch()
        self.loading_label = QLabel("")
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.loading_label.setStyleSheet("color: gray;")
        loading_layout.addWidget(self.loading_label)
        loading_layout.addStretch()
        self.stack.addWidget(loading)

        # Result state
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        result = QWidget()
        result_layout = QVBoxLayout(result)
        result_layout.setSpacing(10)

        header_layout = QHBoxLayout()
        self.word_label = QLabel()
        self.word_label.setStyleSheet("font-size: 24px; font-weight: bold; font-family: serif;")
        header_layout.addWidget(self.word_label, 1)
        self.save_button = QPushButton("Save")
        self.save_button.clicked.connect(self.save_clicked.emit)
        header_layout.addWidget(self.save_button)
        result_layout.addLayout(header_layout)

        self.meaning_label = _body_label()
        self.meaning_label.setStyleSheet("font-size: 16px; font-style: italic;")
        result_layout.addWidget(self.meaning_label)

        self.phrase_frame = QFrame()
        self.phrase_frame.setStyleSheet("background-color: #fffbeb; border-radius: 6px;")
        phrase_layout = QVBoxLayout(self.phrase_frame)
        phrase_layout.addWidget(_section_title("Phrase Detected"))
        self.phrase_label = _body_label()
        self.phrase_label.setStyleSheet("font-weight: bold;")
        phrase_layout.addWidget(self.phrase_label)
        self.phrase_explanation_label = _body_label()
        phrase_layout.addWidget(self.phrase_explanation_label)
        result_layout.addWidget(self.phrase_frame)

        result_layout.addWidget(_section_title("Context & Nuance"))
        self.nuance_label = _body_label()
        result_layout.addWidget(self.nuance_label)

        result_layout.addWidget(_section_title("Full Sentence"))
        self.sentence_label = _body_label()
        self.sentence_label.setStyleSheet("color: gray; font-style: italic;")
        result_layout.addWidget(self.sentence_label)
        self.sentence_translation_label = _body_label()
        self.sentence_translation_label.setStyleSheet("font-size: 15px;")
        result_layout.addWidget(self.sentence_translation_label)
        result_layout.addStretch()

        scroll.setWidget(result)
        self.stack.addWidget(scroll)

        self.stack.setCurrentIndex(self.EMPTY_PAGE)

    def display_state(self, state: SelectionState) -> None:
        """Switch to the view matching the selection state."""
        if state.selected_word is None:
            self.empty_label.setText(self.EMPTY_MESSAGE)
            self.stack.setCurrentIndex(self.EMPTY_PAGE)
            return

        if state.is_loading:
            self.loading_label.setText(f'Analyzing "{state.selected_word}"...')
            self.stack.setCurrentIndex(self.LOADING_PAGE)
            return

        if state.analysis is None:
            self.empty_label.setText(
                f'Could not analyze "{state.selected_word}".\n\nClick the word again to retry.'
            )
            self.stack.setCurrentIndex(self.EMPTY_PAGE)
            return

        analysis = state.analysis
        self.word_label.setText(state.selected_word)
        self.meaning_label.setText(analysis.word_in_context)
        self.phrase_frame.setVisible(analysis.has_phrase)
        self.phrase_label.setText(analysis.phrase_detected or "")
        self.phrase_explanation_label.setText(analysis.phrase_explanation or "")
        self.nuance_label.setText(analysis.nuance)
        self.sentence_label.setText(f'"{analysis.sentence}"')
        self.sentence_translation_label.setText(analysis.sentence_translation)
        self.stack.setCurrentIndex(self.RESULT_PAGE)

    def set_saved(self, saved: bool) -> None:
        """Reflect whether the current analysis is already in the vocabulary."""
        self.save_button.setText("Saved" if saved else "Save")
        self.save_button.setEnabled(not saved)

    def clear(self) -> None:
        self.empty_label.setText(self.EMPTY_MESSAGE)
        self.stack.setCurrentIndex(self.EMPTY_PAGE)
        self.set_saved(False)
