"""Main Window - Application shell with menus, reading view and vocabulary drawer."""

from typing_extensions import override

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QAction, QKeyEvent
from PySide6.QtWidgets import (
    QDockWidget,
    QLabel,
    QMainWindow,
    QMessageBox,
    QSplitter,
    QStackedWidget,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from context_lingo.core import AppStatus

from .analysis_panel import AnalysisPanel
from .input_area import InputArea
from .interactive_text import InteractiveText
from .vocabulary_panel import VocabularyPanel


class MainWindow(QMainWindow):
    """Provides the application shell, the input and reading views, and the vocabulary drawer."""

    # Signal emitted when user asks for a fresh paragraph
    new_text_requested = Signal()

    INPUT_VIEW = 0
    READING_VIEW = 1

    def __init__(self):
        super().__init__()
        self.setWindowTitle("ContextLingo")
        self.setGeometry(100, 100, 1200, 800)

        self._setup_ui()
        self._create_menu_bar()
        self.set_vocabulary_count(0)

    def _setup_ui(self):
        """Initialize the input view, reading view and vocabulary dock."""
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        self.input_area = InputArea()
        self.stack.addWidget(self.input_area)

        # Reading view: original text and translation on the left, analysis on the right
        splitter = QSplitter(Qt.Orientation.Horizontal)

        left = QWidget()
        left_layout = QVBoxLayout(left)
        left_layout.setContentsMargins(8, 8, 8, 8)
        original_title = QLabel("ORIGINAL TEXT")
        original_title.setStyleSheet("font-weight: bold; font-size: 11px; color: gray;")
        left_layout.addWidget(original_title)
        self.interactive_text = InteractiveText()
        left_layout.addWidget(self.interactive_text, 3)
        hint = QLabel("Click any word to analyze context")
        hint.setStyleSheet("color: gray;")
        left_layout.addWidget(hint)

        translation_title = QLabel("FLUENT TRANSLATION")
        translation_title.setStyleSheet("font-weight: bold; font-size: 11px; color: gray;")
        left_layout.addWidget(translation_title)
        self.translation_text = QTextEdit()
        self.translation_text.setReadOnly(True)
        self.translation_text.setStyleSheet("font-size: 16px;")
        left_layout.addWidget(self.translation_text, 2)
        splitter.addWidget(left)

        self.analysis_panel = AnalysisPanel()
        splitter.addWidget(self.analysis_panel)
        splitter.setStretchFactor(0, 7)
        splitter.setStretchFactor(1, 5)
        self.stack.addWidget(splitter)

        # Vocabulary drawer
        self.vocabulary_panel = VocabularyPanel()
        self.vocabulary_dock = QDockWidget("My Vocabulary", self)
        self.vocabulary_dock.setWidget(self.vocabulary_panel)
        self.vocabulary_dock.setAllowedAreas(Qt.DockWidgetArea.RightDockWidgetArea)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, self.vocabulary_dock)
        self.vocabulary_dock.hide()
        self.vocabulary_panel.closed.connect(self.vocabulary_dock.hide)

        self.stack.setCurrentIndex(self.INPUT_VIEW)

    def _create_menu_bar(self):
        """Create the application menu bar."""
        menu_bar = self.menuBar()

        # File menu
        file_menu = menu_bar.addMenu("&File")

        self.new_action = QAction("&New Text", self)
        self.new_action.setShortcut("Ctrl+N")
        self.new_action.triggered.connect(self.new_text_requested.emit)
        file_menu.addAction(self.new_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # View menu
        view_menu = menu_bar.addMenu("&View")
        self.vocabulary_action = QAction("My &Vocabulary", self)
        self.vocabulary_action.setShortcut("Ctrl+B")
        self.vocabulary_action.triggered.connect(self.toggle_vocabulary)
        view_menu.addAction(self.vocabulary_action)

    def on_status_changed(self, status: str):
        """Switch views to follow the translation workflow status."""
        status = AppStatus(status)
        self.input_area.set_translating(status == AppStatus.TRANSLATING)
        if status == AppStatus.TRANSLATED:
            self.stack.setCurrentIndex(self.READING_VIEW)
            self.statusBar().showMessage("Translated", 3000)
        elif status == AppStatus.TRANSLATING:
            self.statusBar().showMessage("Translating...")
        else:
            self.stack.setCurrentIndex(self.INPUT_VIEW)
            self.statusBar().clearMessage()

    def show_paragraph(self, paragraph: str):
        """Render the submitted paragraph and clear stale results."""
        self.interactive_text.set_text(paragraph)
        self.translation_text.clear()
        self.analysis_panel.clear()

    def set_translation_text(self, text: str):
        self.translation_text.setPlainText(text)

    def reset_views(self):
        """Return to an empty input view."""
        self.input_area.clear()
        self.interactive_text.set_text("")
        self.translation_text.clear()
        self.analysis_panel.clear()
        self.stack.setCurrentIndex(self.INPUT_VIEW)

    def set_vocabulary_count(self, count: int):
        label = "My &Vocabulary" if count == 0 else f"My &Vocabulary ({count})"
        self.vocabulary_action.setText(label)

    def toggle_vocabulary(self):
        self.vocabulary_dock.setVisible(self.vocabulary_dock.isHidden())

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)

    @override
    def keyPressEvent(self, event: QKeyEvent):
        """Escape closes the vocabulary drawer."""
        if event.key() == Qt.Key.Key_Escape and not self.vocabulary_dock.isHidden():
            self.vocabulary_dock.hide()
        else:
            super().keyPressEvent(event)
