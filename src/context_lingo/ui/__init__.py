"""UI layer - PySide6 presentation components."""

from .analysis_panel import AnalysisPanel
from .input_area import InputArea
from .interactive_text import InteractiveText
from .main_window import MainWindow
from .vocabulary_panel import VocabularyPanel

__all__ = ["AnalysisPanel", "InputArea", "InteractiveText", "MainWindow", "VocabularyPanel"]
