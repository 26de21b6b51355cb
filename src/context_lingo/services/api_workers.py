"""Async workers for non-blocking gateway calls using Qt threading."""

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from context_lingo.services.gateway import GatewayError, TextUnderstandingGateway


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    translation_result = Signal(str)
    analysis_result = Signal(object)  # AnalysisResult


class TranslationWorker(QRunnable):
    """
    Worker that runs a paragraph translation in a background thread.

    Emits translation_result on success and error with a user-facing
    message on any failure.
    """

    def __init__(self, gateway: TextUnderstandingGateway, paragraph: str):
        super().__init__()
        self.gateway = gateway
        self.paragraph = paragraph
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation call in background thread."""
        try:
            text = self.gateway.translate_paragraph(self.paragraph)
            self.signals.translation_result.emit(text)
        except GatewayError as e:
            self.signals.error.emit(e.message)
        except Exception as e:
            # Catch any unexpected exceptions not handled by the gateway
            self.signals.error.emit(f"Unexpected translation error: {e}")
        finally:
            self.signals.finished.emit()


class AnalysisWorker(QRunnable):
    """
    Worker that runs a word-in-context analysis in a background thread.
    """

    def __init__(self, gateway: TextUnderstandingGateway, paragraph: str, word: str):
        super().__init__()
        self.gateway = gateway
        self.paragraph = paragraph
        self.word = word
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the analysis call in background thread."""
        try:
            result = self.gateway.analyze_word(self.paragraph, self.word)
            self.signals.analysis_result.emit(result)
        except GatewayError as e:
            self.signals.error.emit(e.message)
        except Exception as e:
            self.signals.error.emit(f"Unexpected analysis error: {e}")
        finally:
            self.signals.finished.emit()
