"""Word Analysis Coordinator - Handles word clicks and the selection state."""

from typing import Dict, Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from context_lingo.core import AnalysisResult, SelectionState
from context_lingo.log import get_logger
from context_lingo.services import (
    AnalysisWorker,
    SettingsManager,
    TextUnderstandingGateway,
    clean_word,
    is_word,
)

logger = get_logger(__name__)


class _AnalysisRequest(QObject):
    """Holds one analysis request's id and routes worker results back to the coordinator."""

    def __init__(self, request_id: int, parent: "WordAnalysisCoordinator"):
        super().__init__()
        self.request_id = request_id
        self.parent_ref = parent

    @Slot(object)
    def on_analysis_result(self, result):
        self.parent_ref._handle_analysis_result(result, self.request_id)

    @Slot(str)
    def on_analysis_error(self, error: str):
        self.parent_ref._handle_analysis_error(error, self.request_id)

    @Slot()
    def on_finished(self):
        self.parent_ref._release_request(self.request_id)


class WordAnalysisCoordinator(QObject):
    """
    Manages the word click → contextual analysis workflow.

    Responsibilities:
    - Clean clicked tokens and ignore clicks that are not words
    - Own the SelectionState and publish every change
    - Run analyses in the background and commit only the latest one
    """

    selection_changed = Signal(object)  # SelectionState
    analysis_failed = Signal(str)

    def __init__(
        self,
        gateway: TextUnderstandingGateway,
        settings_manager: SettingsManager,
        main_window,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        self.gateway = gateway
        self.settings_manager = settings_manager
        self.main_window = main_window
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self.paragraph: Optional[str] = None
        self._state = SelectionState.empty()

        # Monotonic request ids; only the active one may update the state
        self._request_counter = 0
        self._active_request_id: Optional[int] = None
        self._pending_requests: Dict[int, _AnalysisRequest] = {}

    @property
    def state(self) -> SelectionState:
        return self._state

    @Slot(str)
    def set_paragraph(self, paragraph: str) -> None:
        """Adopt a newly submitted paragraph and clear the selection."""
        self.paragraph = paragraph
        self._reset_selection()

    @Slot()
    def reset(self) -> None:
        """Forget the paragraph and clear the selection."""
        self.paragraph = None
        self._reset_selection()

    @Slot(str)
    def handle_word_clicked(self, raw_token: str) -> None:
        """Start an analysis of the clicked token within the current paragraph."""
        cleaned = clean_word(raw_token)
        if not cleaned or not is_word(cleaned):
            return

        if not self.paragraph:
            self.main_window.show_error("No Text", "Translate a paragraph before analyzing words.")
            return

        if not self.settings_manager.get_gemini_api_key():
            self.main_window.show_error(
                "API Key Missing",
                "API key not configured. Add GEMINI_API_KEY to .env file.",
            )
            return

        self._request_counter += 1
        request_id = self._request_counter
        self._active_request_id = request_id

        self._set_state(SelectionState.loading(raw_token))

        worker = AnalysisWorker(gateway=self.gateway, paragraph=self.paragraph, word=cleaned)
        request_helper = _AnalysisRequest(request_id, self)
        self._pending_requests[request_id] = request_helper

        worker.signals.analysis_result.connect(request_helper.on_analysis_result)
        worker.signals.error.connect(request_helper.on_analysis_error)
        worker.signals.finished.connect(request_helper.on_finished)

        logger.info("Analyzing '%s', request %d", cleaned, request_id)
        self.thread_pool.start(worker)

    def _handle_analysis_result(self, result: AnalysisResult, request_id: int) -> None:
        # Ignore results from stale requests (user clicked another word or submitted new text)
        if request_id != self._active_request_id:
            logger.debug("Ignoring stale analysis result (request %d, current %s)", request_id, self._active_request_id)
            return

        self._active_request_id = None
        self._set_state(self._state.with_analysis(result))

    def _handle_analysis_error(self, error: str, request_id: int) -> None:
        if request_id != self._active_request_id:
            logger.debug("Ignoring stale analysis error (request %d, current %s)", request_id, self._active_request_id)
            return

        self._active_request_id = None
        logger.warning("Analysis of '%s' failed: %s", self._state.selected_word, error)
        self._set_state(self._state.failed())
        self.analysis_failed.emit(error)

    def _reset_selection(self) -> None:
        self._active_request_id = None
        self._set_state(SelectionState.empty())

    def _release_request(self, request_id: int) -> None:
        helper = self._pending_requests.pop(request_id, None)
        if helper is not None:
            helper.deleteLater()

    def _set_state(self, state: SelectionState) -> None:
        self._state = state
        self.selection_changed.emit(state)
