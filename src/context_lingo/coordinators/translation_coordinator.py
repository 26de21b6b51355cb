"""Translation Coordinator - Manages the paragraph submit → translate workflow."""

from typing import Dict, Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from context_lingo.core import AppStatus
from context_lingo.log import get_logger
from context_lingo.services import SettingsManager, TextUnderstandingGateway, TranslationWorker

logger = get_logger(__name__)


class _TranslationRequest(QObject):
    """Holds one translation request's id and routes worker results back to the coordinator."""

    def __init__(self, request_id: int, parent: "TranslationCoordinator"):
        super().__init__()
        self.request_id = request_id
        self.parent_ref = parent

    @Slot(str)
    def on_translation_result(self, text: str):
        self.parent_ref._handle_translation_result(text, self.request_id)

    @Slot(str)
    def on_translation_error(self, error: str):
        self.parent_ref._handle_translation_error(error, self.request_id)

    @Slot()
    def on_finished(self):
        self.parent_ref._release_request(self.request_id)


class TranslationCoordinator(QObject):
    """
    Orchestrates paragraph translation.

    Responsibilities:
    - Validate and submit paragraphs for translation.
    - Track the application status (idle / translating / translated / error).
    - Announce new paragraphs so selection state can be reset.
    - Drop results from translations superseded by a newer submit or reset.
    """

    status_changed = Signal(str)
    paragraph_submitted = Signal(str)
    translation_started = Signal()
    translation_completed = Signal(str)
    translation_failed = Signal(str)
    session_reset = Signal()

    def __init__(
        self,
        main_window,
        gateway: TextUnderstandingGateway,
        settings_manager: SettingsManager,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        self.main_window = main_window
        self.gateway = gateway
        self.settings_manager = settings_manager
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self.paragraph: str = ""
        self.translated_text: str = ""
        self.status: AppStatus = AppStatus.IDLE

        self._request_counter = 0
        self._active_request_id: Optional[int] = None
        # Keep helpers alive while their workers run
        self._pending_requests: Dict[int, _TranslationRequest] = {}

    @Slot(str)
    def submit(self, paragraph: str) -> None:
        """Submit a paragraph for translation. Blank input is ignored."""
        if not paragraph or not paragraph.strip():
            return

        if not self.settings_manager.get_gemini_api_key():
            self.main_window.show_error(
                "API Key Missing",
                "API key not configured. Add GEMINI_API_KEY to .env file.",
            )
            return

        self.paragraph = paragraph
        self.translated_text = ""
        self._set_status(AppStatus.TRANSLATING)
        self.paragraph_submitted.emit(paragraph)
        self.translation_started.emit()

        self._request_counter += 1
        request_id = self._request_counter
        self._active_request_id = request_id

        worker = TranslationWorker(gateway=self.gateway, paragraph=paragraph)
        request_helper = _TranslationRequest(request_id, self)
        self._pending_requests[request_id] = request_helper

        worker.signals.translation_result.connect(request_helper.on_translation_result)
        worker.signals.error.connect(request_helper.on_translation_error)
        worker.signals.finished.connect(request_helper.on_finished)

        logger.info("Translating paragraph (%d chars), request %d", len(paragraph), request_id)
        self.thread_pool.start(worker)

    @Slot()
    def reset(self) -> None:
        """Return to the idle state, discarding any translation in flight."""
        self._active_request_id = None
        self.paragraph = ""
        self.translated_text = ""
        self._set_status(AppStatus.IDLE)
        self.session_reset.emit()

    def _handle_translation_result(self, text: str, request_id: int) -> None:
        if request_id != self._active_request_id:
            logger.debug("Ignoring stale translation result (request %d, current %s)", request_id, self._active_request_id)
            return

        self.translated_text = text
        self._set_status(AppStatus.TRANSLATED)
        self.translation_completed.emit(text)

    def _handle_translation_error(self, error: str, request_id: int) -> None:
        if request_id != self._active_request_id:
            logger.debug("Ignoring stale translation error (request %d, current %s)", request_id, self._active_request_id)
            return

        logger.warning("Translation failed: %s", error)
        self._set_status(AppStatus.ERROR)
        self.translation_failed.emit(error)

    def _release_request(self, request_id: int) -> None:
        helper = self._pending_requests.pop(request_id, None)
        if helper is not None:
            helper.deleteLater()

    def _set_status(self, status: AppStatus) -> None:
        self.status = status
        self.status_changed.emit(status.value)
