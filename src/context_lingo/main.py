"""Main entry point for the ContextLingo application."""

import sys

from PySide6.QtWidgets import QApplication

from context_lingo.coordinators import TranslationCoordinator, VocabularyCoordinator, WordAnalysisCoordinator
from context_lingo.io import JsonFileStorage, KeyValueStorage, SqliteStorage, StorageLoadError
from context_lingo.log import get_logger
from context_lingo.services import GeminiGateway, SettingsManager, VocabularyStore
from context_lingo.ui import MainWindow

logger = get_logger(__name__)


def create_storage(settings: SettingsManager) -> KeyValueStorage:
    """Build the configured vocabulary storage backend."""
    data_dir = settings.get_data_dir()
    if settings.get_vocabulary_backend() == "sqlite":
        storage = SqliteStorage(data_dir / "vocabulary.db")
        try:
            storage.ensure_schema()
        except StorageLoadError as e:
            # The store starts empty; saves will report the failure
            logger.warning("Vocabulary database unavailable: %s", e)
        return storage
    return JsonFileStorage(data_dir / "vocabulary.json")


def wire(
    main_window: MainWindow,
    translation: TranslationCoordinator,
    analysis: WordAnalysisCoordinator,
    vocabulary: VocabularyCoordinator,
) -> None:
    """Connect UI signals to coordinator slots and coordinator signals to views."""
    main_window.input_area.translate_requested.connect(translation.submit)
    main_window.new_text_requested.connect(translation.reset)

    translation.status_changed.connect(main_window.on_status_changed)
    translation.paragraph_submitted.connect(analysis.set_paragraph)
    translation.paragraph_submitted.connect(main_window.show_paragraph)
    translation.translation_completed.connect(main_window.set_translation_text)
    translation.translation_failed.connect(
        lambda error: main_window.show_error("Translation Failed", error)
    )
    translation.session_reset.connect(analysis.reset)
    translation.session_reset.connect(main_window.reset_views)

    main_window.interactive_text.word_clicked.connect(analysis.handle_word_clicked)
    analysis.selection_changed.connect(
        lambda state: main_window.interactive_text.set_selected_word(state.selected_word)
    )
    analysis.selection_changed.connect(main_window.analysis_panel.display_state)
    analysis.selection_changed.connect(vocabulary.handle_selection_changed)
    analysis.analysis_failed.connect(
        lambda error: main_window.statusBar().showMessage(f"Analysis failed: {error}", 5000)
    )

    main_window.analysis_panel.save_clicked.connect(vocabulary.handle_save_current)
    main_window.vocabulary_panel.delete_requested.connect(vocabulary.handle_delete)
    vocabulary.vocabulary_changed.connect(main_window.vocabulary_panel.display_items)
    vocabulary.vocabulary_changed.connect(lambda items: main_window.set_vocabulary_count(len(items)))
    vocabulary.saved_state_changed.connect(main_window.analysis_panel.set_saved)
    vocabulary.publish()


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("ContextLingo")
    app.setOrganizationName("ContextLingo")

    # 2. Initialize Infrastructure
    settings = SettingsManager()
    store = VocabularyStore(create_storage(settings))
    gateway = GeminiGateway(settings)
    if not settings.get_gemini_api_key():
        logger.warning("GEMINI_API_KEY is not set; translation and analysis are disabled")

    # 3. Construct UI
    main_window = MainWindow()

    # 4. Instantiate Coordinators (Dependency Injection)
    translation = TranslationCoordinator(
        main_window=main_window,
        gateway=gateway,
        settings_manager=settings,
    )
    analysis = WordAnalysisCoordinator(
        gateway=gateway,
        settings_manager=settings,
        main_window=main_window,
    )
    vocabulary = VocabularyCoordinator(store=store, main_window=main_window)

    # 5. Signal Wiring
    wire(main_window, translation, analysis, vocabulary)

    # 6. Show UI and start event loop
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
