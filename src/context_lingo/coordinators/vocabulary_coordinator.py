"""Vocabulary Coordinator - Saves and deletes vocabulary items from the UI."""

from typing import Optional

from PySide6.QtCore import QObject, Signal, Slot

from context_lingo.core import SelectionState, VocabularyItem
from context_lingo.io import StorageWriteError
from context_lingo.services import VocabularyStore, is_saved


class VocabularyCoordinator(QObject):
    """
    Manages the bookmark → vocabulary list workflow.

    Responsibilities:
    - Save the currently displayed analysis
    - Delete items from the vocabulary drawer
    - Report whether the current selection is already saved
    """

    vocabulary_changed = Signal(object)  # tuple of VocabularyItem, newest first
    saved_state_changed = Signal(bool)

    def __init__(self, store: VocabularyStore, main_window):
        super().__init__()

        self.store = store
        self.main_window = main_window
        self._selection = SelectionState.empty()

    @Slot(object)
    def handle_selection_changed(self, state: SelectionState) -> None:
        """Track the selection shown in the analysis panel."""
        self._selection = state
        self.saved_state_changed.emit(self.is_current_saved())

    def is_current_saved(self) -> bool:
        """Return True if the selected word in its current sentence is saved."""
        state = self._selection
        if not state.has_result:
            return False
        return is_saved(self.store.items, state.selected_word, state.analysis.sentence)

    @Slot()
    def handle_save_current(self) -> Optional[VocabularyItem]:
        """Save the current selection's analysis, if one is loaded."""
        state = self._selection
        if not state.has_result:
            return None

        try:
            item = self.store.save(state.selected_word, state.analysis)
        except StorageWriteError as e:
            self.main_window.show_error("Save Failed", f"Could not save '{state.selected_word}': {e}")
            return None

        if item is not None:
            self.vocabulary_changed.emit(self.store.items)
        self.saved_state_changed.emit(self.is_current_saved())
        return item

    @Slot(str)
    def handle_delete(self, item_id: str) -> None:
        """Delete a saved item by id."""
        try:
            self.store.delete(item_id)
        except StorageWriteError as e:
            self.main_window.show_error("Delete Failed", f"Could not delete vocabulary item: {e}")
            return

        self.vocabulary_changed.emit(self.store.items)
        self.saved_state_changed.emit(self.is_current_saved())

    def publish(self) -> None:
        """Emit the current vocabulary so views can render their initial state."""
        self.vocabulary_changed.emit(self.store.items)
        self.saved_state_changed.emit(self.is_current_saved())
