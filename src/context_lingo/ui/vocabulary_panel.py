"""Vocabulary Panel - Drawer listing saved vocabulary items."""

from typing import Optional, Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTreeWidget,
    QTreeWidgetItem,
    QVBoxLayout,
    QWidget,
)

from context_lingo.core import VocabularyItem


class VocabularyPanel(QWidget):
    """
    Panel displaying saved vocabulary, newest first.

    Each item is a collapsible row: the word and save date on top, with the
    meaning, phrase, sentence, translation and nuance as children.

    Signals:
    - delete_requested: emitted with the id of the item to delete
    - closed: emitted when user closes the panel
    """

    delete_requested = Signal(str)
    closed = Signal()

    DETAIL_PREVIEW_LENGTH = 80

    def __init__(self):
        super().__init__()
        self.items: Sequence[VocabularyItem] = ()
        self._setup_ui()

    def _setup_ui(self):
        """Setup the UI layout."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        title = QLabel("My Vocabulary")
        title.setStyleSheet("font-weight: bold; font-size: 16px;")
        layout.addWidget(title)

        self.count_label = QLabel()
        self.count_label.setStyleSheet("color: gray;")
        layout.addWidget(self.count_label)

        self.empty_label = QLabel(
            "No words saved yet\n\nAnalyze words in the text and click Save to keep them here."
        )
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setWordWrap(True)
        self.empty_label.setStyleSheet("color: gray;")
        layout.addWidget(self.empty_label)

        self.tree = QTreeWidget()
        self.tree.setColumnCount(2)
        self.tree.setHeaderLabels(["Word", "Saved"])
        self.tree.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.tree.setWordWrap(True)
        self.tree.itemSelectionChanged.connect(self._update_delete_button)
        layout.addWidget(self.tree, 1)

        buttons = QHBoxLayout()
        self.delete_button = QPushButton("Delete")
        self.delete_button.clicked.connect(self._on_delete_clicked)
        buttons.addWidget(self.delete_button)
        buttons.addStretch()
        close_button = QPushButton("Close")
        close_button.clicked.connect(self.closed.emit)
        buttons.addWidget(close_button)
        layout.addLayout(buttons)

        self.display_items(())

    def display_items(self, items: Sequence[VocabularyItem]):
        """Rebuild the list, keeping expanded rows expanded."""
        expanded_ids = {
            self.tree.topLevelItem(i).data(0, Qt.ItemDataRole.UserRole)
            for i in range(self.tree.topLevelItemCount())
            if self.tree.topLevelItem(i).isExpanded()
        }

        self.items = tuple(items)
        self.tree.clear()

        count = len(self.items)
        self.count_label.setText(f"{count} saved {'item' if count == 1 else 'items'}")
        self.empty_label.setVisible(count == 0)
        self.tree.setVisible(count > 0)

        for item in self.items:
            row = QTreeWidgetItem([item.word, item.created_at.strftime("%Y-%m-%d")])
            row.setData(0, Qt.ItemDataRole.UserRole, item.id)
            row.setToolTip(0, item.analysis.word_in_context)
            for label, text in self._detail_lines(item):
                child = QTreeWidgetItem([label, self._preview(text)])
                child.setToolTip(1, text)
                row.addChild(child)
            self.tree.addTopLevelItem(row)
            row.setExpanded(item.id in expanded_ids)

        self._update_delete_button()

    def selected_item_id(self) -> Optional[str]:
        """Id of the selected vocabulary item (a selected detail row counts as its parent)."""
        selected = self.tree.selectedItems()
        if not selected:
            return None
        row = selected[0]
        while row.parent() is not None:
            row = row.parent()
        return row.data(0, Qt.ItemDataRole.UserRole)

    def toggle_expanded(self, item_id: str) -> None:
        """Expand a collapsed item or collapse an expanded one."""
        for i in range(self.tree.topLevelItemCount()):
            row = self.tree.topLevelItem(i)
            if row.data(0, Qt.ItemDataRole.UserRole) == item_id:
                row.setExpanded(not row.isExpanded())
                return

    def _detail_lines(self, item: VocabularyItem):
        analysis = item.analysis
        lines = [("Meaning", analysis.word_in_context)]
        if analysis.has_phrase:
            lines.append(("Phrase", f"{analysis.phrase_detected}: {analysis.phrase_explanation}"))
        lines.append(("Sentence", analysis.sentence))
        lines.append(("Translation", analysis.sentence_translation))
        lines.append(("Nuance", analysis.nuance))
        return lines

    def _preview(self, text: str) -> str:
        if len(text) > self.DETAIL_PREVIEW_LENGTH:
            return text[: self.DETAIL_PREVIEW_LENGTH - 3] + "..."
        return text

    def _update_delete_button(self):
        self.delete_button.setEnabled(self.selected_item_id() is not None)

    def _on_delete_clicked(self):
        item_id = self.selected_item_id()
        if item_id is not None:
            self.delete_requested.emit(item_id)
