"""
Tests for MainWindow and InputArea - validates view switching and the drawer.
"""

from unittest.mock import MagicMock, patch

from PySide6.QtCore import QEvent, Qt
from PySide6.QtGui import QKeyEvent

from context_lingo.core import AppStatus
from context_lingo.ui import InputArea, MainWindow


def test_starts_on_input_view():
    window = MainWindow()

    assert window.stack.currentIndex() == MainWindow.INPUT_VIEW
    assert window.vocabulary_dock.isHidden()


def test_status_drives_views():
    window = MainWindow()

    window.on_status_changed(AppStatus.TRANSLATING.value)
    assert window.stack.currentIndex() == MainWindow.INPUT_VIEW
    assert not window.input_area.translate_button.isEnabled()

    window.on_status_changed(AppStatus.TRANSLATED.value)
    assert window.stack.currentIndex() == MainWindow.READING_VIEW

    window.on_status_changed(AppStatus.ERROR.value)
    assert window.stack.currentIndex() == MainWindow.INPUT_VIEW


def test_show_paragraph_and_reset():
    window = MainWindow()
    window.input_area.set_text("Hello world")
    window.show_paragraph("Hello world")
    window.set_translation_text("你好世界")

    assert [t.text for t in window.interactive_text.tokens if t.is_word] == ["Hello", "world"]
    assert window.translation_text.toPlainText() == "你好世界"

    window.reset_views()

    assert window.input_area.text() == ""
    assert window.interactive_text.tokens == []
    assert window.translation_text.toPlainText() == ""
    assert window.stack.currentIndex() == MainWindow.INPUT_VIEW


def test_vocabulary_count_in_menu():
    window = MainWindow()
    assert window.vocabulary_action.text() == "My &Vocabulary"

    window.set_vocabulary_count(3)

    assert window.vocabulary_action.text() == "My &Vocabulary (3)"


def test_toggle_and_escape_close_drawer():
    window = MainWindow()

    window.toggle_vocabulary()
    assert not window.vocabulary_dock.isHidden()

    window.keyPressEvent(QKeyEvent(QEvent.Type.KeyPress, Qt.Key.Key_Escape, Qt.KeyboardModifier.NoModifier))
    assert window.vocabulary_dock.isHidden()


def test_drawer_close_button_hides_dock():
    window = MainWindow()
    window.toggle_vocabulary()

    window.vocabulary_panel.closed.emit()

    assert window.vocabulary_dock.isHidden()


def test_new_text_action_emits_signal():
    window = MainWindow()
    spy = MagicMock()
    window.new_text_requested.connect(spy)

    window.new_action.trigger()

    spy.assert_called_once()


def test_show_error_uses_message_box():
    window = MainWindow()
    with patch("context_lingo.ui.main_window.QMessageBox.critical") as critical:
        window.show_error("Oops", "Something broke")

    critical.assert_called_once_with(window, "Oops", "Something broke")


def test_input_area_button_state():
    area = InputArea()
    assert not area.translate_button.isEnabled()

    area.set_text("   ")
    assert not area.translate_button.isEnabled()

    area.set_text("Hello")
    assert area.translate_button.isEnabled()

    area.set_translating(True)
    assert not area.translate_button.isEnabled()
    assert area.translate_button.text() == "Translating..."


def test_input_area_emits_paragraph():
    area = InputArea()
    spy = MagicMock()
    area.translate_requested.connect(spy)
    area.set_text("Hello world")

    area.translate_button.click()

    spy.assert_called_once_with("Hello world")
