"""
Tests for AnalysisPanel - validates empty, loading and result views.
"""

from unittest.mock import MagicMock

from conftest import make_analysis
from context_lingo.core import SelectionState
from context_lingo.ui import AnalysisPanel


def test_starts_on_empty_page():
    panel = AnalysisPanel()

    assert panel.stack.currentIndex() == AnalysisPanel.EMPTY_PAGE
    assert panel.empty_label.text() == AnalysisPanel.EMPTY_MESSAGE


def test_loading_state_shows_word():
    panel = AnalysisPanel()

    panel.display_state(SelectionState.loading("nuance"))

    assert panel.stack.currentIndex() == AnalysisPanel.LOADING_PAGE
    assert "nuance" in panel.loading_label.text()


def test_result_without_phrase_hides_phrase_block():
    panel = AnalysisPanel()
    analysis = make_analysis()

    panel.display_state(SelectionState.loading("got").with_analysis(analysis))

    assert panel.stack.currentIndex() == AnalysisPanel.RESULT_PAGE
    assert panel.word_label.text() == "got"
    assert panel.meaning_label.text() == analysis.word_in_context
    assert panel.sentence_translation_label.text() == analysis.sentence_translation
    assert panel.nuance_label.text() == analysis.nuance
    assert analysis.sentence in panel.sentence_label.text()
    assert panel.phrase_frame.isHidden()


def test_result_with_phrase_shows_phrase_block():
    panel = AnalysisPanel()
    analysis = make_analysis(phrase_detected="got it right", phrase_explanation="做对了")

    panel.display_state(SelectionState.loading("got").with_analysis(analysis))

    assert not panel.phrase_frame.isHidden()
    assert panel.phrase_label.text() == "got it right"
    assert panel.phrase_explanation_label.text() == "做对了"


def test_failed_state_offers_retry():
    panel = AnalysisPanel()

    panel.display_state(SelectionState.loading("got").failed())

    assert panel.stack.currentIndex() == AnalysisPanel.EMPTY_PAGE
    assert "got" in panel.empty_label.text()


def test_cleared_selection_restores_empty_message():
    panel = AnalysisPanel()
    panel.display_state(SelectionState.loading("got").failed())

    panel.display_state(SelectionState.empty())

    assert panel.empty_label.text() == AnalysisPanel.EMPTY_MESSAGE


def test_save_button_reflects_saved_state():
    panel = AnalysisPanel()
    spy = MagicMock()
    panel.save_clicked.connect(spy)

    panel.save_button.click()
    spy.assert_called_once()

    panel.set_saved(True)
    assert panel.save_button.text() == "Saved"
    assert not panel.save_button.isEnabled()

    panel.set_saved(False)
    assert panel.save_button.isEnabled()
