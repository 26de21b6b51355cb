"""Shared fixtures and test doubles."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from context_lingo.core import AnalysisResult


class SynchronousThreadPool:
    """Runs workers immediately on the calling thread."""

    def __init__(self):
        self.started = []

    def start(self, worker):
        self.started.append(worker)
        worker.run()


class DeferredThreadPool:
    """Holds workers until the test decides to run them, in any order."""

    def __init__(self):
        self.pending = []

    def start(self, worker):
        self.pending.append(worker)

    def run(self, index: int):
        worker = self.pending[index]
        worker.run()
        return worker


def make_analysis(sentence="They've got it right.", **overrides) -> AnalysisResult:
    fields = dict(
        word_in_context="得到",
        phrase_detected=None,
        phrase_explanation=None,
        sentence=sentence,
        sentence_translation="他们做对了。",
        nuance="口语化",
    )
    fields.update(overrides)
    return AnalysisResult(**fields)


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """Create the QApplication once for the whole test session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def sample_analysis():
    return make_analysis()


@pytest.fixture
def sync_pool():
    return SynchronousThreadPool()


@pytest.fixture
def deferred_pool():
    return DeferredThreadPool()
