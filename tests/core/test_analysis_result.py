"""Unit tests for AnalysisResult and VocabularyItem entities."""

from datetime import datetime

import pytest

from context_lingo.core import AnalysisResult, VocabularyItem


WIRE = {
    "wordInContext": "提出",
    "phraseDetected": "float an idea",
    "phraseExplanation": "提出一个想法试探反应",
    "sentence": "Let me float an idea.",
    "sentenceTranslation": "让我提个想法。",
    "nuance": "商务场合常用",
}


def test_from_dict_maps_wire_names():
    result = AnalysisResult.from_dict(WIRE)

    assert result.word_in_context == "提出"
    assert result.phrase_detected == "float an idea"
    assert result.has_phrase
    assert result.to_dict() == WIRE


def test_phrase_fields_must_be_paired():
    with pytest.raises(ValueError):
        AnalysisResult(
            word_in_context="a",
            phrase_detected="float an idea",
            phrase_explanation=None,
            sentence="s",
            sentence_translation="t",
            nuance="n",
        )


def test_from_dict_rejects_missing_sentence():
    data = dict(WIRE)
    del data["sentence"]

    with pytest.raises(ValueError, match="sentence"):
        AnalysisResult.from_dict(data)


def test_phrase_fields_must_be_strings():
    data = dict(WIRE, phraseDetected=5, phraseExplanation=["x"])

    with pytest.raises(ValueError, match="phraseDetected"):
        AnalysisResult.from_dict(data)


@pytest.mark.parametrize("data", ["oops", ["a"], 5, None])
def test_from_dict_rejects_non_objects(data):
    with pytest.raises(ValueError):
        AnalysisResult.from_dict(data)


def test_result_is_immutable():
    result = AnalysisResult.from_dict(WIRE)
    with pytest.raises(AttributeError):
        result.sentence = "changed"


def test_vocabulary_item_round_trips_all_fields():
    item = VocabularyItem(
        id="abc123",
        word="float",
        analysis=AnalysisResult.from_dict(WIRE),
        created_at=datetime(2026, 1, 19, 12, 34, 56),
    )

    restored = VocabularyItem.from_dict(item.to_dict())

    assert restored == item
    assert restored.dedup_key == ("float", "Let me float an idea.")
