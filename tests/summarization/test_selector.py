"""Tests for diversity-aware key point selection."""

import pytest

from docdigest.summarization.selector import KeyPointSelector, extract_keywords
from docdigest.types.types import ConfigurationError, ScoredSentence, SentenceCandidate


def scored(text, index, score, page=None):
    return ScoredSentence(SentenceCandidate(raw=text, text=text, index=index, page=page), score)


@pytest.fixture
def sentences():
    return [
        scored("Revenue growth was strong.", 0, 3.0),
        scored("Revenue fell later.", 1, 5.0),
        scored("Costs declined sharply.", 2, 1.0),
    ]


def test_extract_keywords():
    assert extract_keywords("These results about their Revenue, twice.") == frozenset(
        {"results", "revenue", "twice"}
    )


def test_short_words_are_not_keywords():
    assert extract_keywords("The data show a gain") == frozenset()


def test_repeated_keyword_is_rejected(sentences):
    selected = KeyPointSelector(limit=3).select(sentences)
    assert [p.text for p in selected] == ["Revenue fell later.", "Costs declined sharply."]


def test_result_is_in_document_order():
    items = [scored("Gamma sentence wins.", 2, 9.0), scored("Alpha sentence loses.", 0, 1.0)]
    # both share "sentence", so only the higher score survives
    assert [s.index for s in KeyPointSelector().rank(items)] == [2]

    items = [scored("Gamma result wins.", 2, 9.0), scored("Alpha finding loses.", 0, 1.0)]
    assert [s.index for s in KeyPointSelector().rank(items)] == [0, 2]


def test_limit(sentences):
    selected = KeyPointSelector(limit=1).select(sentences)
    assert [p.text for p in selected] == ["Revenue fell later."]


def test_backfill_uses_rejected_sentences(sentences):
    selected = KeyPointSelector(limit=3, backfill=True).select(sentences)
    assert [p.text for p in selected] == [
        "Revenue growth was strong.",
        "Revenue fell later.",
        "Costs declined sharply.",
    ]


def test_ties_keep_original_order():
    items = [scored("Revenue first mention.", 0, 2.0), scored("Revenue second mention.", 1, 2.0)]
    assert [p.text for p in KeyPointSelector().select(items)] == ["Revenue first mention."]


def test_pages_carried_to_key_points():
    selected = KeyPointSelector().select([scored("Revenue grew strongly.", 0, 1.0, page=4)])
    assert selected[0].page == 4


def test_empty_input():
    assert KeyPointSelector().select([]) == []


def test_invalid_limit():
    with pytest.raises(ConfigurationError):
        KeyPointSelector(limit=0)
