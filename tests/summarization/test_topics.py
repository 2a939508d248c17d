import pytest

from docdigest.summarization.frequency import build_frequency_table
from docdigest.summarization.topics import capitalize_first, extract_topics
from docdigest.types.types import ConfigurationError


@pytest.fixture
def table():
    return build_frequency_table("Solar panels. Solar panels!")


def test_topics_by_descending_count(table):
    assert extract_topics(table, 2) == ["Solar panels", "Solar panels solar"]


def test_all_topics_when_limit_exceeds_table(table):
    assert len(extract_topics(table, 50)) == len(table)


def test_phrase_and_its_word_may_both_appear(table):
    topics = extract_topics(table)
    assert "Solar panels" in topics
    assert "Solar" in topics


def test_zero_topics(table):
    assert extract_topics(table, 0) == []


def test_negative_limit(table):
    with pytest.raises(ConfigurationError):
        extract_topics(table, -1)


def test_report_topics(article):
    from docdigest.data.preprocessor import normalize

    topics = extract_topics(build_frequency_table(normalize(article)), 3)
    assert topics[0] == "Solar capacity"


@pytest.mark.parametrize(
    "term, expected",
    [("revenue growth", "Revenue growth"), ("", ""), ("x", "X"), ("iPhone sales", "IPhone sales")],
)
def test_capitalize_first(term, expected):
    assert capitalize_first(term) == expected
