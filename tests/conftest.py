"""
Shared pytest fixtures for docdigest tests.
"""
import logging
from typing import Generator, List

import pytest

from docdigest.utils.config import ConfigManager
from docdigest.utils.logging_config import DigestLogger

ARTICLE = """ANNUAL ENERGY REVIEW

Solar capacity expanded rapidly across the region during the last year.
Grid operators reported that solar capacity now covers a significant share of peak demand.
Battery storage projects doubled, adding 45% more flexible capacity to the grid.

Page 3 of 12

Wind generation remained steady while maintenance costs declined for most operators.
One of the main challenges is connecting remote wind farms to urban demand centres [4].
Policy makers expect storage prices to keep falling through the next decade.
© 2023 Energy Council. All rights reserved.
"""

COMMITTEE_NAMES = [
    "harbor", "library", "transit", "budget", "housing", "parking", "school",
    "water", "bridge", "garden", "museum", "clinic", "market", "stadium",
    "airport", "theater", "station", "tunnel", "festival", "archive",
]


def synthetic_sentences(count: int = 40) -> List[str]:
    """Sentences sharing only short words, so none repeats a keyword."""
    sentences = []
    for i in range(count):
        code = chr(97 + i // 26) + chr(97 + i % 26)
        sentences.append(
            f"The alpha{code} data and bravo{code} data show delta{code} with gamma{code} gain."
        )
    return sentences


@pytest.fixture
def article() -> str:
    """Short multi-paragraph report with boilerplate."""
    return ARTICLE


@pytest.fixture
def synthetic_lines() -> List[str]:
    return synthetic_sentences()


@pytest.fixture
def synthetic_document(synthetic_lines) -> str:
    return "\n".join(synthetic_lines)


@pytest.fixture
def clean_transcript() -> str:
    """Well-formed transcript that triggers no quality issues."""
    return " ".join(
        f"The committee reviewed the {name} proposal in careful detail." for name in COMMITTEE_NAMES
    )


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch) -> Generator[None, None, None]:
    """Hide DOCDIGEST_* variables and reset global config and logging state."""
    import os

    for key in list(os.environ):
        if key.startswith("DOCDIGEST_"):
            monkeypatch.delenv(key)

    yield

    ConfigManager.reset()
    DigestLogger._configured = False
    package_logger = logging.getLogger("docdigest")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
