from pathlib import Path

import pytest

from wordhord.dictionary import Dictionary
from wordhord.extract import Entry

DATA = Path(__file__).resolve().parent / "data"


@pytest.fixture
def sample_path():
    return DATA / "sample.html"


@pytest.fixture
def sample_html(sample_path):
    return sample_path.read_text(encoding="utf-8")


@pytest.fixture
def letters():
    with Dictionary([
        Entry(word="a", definition="first letter"),
        Entry(word="b", definition="second letter"),
    ]) as dictionary:
        yield dictionary
