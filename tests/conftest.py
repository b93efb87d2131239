import random
import string
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backronym.app.services.expansion_service import BackronymService
from backronym.core import PartOfSpeech, TemplateLibrary, WordIndex

FULL_COVERAGE_TAGS = (
    PartOfSpeech.NOUN,
    PartOfSpeech.PLURAL,
    PartOfSpeech.ADJECTIVE,
    PartOfSpeech.ADVERB,
    PartOfSpeech.TRANSITIVE_VERB,
    PartOfSpeech.PREPOSITION,
)


def make_records(tags=FULL_COVERAGE_TAGS, letters=string.ascii_lowercase):
    """One synthetic word per (letter, tag), e.g. ``("cnoun", "N")``."""

    return [
        (f"{letter}{tag.value.replace('-', '')}", tag.code)
        for tag in tags
        for letter in letters
    ]


@pytest.fixture
def word_records():
    return make_records()


@pytest.fixture
def template_source():
    return {
        "1": [["<noun>"], ["<adjective>"]],
        "2": [["<adjective>", "<noun>"], ["<adverb>", "<adjective>"]],
        "3": [["<adjective>", "<noun>", "<plural>"], ["<plural>", "<transitive-verb>", "<plural>"]],
    }


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def word_index(word_records, rng):
    return WordIndex(word_records, rng=rng)


@pytest.fixture
def template_library(template_source, rng):
    return TemplateLibrary(template_source, rng=rng)


@pytest.fixture
def service(word_records, template_source):
    return BackronymService(
        words=WordIndex(word_records),
        templates=TemplateLibrary(template_source),
        seed=42,
    )
