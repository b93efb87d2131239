import random

import pytest

from backronym.core import DecodeError, EmptyCategoryError, PartOfSpeech, WordIndex
from backronym.core.word_index import MAX_PICK_ATTEMPTS


def test_load_files_word_under_each_tag():
    index = WordIndex([("light", "NAt")])

    assert index.category_size(PartOfSpeech.NOUN) == 1
    assert index.category_size(PartOfSpeech.ADJECTIVE) == 1
    assert index.category_size(PartOfSpeech.TRANSITIVE_VERB) == 1
    assert index.size() == 3


def test_load_skips_words_with_whitespace_and_empty_words():
    index = WordIndex()

    accepted = index.load([("ice cream", "N"), ("tab\tword", "N"), ("", "N"), ("kettle", "N")])

    assert accepted == 1
    assert index.size() == 1
    assert index.pick(PartOfSpeech.NOUN) == "kettle"


def test_load_replaces_previous_contents():
    index = WordIndex([("anchor", "N"), ("bold", "A")])

    index.load([("cabin", "N")])

    assert index.size() == 1
    assert index.category_size(PartOfSpeech.ADJECTIVE) == 0


def test_failed_load_keeps_previous_contents():
    index = WordIndex([("anchor", "N")])

    with pytest.raises(DecodeError, match="canyon"):
        index.load([("bridge", "N"), ("canyon", "Z")])

    assert index.size() == 1
    assert index.pick(PartOfSpeech.NOUN) == "anchor"


def test_duplicate_entries_are_kept():
    index = WordIndex([("echo", "N"), ("echo", "N")])

    assert index.size() == 2


def test_unconstrained_pick_on_empty_category_raises():
    index = WordIndex([("anchor", "N")])

    with pytest.raises(EmptyCategoryError):
        index.pick(PartOfSpeech.PREPOSITION)


def test_unconstrained_pick_returns_word_unchanged(word_index):
    word = word_index.pick(PartOfSpeech.PLURAL)

    assert word.endswith("plural")
    assert word == word.lower()


def test_constrained_pick_matches_letter_and_capitalises(word_index):
    for letter in "aBcXyZ":
        word = word_index.pick(PartOfSpeech.NOUN, letter)
        assert word is not None
        assert word[0] == letter.upper()
        assert word[1:] == "noun"


def test_constrained_pick_never_returns_mismatched_word():
    index = WordIndex(
        [("apple", "N"), ("berry", "N"), ("cherry", "N")],
        rng=random.Random(3),
        max_attempts=200,
    )

    for _ in range(50):
        word = index.pick(PartOfSpeech.NOUN, "b")
        assert word in (None, "Berry")


def test_constrained_pick_returns_none_when_bound_exhausted():
    index = WordIndex([("apple", "N"), ("avocado", "N")], max_attempts=25)

    assert index.pick(PartOfSpeech.NOUN, "z") is None


def test_constrained_pick_on_empty_category_returns_none():
    index = WordIndex()

    assert index.pick(PartOfSpeech.INTERJECTION, "w") is None


def test_constrained_pick_draws_at_most_the_bound():
    class CountingRandom(random.Random):
        def __init__(self):
            super().__init__(0)
            self.draws = 0

        def choice(self, seq):
            self.draws += 1
            return super().choice(seq)

    rng = CountingRandom()
    index = WordIndex([("apple", "N")], rng=rng)

    assert index.pick(PartOfSpeech.NOUN, "q") is None
    assert rng.draws == MAX_PICK_ATTEMPTS == 12800


def test_seeded_picks_are_reproducible(word_records):
    first = WordIndex(word_records, rng=random.Random(9))
    second = WordIndex(word_records, rng=random.Random(9))

    picks_first = [first.pick(PartOfSpeech.ADJECTIVE) for _ in range(20)]
    picks_second = [second.pick(PartOfSpeech.ADJECTIVE) for _ in range(20)]

    assert picks_first == picks_second
