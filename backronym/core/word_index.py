"""In-memory word lists keyed by part of speech."""

from __future__ import annotations

import random
import threading
from typing import Dict, Iterable, Optional, Tuple

from .errors import DecodeError, EmptyCategoryError
from .parts_of_speech import PartOfSpeech, decode_tags

MAX_PICK_ATTEMPTS = 12800

WordRecord = Tuple[str, Iterable[str | PartOfSpeech]]


def _empty_categories() -> Dict[PartOfSpeech, Tuple[str, ...]]:
    return {tag: () for tag in PartOfSpeech}


class WordIndex:
    """Words grouped by :class:`PartOfSpeech` with letter-constrained picks.

    Loading builds a fresh mapping and swaps it in whole, so readers never
    see a half-populated index and a failed load keeps the previous words.
    """

    def __init__(
        self,
        records: Optional[Iterable[WordRecord]] = None,
        *,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_PICK_ATTEMPTS,
    ) -> None:
        self.rng = rng or random.Random()
        self.max_attempts = max(1, int(max_attempts))
        self._lock = threading.RLock()
        self._categories: Dict[PartOfSpeech, Tuple[str, ...]] = _empty_categories()
        if records is not None:
            self.load(records)

    def load(self, records: Iterable[WordRecord]) -> int:
        """Replace every category with the words in ``records``.

        Each record is ``(word, codes)``; the word is filed under each of its
        tags. Words that are empty or contain whitespace are skipped. Returns
        the number of records accepted.

        Raises:
            DecodeError: a record carries an unrecognised part-of-speech code.
        """

        staged: Dict[PartOfSpeech, list[str]] = {tag: [] for tag in PartOfSpeech}
        accepted = 0
        for raw_word, codes in records:
            try:
                tags = decode_tags(codes)
            except DecodeError as exc:
                raise DecodeError(f"{exc} for word {raw_word!r}") from None
            word = str(raw_word or "").strip()
            if not word or any(char.isspace() for char in word):
                continue
            for tag in tags:
                staged[tag].append(word)
            accepted += 1

        snapshot = {tag: tuple(words) for tag, words in staged.items()}
        with self._lock:
            self._categories = snapshot
        return accepted

    def _words(self, tag: PartOfSpeech) -> Tuple[str, ...]:
        with self._lock:
            categories = self._categories
        return categories.get(PartOfSpeech(tag), ())

    def pick(self, tag: PartOfSpeech, letter: Optional[str] = None) -> Optional[str]:
        """Return a random word tagged ``tag``.

        Without ``letter`` any word in the category may be returned. With a
        letter, up to ``max_attempts`` uniform draws are made and the first
        word starting with that letter (case-insensitively) is returned with
        its first character capitalised. ``None`` means no match was drawn.

        Raises:
            EmptyCategoryError: ``letter`` is not given and the category is empty.
        """

        words = self._words(tag)
        if letter is None:
            if not words:
                raise EmptyCategoryError(f"no words loaded for {PartOfSpeech(tag).value}")
            return self.rng.choice(words)

        if not words:
            return None
        target = str(letter)[:1].lower()
        for _ in range(self.max_attempts):
            candidate = self.rng.choice(words)
            if candidate[0].lower() == target:
                return candidate[0].upper() + candidate[1:]
        return None

    def size(self) -> int:
        """Total number of words across all categories."""

        with self._lock:
            categories = self._categories
        return sum(len(words) for words in categories.values())

    def category_size(self, tag: PartOfSpeech) -> int:
        return len(self._words(tag))


__all__ = ["WordIndex", "WordRecord", "MAX_PICK_ATTEMPTS"]
