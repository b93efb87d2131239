"""Part-of-speech tags and the single-character codes used by word lists."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Tuple

from .errors import DecodeError


class PartOfSpeech(str, Enum):
    """Grammatical category of a word or template slot.

    Values double as the tag names written inside ``<...>`` in template files.
    """

    NOUN = "noun"
    PLURAL = "plural"
    NOUN_PHRASE = "noun-phrase"
    VERB = "verb"
    TRANSITIVE_VERB = "transitive-verb"
    INTRANSITIVE_VERB = "intransitive-verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    CONJUNCTION = "conjunction"
    PREPOSITION = "preposition"
    INTERJECTION = "interjection"
    PRONOUN = "pronoun"
    DEFINITE_ARTICLE = "definite-article"
    INDEFINITE_ARTICLE = "indefinite-article"
    NOMINATIVE = "nominative"

    @property
    def code(self) -> str:
        return _TAG_TO_CODE[self]

    @classmethod
    def from_code(cls, code: str) -> "PartOfSpeech":
        try:
            return CODE_TABLE[code]
        except KeyError:
            raise DecodeError(f"unrecognised part-of-speech code {code!r}") from None

    @classmethod
    def from_name(cls, name: str) -> "PartOfSpeech":
        normalized = str(name or "").strip().lower().replace("_", "-")
        return cls(normalized)


CODE_TABLE = {
    "N": PartOfSpeech.NOUN,
    "p": PartOfSpeech.PLURAL,
    "h": PartOfSpeech.NOUN_PHRASE,
    "V": PartOfSpeech.VERB,
    "t": PartOfSpeech.TRANSITIVE_VERB,
    "i": PartOfSpeech.INTRANSITIVE_VERB,
    "A": PartOfSpeech.ADJECTIVE,
    "v": PartOfSpeech.ADVERB,
    "C": PartOfSpeech.CONJUNCTION,
    "P": PartOfSpeech.PREPOSITION,
    "!": PartOfSpeech.INTERJECTION,
    "r": PartOfSpeech.PRONOUN,
    "D": PartOfSpeech.DEFINITE_ARTICLE,
    "I": PartOfSpeech.INDEFINITE_ARTICLE,
    "o": PartOfSpeech.NOMINATIVE,
}

_TAG_TO_CODE = {tag: code for code, tag in CODE_TABLE.items()}


def decode_tags(codes: Iterable[str | PartOfSpeech]) -> Tuple[PartOfSpeech, ...]:
    """Translate a code string (or iterable of codes/tags) into tags.

    Tags are returned in first-seen order with duplicates removed.
    """

    tags: list[PartOfSpeech] = []
    for code in codes:
        tag = code if isinstance(code, PartOfSpeech) else PartOfSpeech.from_code(code)
        if tag not in tags:
            tags.append(tag)
    return tuple(tags)


__all__ = ["PartOfSpeech", "CODE_TABLE", "decode_tags"]
