"""Fill part-of-speech templates with letter-constrained words."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from .composer import TemplateComposer
from .parts_of_speech import PartOfSpeech
from .templates import Template
from .word_index import WordIndex

_NON_LETTER_PATTERN = re.compile(r"[^A-Za-z]+")


def sanitize_acronym(raw: Optional[str]) -> str:
    """Drop everything but ASCII letters, keeping their order and case."""

    return _NON_LETTER_PATTERN.sub("", raw or "")


@dataclass
class BuildResult:
    """A phrase plus the letters whose slot could not be filled."""

    phrase: str
    tokens: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)


class PhraseBuilder:
    """Turn an acronym into a backronym phrase."""

    def __init__(self, words: WordIndex, composer: TemplateComposer) -> None:
        self.words = words
        self.composer = composer

    def build_result(self, template: Template, letters: Sequence[str]) -> BuildResult:
        tokens: List[str] = []
        missing: List[str] = []
        cursor = 0
        for slot in template:
            if not isinstance(slot, PartOfSpeech):
                tokens.append(slot)
                continue
            if cursor >= len(letters):
                continue
            letter = letters[cursor]
            cursor += 1
            word = self.words.pick(slot, letter)
            if word is None:
                missing.append(letter)
                continue
            tokens.append(word)
        return BuildResult(" ".join(tokens), tokens, missing)

    def build(self, template: Template, letters: Sequence[str]) -> str:
        """Resolve ``template`` against ``letters`` and join the words.

        Literal slots are copied as-is. Each tag slot takes the next letter;
        a slot whose letter could not be matched is left out of the phrase.
        Tag slots beyond the last letter are ignored.
        """

        return self.build_result(template, letters).phrase

    def expand_one(self, raw: Optional[str]) -> BuildResult:
        letters = sanitize_acronym(raw)
        return self.build_result(self.composer.compose(len(letters)), letters)

    def expand(
        self, raw: Optional[str], times: Optional[int] = None
    ) -> Union[str, List[str]]:
        """Expand ``raw`` into one phrase, or ``times`` independent phrases."""

        if times is None:
            return self.expand_one(raw).phrase
        return [self.expand_one(raw).phrase for _ in range(max(0, int(times)))]


__all__ = ["BuildResult", "PhraseBuilder", "sanitize_acronym"]
