"""Template composition for acronyms of any length."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

from .parts_of_speech import PartOfSpeech
from .templates import Template, TemplateLibrary
from .word_index import WordIndex


@dataclass(frozen=True)
class Chunk:
    """One spliced segment: ``length`` letters, then an optional filler word."""

    length: int
    filler: Optional[str] = None


class TemplateComposer:
    """Produce a template whose tag slots match an acronym length.

    Lengths the library covers are sampled directly. Longer acronyms are cut
    into random chunks no longer than the library's maximum and the sampled
    chunk templates are joined with randomly drawn prepositions.
    """

    filler_tag = PartOfSpeech.PREPOSITION

    def __init__(
        self,
        library: TemplateLibrary,
        words: WordIndex,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.library = library
        self.words = words
        self.rng = rng or random.Random()

    def plan(self, length: int, library: Optional[TemplateLibrary] = None) -> List[Chunk]:
        """Split ``length`` into chunks, each but the last carrying a filler.

        Chunk sizes are bounded by ``library`` (default: the composer's own).

        Raises:
            ValueError: ``length`` is negative.
            NoTemplateError: the library is empty and ``length`` is positive.
            EmptyCategoryError: a filler is needed and no prepositions are loaded.
        """

        if length < 0:
            raise ValueError(f"acronym length must not be negative, got {length}")
        if length == 0:
            return []

        if library is None:
            library = self.library
        ceiling = library.max_length()
        if ceiling < 1 or length <= ceiling:
            return [Chunk(length)]

        chunks: List[Chunk] = []
        remaining = length
        while remaining > ceiling:
            size = self.rng.randint(1, ceiling)
            chunks.append(Chunk(size, self.words.pick(self.filler_tag)))
            remaining -= size
        chunks.append(Chunk(remaining))
        return chunks

    def compose(self, length: int) -> Template:
        # Plan and sample against one pinned template set.
        library = self.library.snapshot()
        template = Template()
        for chunk in self.plan(length, library):
            template = template + library.sample(chunk.length)
            if chunk.filler is not None:
                template = template + Template((chunk.filler,))
        return template


__all__ = ["Chunk", "TemplateComposer"]
