"""Core backronym generation: word index, templates, composition, phrases."""

from .composer import Chunk, TemplateComposer
from .errors import (
    BackronymError,
    DecodeError,
    EmptyCategoryError,
    NoTemplateError,
    ParseError,
)
from .parts_of_speech import CODE_TABLE, PartOfSpeech, decode_tags
from .phrase_builder import BuildResult, PhraseBuilder, sanitize_acronym
from .templates import Template, TemplateLibrary, TemplateSlot
from .word_index import MAX_PICK_ATTEMPTS, WordIndex

__all__ = [
    "BackronymError",
    "DecodeError",
    "ParseError",
    "EmptyCategoryError",
    "NoTemplateError",
    "PartOfSpeech",
    "CODE_TABLE",
    "decode_tags",
    "WordIndex",
    "MAX_PICK_ATTEMPTS",
    "Template",
    "TemplateSlot",
    "TemplateLibrary",
    "Chunk",
    "TemplateComposer",
    "BuildResult",
    "PhraseBuilder",
    "sanitize_acronym",
]
