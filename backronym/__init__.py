"""Generate backronyms from part-of-speech word lists and sentence templates."""

from .app.services.expansion_service import BackronymService
from .core import (
    BackronymError,
    DecodeError,
    EmptyCategoryError,
    NoTemplateError,
    ParseError,
    PartOfSpeech,
    PhraseBuilder,
    Template,
    TemplateComposer,
    TemplateLibrary,
    WordIndex,
    sanitize_acronym,
)

__version__ = "0.1.0"

__all__ = [
    "BackronymService",
    "BackronymError",
    "DecodeError",
    "EmptyCategoryError",
    "NoTemplateError",
    "ParseError",
    "PartOfSpeech",
    "PhraseBuilder",
    "Template",
    "TemplateComposer",
    "TemplateLibrary",
    "WordIndex",
    "sanitize_acronym",
]
