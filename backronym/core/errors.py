"""Exception hierarchy for backronym generation."""

from __future__ import annotations


class BackronymError(Exception):
    """Base class for every error raised by :mod:`backronym`."""


class DecodeError(BackronymError):
    """A word-list line is undecodable, malformed or carries an unknown code."""

    def __init__(self, message: str, *, line: int | None = None) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class ParseError(BackronymError):
    """The template source is malformed."""


class EmptyCategoryError(BackronymError):
    """An unconstrained pick was made against a category with no words."""


class NoTemplateError(BackronymError):
    """No template exists for the requested letter-consuming length."""


__all__ = [
    "BackronymError",
    "DecodeError",
    "ParseError",
    "EmptyCategoryError",
    "NoTemplateError",
]
