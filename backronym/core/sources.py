"""Readers for the word-list and template files backing the indices."""

from __future__ import annotations

import json
import os
from importlib import resources
from pathlib import Path
from typing import Any, Iterator, List, Optional, Tuple

from .errors import DecodeError, ParseError
from .parts_of_speech import decode_tags

WORDLIST_ENV = "BACKRONYM_WORDLIST"
TEMPLATES_ENV = "BACKRONYM_TEMPLATES"

# Moby part-of-speech lists separate the word from its codes with U+00D7.
_SEPARATORS = ("×", "\t")
_COMMENT_PREFIX = "#"


def _bundled(filename: str) -> Path:
    return Path(str(resources.files("backronym").joinpath("data", filename)))


def default_wordlist_path() -> Path:
    """Word list named by ``BACKRONYM_WORDLIST`` or the bundled one."""

    configured = os.getenv(WORDLIST_ENV)
    return Path(configured) if configured else _bundled("words.txt")


def default_template_path() -> Path:
    """Template file named by ``BACKRONYM_TEMPLATES`` or the bundled one."""

    configured = os.getenv(TEMPLATES_ENV)
    return Path(configured) if configured else _bundled("templates.json")


def parse_word_line(line: str, *, line_number: Optional[int] = None) -> Optional[Tuple[str, str]]:
    """Split one word-list line into ``(word, codes)``.

    Blank lines and ``#`` comments yield ``None``. Codes are checked against
    the code table here so that errors carry the file line they came from.
    """

    entry = line.rstrip("\r\n")
    if not entry.strip() or entry.lstrip().startswith(_COMMENT_PREFIX):
        return None
    for separator in _SEPARATORS:
        word, found, codes = entry.partition(separator)
        if found:
            codes = codes.strip()
            if not codes:
                raise DecodeError(f"no part-of-speech codes for {word!r}", line=line_number)
            try:
                decode_tags(codes)
            except DecodeError as exc:
                raise DecodeError(f"{exc} for word {word.strip()!r}", line=line_number) from None
            return word.strip(), codes
    raise DecodeError(f"missing part-of-speech separator in {entry!r}", line=line_number)


def iter_word_records(path: Path | str) -> Iterator[Tuple[str, str]]:
    """Yield ``(word, codes)`` records from the word-list file at ``path``.

    Lines are decoded one at a time so a byte sequence that is not UTF-8
    (a Latin-1 Moby list, say) is reported against its own line.
    """

    with Path(path).open("rb") as handle:
        for line_number, raw in enumerate(handle, start=1):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise DecodeError(
                    f"word list is not valid UTF-8 ({exc.reason} at byte {exc.start})",
                    line=line_number,
                ) from exc
            record = parse_word_line(line, line_number=line_number)
            if record is not None:
                yield record


def read_word_records(path: Path | str) -> List[Tuple[str, str]]:
    return list(iter_word_records(path))


def parse_template_text(text: str) -> Any:
    """Decode template JSON, reporting syntax problems as :class:`ParseError`."""

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"template source is not valid JSON: {exc}") from exc


def read_template_source(path: Path | str) -> Any:
    """Load the raw template structure stored at ``path``."""

    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"template source is not valid UTF-8: {exc.reason}") from exc
    return parse_template_text(text)


__all__ = [
    "WORDLIST_ENV",
    "TEMPLATES_ENV",
    "default_wordlist_path",
    "default_template_path",
    "parse_word_line",
    "iter_word_records",
    "read_word_records",
    "parse_template_text",
    "read_template_source",
]
