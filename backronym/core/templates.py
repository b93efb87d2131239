"""Part-of-speech sentence templates bucketed by letter-consuming length."""

from __future__ import annotations

import random
import re
import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .errors import NoTemplateError, ParseError
from .parts_of_speech import PartOfSpeech

TemplateSlot = Union[str, PartOfSpeech]

_TAG_SLOT_PATTERN = re.compile(r"^<\s*([A-Za-z_-]+)\s*>$")


@dataclass(frozen=True)
class Template:
    """Ordered slots; tag slots consume one acronym letter each."""

    slots: Tuple[TemplateSlot, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "slots", tuple(self.slots))

    @property
    def length(self) -> int:
        return sum(1 for slot in self.slots if isinstance(slot, PartOfSpeech))

    def __add__(self, other: "Template") -> "Template":
        return Template(self.slots + tuple(other.slots))

    def __iter__(self) -> Iterator[TemplateSlot]:
        return iter(self.slots)

    def __len__(self) -> int:
        return len(self.slots)

    def describe(self) -> str:
        """Render the template the way template files spell it."""

        return " ".join(
            f"<{slot.value}>" if isinstance(slot, PartOfSpeech) else slot
            for slot in self.slots
        )


def parse_slot(raw: Any) -> TemplateSlot:
    """Turn ``"<adjective>"`` into a tag and any other string into a literal."""

    if isinstance(raw, PartOfSpeech):
        return raw
    if not isinstance(raw, str) or not raw.strip():
        raise ParseError(f"template slot must be a non-empty string, got {raw!r}")
    match = _TAG_SLOT_PATTERN.match(raw.strip())
    if match is None:
        return raw.strip()
    try:
        return PartOfSpeech.from_name(match.group(1))
    except ValueError:
        raise ParseError(f"unknown part-of-speech tag {raw!r}") from None


def parse_template(raw: Any) -> Template:
    if isinstance(raw, Template):
        return raw
    if isinstance(raw, str) or not isinstance(raw, Sequence):
        raise ParseError(f"template must be a list of slots, got {raw!r}")
    template = Template(tuple(parse_slot(slot) for slot in raw))
    if template.length == 0:
        raise ParseError(f"template {raw!r} has no part-of-speech slot")
    return template


def _iter_source(source: Any) -> Iterator[Tuple[Optional[int], Any]]:
    """Yield ``(declared_length, raw_template)`` pairs from a template source."""

    if isinstance(source, Mapping) and "templates" in source:
        source = source["templates"]

    if isinstance(source, Mapping):
        for raw_key, bucket in source.items():
            try:
                declared = int(raw_key)
            except (TypeError, ValueError):
                raise ParseError(f"template bucket key {raw_key!r} is not a length") from None
            if isinstance(bucket, str) or not isinstance(bucket, Sequence):
                raise ParseError(f"template bucket {raw_key!r} must be a list")
            for raw in bucket:
                yield declared, raw
        return

    if isinstance(source, str) or not isinstance(source, Iterable):
        raise ParseError("template source must be a list or a mapping of lengths")
    for raw in source:
        yield None, raw


class TemplateLibrary:
    """Precomposed templates indexed by the number of letters they consume."""

    def __init__(
        self,
        source: Any = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.rng = rng or random.Random()
        self._lock = threading.RLock()
        self._buckets: Dict[int, Tuple[Template, ...]] = {}
        if source is not None:
            self.load(source)

    def load(self, source: Any) -> int:
        """Replace the library with the templates in ``source``.

        ``source`` is a list of templates, a mapping from length to templates,
        or either of those under a ``"templates"`` key. Returns the number of
        templates loaded.

        Raises:
            ParseError: the source is malformed, a declared bucket length does
                not match its template, or some length between one and the
                longest template has no template.
        """

        staged: Dict[int, List[Template]] = {}
        for declared, raw in _iter_source(source):
            template = parse_template(raw)
            if declared is not None and declared != template.length:
                raise ParseError(
                    f"template {template.describe()!r} consumes {template.length} "
                    f"letters but is filed under {declared}"
                )
            staged.setdefault(template.length, []).append(template)

        if staged:
            missing = [length for length in range(1, max(staged) + 1) if length not in staged]
            if missing:
                raise ParseError(f"no templates for lengths {missing}")

        snapshot = {length: tuple(bucket) for length, bucket in staged.items()}
        with self._lock:
            self._buckets = snapshot
        return sum(len(bucket) for bucket in snapshot.values())

    def _snapshot(self) -> Dict[int, Tuple[Template, ...]]:
        with self._lock:
            return self._buckets

    def snapshot(self) -> "TemplateLibrary":
        """Return a library pinned to the templates loaded right now.

        Later loads into ``self`` leave the returned library unchanged. Both
        draw from the same random source.
        """

        pinned = TemplateLibrary(rng=self.rng)
        pinned._buckets = self._snapshot()
        return pinned

    def sample(self, length: int) -> Template:
        """Return a random template consuming exactly ``length`` letters."""

        bucket = self._snapshot().get(length) if length >= 1 else None
        if not bucket:
            raise NoTemplateError(
                f"no template of length {length} (available 1..{self.max_length()})"
            )
        return self.rng.choice(bucket)

    def max_length(self) -> int:
        buckets = self._snapshot()
        return max(buckets) if buckets else 0

    def lengths(self) -> List[int]:
        return sorted(self._snapshot())

    def templates(self, length: int) -> Tuple[Template, ...]:
        return self._snapshot().get(length, ())

    def size(self) -> int:
        """Total number of templates across all lengths."""

        return sum(len(bucket) for bucket in self._snapshot().values())


__all__ = [
    "Template",
    "TemplateLibrary",
    "TemplateSlot",
    "parse_slot",
    "parse_template",
]
