"""Service object owning the word index, template library and random source."""

from __future__ import annotations

import random
import time
from pathlib import Path
from typing import List, Optional, Union

from backronym.core import (
    BackronymError,
    PhraseBuilder,
    TemplateComposer,
    TemplateLibrary,
    WordIndex,
    sanitize_acronym,
)
from backronym.core.sources import (
    default_template_path,
    default_wordlist_path,
    read_template_source,
    read_word_records,
)

from ...utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)


class BackronymService:
    """Explicit context for backronym generation.

    All components share one :class:`random.Random`, so seeding the service
    makes every expansion reproducible. Reloads replace an index in one swap;
    callers expanding concurrently see either the old or the new data.
    """

    def __init__(
        self,
        *,
        word_source: Optional[Path | str] = None,
        template_source: Optional[Path | str] = None,
        words: Optional[WordIndex] = None,
        templates: Optional[TemplateLibrary] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.rng = rng or random.Random(seed)
        self.word_source = Path(word_source) if word_source else None
        self.template_source = Path(template_source) if template_source else None

        self.words = words if words is not None else WordIndex()
        self.templates = templates if templates is not None else TemplateLibrary()
        self.words.rng = self.rng
        self.templates.rng = self.rng

        self.composer = TemplateComposer(self.templates, self.words, rng=self.rng)
        self.builder = PhraseBuilder(self.words, self.composer)

        self._logger = get_logger(__name__).bind(component="backronym_service")

        self._metric_requests = create_counter(
            "backronym_expand_requests_total",
            "Total backronym expansion requests received.",
        )
        self._metric_failures = create_counter(
            "backronym_expand_failures_total",
            "Expansion requests that raised an exception.",
        )
        self._metric_unfilled = create_counter(
            "backronym_unfilled_letters_total",
            "Acronym letters left out because no matching word was drawn.",
        )
        self._metric_duration = create_histogram(
            "backronym_expand_seconds",
            "Latency of backronym expansion requests.",
        )
        self._metric_reloads = create_counter(
            "backronym_reloads_total",
            "Data source reloads by source and outcome.",
            label_names=("source", "outcome"),
        )

    # Configuration -----------------------------------------------------------
    def seed(self, value: Optional[int]) -> None:
        """Reseed the shared random source."""

        self.rng.seed(value)

    def _word_path(self) -> Path:
        return self.word_source or default_wordlist_path()

    def _template_path(self) -> Path:
        return self.template_source or default_template_path()

    # Reloading ---------------------------------------------------------------
    def reload_words(self) -> bool:
        """Replace the word index from the configured word list.

        Returns ``False`` (keeping the current words) when the file is missing.
        Decode errors are logged and re-raised; the index is left unchanged.
        """

        path = self._word_path()
        if not path.exists():
            self._logger.warning("Word list not found", context={"path": str(path)})
            self._metric_reloads.labels(source="words", outcome="missing").inc()
            return False
        try:
            accepted = self.words.load(read_word_records(path))
        except BackronymError as exc:
            self._logger.error(
                "Word list reload failed",
                context={"path": str(path), "error": str(exc)},
            )
            self._metric_reloads.labels(source="words", outcome="error").inc()
            raise
        self._logger.info(
            "Word list loaded",
            context={"path": str(path), "records": accepted, "words": self.words.size()},
        )
        self._metric_reloads.labels(source="words", outcome="ok").inc()
        return True

    def reload_templates(self) -> bool:
        """Replace the template library from the configured template file."""

        path = self._template_path()
        if not path.exists():
            self._logger.warning("Template file not found", context={"path": str(path)})
            self._metric_reloads.labels(source="templates", outcome="missing").inc()
            return False
        try:
            loaded = self.templates.load(read_template_source(path))
        except BackronymError as exc:
            self._logger.error(
                "Template reload failed",
                context={"path": str(path), "error": str(exc)},
            )
            self._metric_reloads.labels(source="templates", outcome="error").inc()
            raise
        self._logger.info(
            "Templates loaded",
            context={
                "path": str(path),
                "templates": loaded,
                "max_length": self.templates.max_length(),
            },
        )
        self._metric_reloads.labels(source="templates", outcome="ok").inc()
        return True

    # Diagnostics -------------------------------------------------------------
    def word_count(self) -> int:
        return self.words.size()

    def template_count(self) -> int:
        return self.templates.size()

    # Public API --------------------------------------------------------------
    def expand(
        self, raw: Optional[str], times: Optional[int] = None
    ) -> Union[str, List[str]]:
        """Expand ``raw`` into a phrase, or a list of ``times`` phrases."""

        letters = sanitize_acronym(raw)
        repeats = 1 if times is None else max(0, int(times))
        self._metric_requests.inc()
        start = time.perf_counter()

        with start_span(
            "backronym.expand",
            {"acronym.length": len(letters), "expand.times": repeats},
        ) as span:
            try:
                results = [self.builder.expand_one(letters) for _ in range(repeats)]
            except BackronymError as exc:
                self._metric_failures.inc()
                record_exception(span, exc)
                self._logger.error(
                    "Expansion failed",
                    context={"acronym": letters, "error": str(exc)},
                )
                raise
            finally:
                self._metric_duration.observe(time.perf_counter() - start)

            unfilled = sum(len(result.missing) for result in results)
            if unfilled:
                self._metric_unfilled.inc(unfilled)
                self._logger.debug(
                    "Letters left unfilled",
                    context={
                        "acronym": letters,
                        "missing": [letter for result in results for letter in result.missing],
                    },
                )
            add_span_attributes(span, {"expand.unfilled": unfilled})

        phrases = [result.phrase for result in results]
        return phrases[0] if times is None else phrases


__all__ = ["BackronymService"]
