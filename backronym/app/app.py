"""Application wiring for the backronym generator."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, Union

from backronym.utils.observability import configure_logging, get_logger

from .services.expansion_service import BackronymService

_SEED_ENV = "BACKRONYM_SEED"
_SHARE_ENV = "BACKRONYM_SHARE"


def _seed_from_environment() -> Optional[int]:
    raw = os.environ.get(_SEED_ENV, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


class BackronymApp:
    """High-level facade that loads data and exposes the service."""

    def __init__(
        self,
        *,
        word_source: Optional[Path | str] = None,
        template_source: Optional[Path | str] = None,
        seed: Optional[int] = None,
        service: Optional[BackronymService] = None,
        load: bool = True,
    ) -> None:
        self._logger = get_logger(__name__).bind(component="app_facade")
        resolved_seed = seed if seed is not None else _seed_from_environment()
        self.service = service or BackronymService(
            word_source=word_source,
            template_source=template_source,
            seed=resolved_seed,
        )
        self._logger.info(
            "Initialising application facade",
            context={
                "word_source": str(self.service.word_source or "bundled"),
                "template_source": str(self.service.template_source or "bundled"),
                "seeded": resolved_seed is not None,
            },
        )
        if load:
            self.reload()

    def reload(self) -> bool:
        """Reload both sources; ``False`` if either file was missing."""

        words_ok = self.service.reload_words()
        templates_ok = self.service.reload_templates()
        self._logger.info(
            "Data sources ready",
            context={
                "word_count": self.service.word_count(),
                "template_count": self.service.template_count(),
            },
        )
        return words_ok and templates_ok

    # Public API ------------------------------------------------------------
    def expand(self, acronym: str, times: Optional[int] = None) -> Union[str, List[str]]:
        return self.service.expand(acronym, times)

    def reload_words(self) -> bool:
        return self.service.reload_words()

    def reload_templates(self) -> bool:
        return self.service.reload_templates()

    def word_count(self) -> int:
        return self.service.word_count()

    def template_count(self) -> int:
        return self.service.template_count()

    def create_gradio_interface(self):
        from .ui.gradio import create_interface

        return create_interface(self.service)


def _should_share_interface() -> bool:
    """Return whether the Gradio UI should request a public share link."""

    normalized = os.environ.get(_SHARE_ENV, "").strip().lower()
    return normalized in {"1", "true", "yes", "on"}


def main() -> None:
    configure_logging()
    app = BackronymApp()
    interface = app.create_gradio_interface()
    interface.launch(
        server_name="0.0.0.0",
        server_port=7860,
        share=_should_share_interface(),
    )


__all__ = ["BackronymApp", "main"]
