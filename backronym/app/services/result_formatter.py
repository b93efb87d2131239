"""Markdown rendering for expansion results."""

from __future__ import annotations

from html import escape
from typing import Sequence


class ExpansionResultFormatter:
    """Render generated phrases for the web UI.

    Phrases are shown as built. Filler prepositions and template literals
    stay lower-case, so the acronym reads off the capitalised words.
    """

    def format_results(self, acronym: str, letters: str, phrases: Sequence[str]) -> str:
        if not letters:
            return f"❌ '{escape(acronym or '')}' contains no letters to expand."

        filled = [phrase for phrase in phrases if phrase]
        if not filled:
            return f"❌ No backronym could be built for **{escape(letters.upper())}**."

        lines = [f"### {escape(letters.upper())}", ""]
        lines.extend(f"{index}. {escape(phrase)}" for index, phrase in enumerate(filled, start=1))
        return "\n".join(lines)

    def format_diagnostics(self, word_count: int, template_count: int, max_length: int) -> str:
        return (
            f"**Words:** {word_count} · **Templates:** {template_count} · "
            f"**Longest template:** {max_length} letters"
        )


__all__ = ["ExpansionResultFormatter"]
