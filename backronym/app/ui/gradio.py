"""User interface assembly for the Gradio front-end."""

from __future__ import annotations

from typing import Tuple

import gradio as gr

from backronym.core import BackronymError, sanitize_acronym

from ..services.expansion_service import BackronymService
from ..services.result_formatter import ExpansionResultFormatter


def create_interface(service: BackronymService) -> gr.Blocks:
    """Construct the interactive Gradio Blocks UI."""

    formatter = ExpansionResultFormatter()

    def _diagnostics() -> str:
        return formatter.format_diagnostics(
            service.word_count(),
            service.template_count(),
            service.templates.max_length(),
        )

    def expand_interface(acronym: str, how_many: int) -> Tuple[str, str]:
        letters = sanitize_acronym(acronym)
        try:
            phrases = service.expand(acronym, times=int(how_many))
        except BackronymError as exc:
            return f"Expansion failed: {exc}", _diagnostics()
        return formatter.format_results(acronym, letters, phrases), _diagnostics()

    def reload_interface() -> str:
        try:
            words_ok = service.reload_words()
            templates_ok = service.reload_templates()
        except BackronymError as exc:
            return f"Reload failed: {exc}"
        if not (words_ok and templates_ok):
            return "Reload skipped for a missing source. " + _diagnostics()
        return "Reloaded. " + _diagnostics()

    with gr.Blocks(title="Backronym Generator") as interface:
        gr.Markdown(
            "## Backronym Generator\n"
            "Type an acronym and get a phrase whose words start with its letters."
        )
        with gr.Row():
            with gr.Column():
                acronym_input = gr.Textbox(
                    label="Acronym",
                    placeholder="e.g., NASA, CEO, FAQ",
                    lines=1,
                )
                how_many = gr.Slider(
                    minimum=1,
                    maximum=20,
                    value=5,
                    step=1,
                    label="How many phrases",
                )
                expand_btn = gr.Button("Expand", variant="primary")
                reload_btn = gr.Button("Reload word list and templates")
            with gr.Column():
                results_md = gr.Markdown(value="Enter an acronym and click **Expand**.")
                status_md = gr.Markdown(value=_diagnostics())

        expand_btn.click(
            fn=expand_interface,
            inputs=[acronym_input, how_many],
            outputs=[results_md, status_md],
        )
        acronym_input.submit(
            fn=expand_interface,
            inputs=[acronym_input, how_many],
            outputs=[results_md, status_md],
        )
        reload_btn.click(fn=reload_interface, inputs=[], outputs=[status_md])

    return interface


__all__ = ["create_interface"]
