"""User interface assembly for the Gradio front-end."""

from __future__ import annotations

from typing import Tuple

import gradio as gr

from poetry_assistant.core.errors import PoetryAssistantError

from ..services.assistant_service import PoetryAssistantService

_PROMPT = "Enter a word on the left and click **Find Rhymes**."


def create_interface(service: PoetryAssistantService) -> gr.Blocks:
    """Construct the Gradio Blocks UI around ``service``."""

    def search_interface(word: str) -> Tuple[str, str]:
        if not word or not word.strip():
            return "Please enter a word to find rhymes for.", ""
        try:
            result = service.lookup(word)
        except PoetryAssistantError as exc:
            return f"**Error:** {exc}", ""
        return service.format_result(result), service.format_stats()

    with gr.Blocks(title="Poetry Assistant") as demo:
        gr.Markdown(
            "# Poetry Assistant\n"
            "Rhymes ranked by quality, a syllable estimate and alliterative words."
        )
        with gr.Row():
            with gr.Column(scale=1):
                word_input = gr.Textbox(label="Word", placeholder="e.g. light")
                search_button = gr.Button("Find Rhymes", variant="primary")
            with gr.Column(scale=2):
                results_output = gr.Markdown(_PROMPT)
                stats_output = gr.Markdown("")

        search_button.click(
            search_interface,
            inputs=[word_input],
            outputs=[results_output, stats_output],
        )
        word_input.submit(
            search_interface,
            inputs=[word_input],
            outputs=[results_output, stats_output],
        )

    return demo


__all__ = ["create_interface"]
