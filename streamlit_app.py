"""Streamlit front-end for the Poetry Assistant."""

from __future__ import annotations

import streamlit as st

from poetry_assistant.app.app import PoetryAssistantApp
from poetry_assistant.core.errors import PoetryAssistantError


@st.cache_resource(show_spinner=False)
def _load_app() -> PoetryAssistantApp:
    """Build the index once per server process and share it across sessions."""

    app = PoetryAssistantApp()
    app.service.ensure_index()
    return app


def main() -> None:
    """Render the interactive Streamlit experience."""

    st.set_page_config(page_title="Poetry Assistant", layout="centered")

    try:
        app = _load_app()
    except PoetryAssistantError as exc:
        st.error(f"The word index could not be built: {exc}")
        return
    service = app.service

    st.markdown("## Poetry Assistant")
    st.caption("Rhymes ranked by quality, a syllable estimate and alliterative words.")

    with st.form("rhyme_search"):
        word = st.text_input("Word", help="Enter a single word, e.g. light or phone.")
        show_stats = st.checkbox("Show index statistics")
        submitted = st.form_submit_button("Find rhymes")

    if not submitted:
        st.info("Start by entering a word and click **Find rhymes**.")
        return

    if not word or not word.strip():
        st.info("Please enter a word to find rhymes for.")
        return

    with st.spinner("Looking up rhymes..."):
        result = service.lookup(word)

    st.markdown(service.format_result(result))
    if show_stats:
        st.markdown(service.format_stats())


if __name__ == "__main__":
    main()
