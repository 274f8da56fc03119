#!/usr/bin/env python3
"""Poetry Assistant Hugging Face Spaces entry point.

Builds the word index from ``POETRY_ASSISTANT_WORDLIST`` (or the bundled
demo list) and serves the Gradio interface.
"""

from poetry_assistant.app.app import main

if __name__ == "__main__":
    main()
