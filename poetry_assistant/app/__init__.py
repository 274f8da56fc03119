"""Application layer: word source, service, CLI and Gradio UI."""
