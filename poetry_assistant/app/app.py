"""Application wiring for the Poetry Assistant."""

from __future__ import annotations

from typing import Optional

if __package__ in {None, ""}:
    import sys
    from pathlib import Path

    repo_root = Path(__file__).resolve().parents[2]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))

from poetry_assistant.config import AssistantSettings, load_settings
from poetry_assistant.core import QueryResult
from poetry_assistant.utils.logging_config import configure_logging
from poetry_assistant.utils.observability import get_logger
from poetry_assistant.utils.telemetry import StructuredTelemetry, TelemetryLogger

from poetry_assistant.app.data.wordlist import WordListLoader
from poetry_assistant.app.services.assistant_service import PoetryAssistantService


class PoetryAssistantApp:
    """High-level facade bundling settings, the word source and the service."""

    def __init__(
        self,
        wordlist_path: Optional[str] = None,
        *,
        settings: Optional[AssistantSettings] = None,
        loader: Optional[WordListLoader] = None,
        service: Optional[PoetryAssistantService] = None,
    ) -> None:
        self.settings = settings or load_settings()
        self._logger = get_logger(__name__).bind(component="app_facade")

        self.loader = loader or WordListLoader(wordlist_path or self.settings.wordlist_path)
        if service is None:
            service = PoetryAssistantService(
                settings=self.settings,
                loader=self.loader,
                telemetry=StructuredTelemetry(listeners=[TelemetryLogger()]),
            )
        self.service = service
        self._logger.info(
            "Application dependencies wired",
            context={"wordlist": str(self.loader.path)},
        )

    def lookup(self, word: str) -> QueryResult:
        return self.service.lookup(word)

    def create_gradio_interface(self):
        from poetry_assistant.app.ui.gradio import create_interface

        return create_interface(self.service)


def main() -> None:
    settings = load_settings()
    configure_logging(settings)

    app = PoetryAssistantApp(settings=settings)
    app.service.ensure_index()
    interface = app.create_gradio_interface()
    interface.launch(
        server_name="0.0.0.0",
        server_port=7860,
        share=settings.share,
    )


__all__ = ["PoetryAssistantApp", "main"]
