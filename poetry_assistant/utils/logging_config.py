"""Root logging setup shared by the CLI and the Gradio app."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from poetry_assistant.config import AssistantSettings

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_PACKAGE_LOGGER = "poetry_assistant"
_CONFIGURED = False


def _resolve_level(level: str | int | None, default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        normalized = str(level).strip().upper()
        return getattr(logging, normalized, default)


def configure_logging(
    settings: Optional["AssistantSettings"] = None,
    *,
    level: Optional[str | int] = None,
    default_level: int = logging.INFO,
    force: bool = False,
) -> int:
    """Install a root handler once and set the package logger level.

    An explicit ``level`` wins over ``settings.log_level``, which wins over
    ``default_level``. The environment is read by :func:`load_settings`,
    not here. Returns the level applied to the ``poetry_assistant`` logger.
    """

    global _CONFIGURED

    requested = level if level is not None else getattr(settings, "log_level", None)
    resolved_level = _resolve_level(requested, default_level)

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    if _CONFIGURED and not force:
        return package_logger.getEffectiveLevel()

    logging.basicConfig(level=resolved_level, format=_DEFAULT_FORMAT)
    package_logger.setLevel(resolved_level)
    _CONFIGURED = True
    return resolved_level


__all__ = ["configure_logging"]
