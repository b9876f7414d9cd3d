"""Dependency injection for FastAPI: shared Settings and ConfigLoader."""

from __future__ import annotations

from clashyaml.parser.loader import ConfigLoader
from clashyaml.settings import Settings

_settings: Settings | None = None
_loader: ConfigLoader | None = None


def init_dependencies(settings: Settings) -> None:
    """Set the global settings and loader (called from ``create_app``)."""
    global _settings, _loader  # noqa: PLW0603
    _settings = settings
    _loader = settings.build_loader()


def get_settings() -> Settings:
    """FastAPI ``Depends`` provider for Settings."""
    if _settings is None:
        raise RuntimeError("Settings not initialised — call init_dependencies() first")
    return _settings


def get_loader() -> ConfigLoader:
    """FastAPI ``Depends`` provider for the shared ConfigLoader."""
    if _loader is None:
        raise RuntimeError("ConfigLoader not initialised — call init_dependencies() first")
    return _loader


def reset_dependencies() -> None:
    """Clear the globals (for tests)."""
    global _settings, _loader  # noqa: PLW0603
    _settings = None
    _loader = None
