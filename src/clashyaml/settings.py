"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from clashyaml.parser.loader import MAX_DOCUMENT_SIZE, MAX_NODE_COUNT, ConfigLoader


class Settings(BaseSettings):
    """Configuration for the clashyaml servers and CLI.

    Values are read from environment variables and from a ``.env`` file
    in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Shared
    log_level: str = "INFO"
    offset_unit: Literal["utf16", "codepoint"] = "utf16"

    # Parsing limits
    max_document_size: int = MAX_DOCUMENT_SIZE
    max_node_count: int = MAX_NODE_COUNT

    # REST API
    api_server_host: str = "localhost"
    api_server_port: int = 8000
    port: int | None = None  # Cloud Run injects PORT; takes precedence over api_server_port

    @property
    def effective_port(self) -> int:
        """Return the port to listen on (Cloud Run PORT takes precedence)."""
        return self.port if self.port is not None else self.api_server_port

    # MCP
    mcp_transport: Literal["stdio", "http", "sse"] = "stdio"
    mcp_server_host: str = "localhost"
    mcp_server_port: int = 9000

    def build_loader(self) -> ConfigLoader:
        """Return a ``ConfigLoader`` honouring the configured limits."""
        return ConfigLoader(
            max_document_size=self.max_document_size,
            max_node_count=self.max_node_count,
        )
