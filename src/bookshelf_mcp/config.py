"""Configuration management for the Bookshelf MCP Server.

Settings are loaded from the environment (``BOOKSHELF_`` prefix) or a
``.env`` file:
1. Protocol Metadata - server name and version sent during the handshake
2. Storage - SQLite database holding the ``btable`` book catalog
3. Inference - hosted text-generation endpoint used by ``searchBooks``
4. Transport - stdio or streamable HTTP
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_INFERENCE_MODEL = "@cf/meta/llama-3.3-70b-instruct-fp8-fast"


class ServerConfig(BaseSettings):
    """MCP Server configuration.

    The server needs:
    - Server name and version for the protocol handshake
    - A database holding the book catalog
    - Credentials for the inference endpoint
    - Transport configuration (stdio or streamable HTTP)
    """

    model_config = SettingsConfigDict(
        env_prefix="BOOKSHELF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    # === Server Metadata ===

    server_name: str = Field(
        default="bookshelf-search",
        description="MCP server name used in protocol handshake",
        pattern=r"^[a-z0-9-]+$",
    )

    server_version: str = Field(
        default="0.1.0",
        description="Server version for capability negotiation",
        pattern=r"^\d+\.\d+\.\d+(-[a-zA-Z0-9.]+)?$",
    )

    # === Database Configuration ===

    database_path: Path = Field(
        default=Path("data/books.db"),
        description="SQLite database file holding the btable catalog",
    )

    database_url: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL, overrides database_path when set",
    )

    # === Transport Configuration ===

    transport: str = Field(
        default="stdio",
        description="Primary transport mechanism",
        pattern=r"^(stdio|streamable_http)$",
    )

    http_host: str = Field(
        default="127.0.0.1",
        description="HTTP server host for the SSE and streamable HTTP endpoints",
    )

    http_port: int = Field(
        default=8080,
        description="HTTP server port for the SSE and streamable HTTP endpoints",
        ge=1024,
        le=65535,
    )

    # === Inference Configuration ===

    inference_base_url: str = Field(
        default="https://api.cloudflare.com/client/v4",
        description="Base URL of the Workers AI REST API",
    )

    inference_account_id: str | None = Field(
        default=None,
        description="Account identifier owning the Workers AI binding",
    )

    inference_api_token: str | None = Field(
        default=None,
        description="Bearer token for the inference endpoint",
        repr=False,
    )

    inference_model: str = Field(
        default=DEFAULT_INFERENCE_MODEL,
        description="Text-generation model used to summarise search results",
    )

    inference_timeout: float = Field(
        default=60.0,
        description="Seconds before the inference HTTP call gives up",
        gt=0,
    )

    # === Development Configuration ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging for protocol messages",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    # === Validation Methods ===

    @field_validator("database_path")
    @classmethod
    def validate_database_path(cls, v: Path) -> Path:
        """Resolve the database path and make sure its directory exists."""
        abs_path = v.absolute()
        abs_path.parent.mkdir(parents=True, exist_ok=True)

        if not abs_path.parent.is_dir():
            raise ValueError(f"Database directory {abs_path.parent} is not accessible")

        return abs_path

    @field_validator("server_name")
    @classmethod
    def validate_server_name(cls, v: str) -> str:
        """Validate server name meets MCP naming conventions."""
        if len(v) < 3:
            raise ValueError("Server name must be at least 3 characters")
        if len(v) > 50:
            raise ValueError("Server name must not exceed 50 characters")
        return v

    @field_validator("http_port")
    @classmethod
    def validate_http_port(cls, v: int) -> int:
        """Reject ports that usually belong to other services."""
        reserved_ports = {3306, 5432}
        if v in reserved_ports:
            raise ValueError(f"Port {v} is commonly reserved, choose another")
        return v

    # === Computed Properties ===

    @property
    def is_development(self) -> bool:
        return self.debug or self.log_level == "DEBUG"

    @property
    def server_info(self) -> dict[str, str]:
        """Server information logged at startup."""
        return {
            "name": self.server_name,
            "version": self.server_version,
            "transport": self.transport,
        }

    def get_database_url(self) -> str:
        """Get SQLAlchemy database URL."""
        if self.database_url:
            return self.database_url
        return f"sqlite:///{self.database_path}"


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: ServerConfig | None = None


def get_config() -> ServerConfig:
    """Get or create the global configuration instance.

    Only the entry point reads this; everything below the server receives
    its settings explicitly.
    """
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = ServerConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
