"""Application settings: Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if specified)
  2. Environment variables (HISTORIFY_ prefix)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class ServerSettings(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(default=8080, description="Server port")
    workers: int = Field(default=1, description="Number of worker processes")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")


class SearchSettings(BaseModel):
    """Search behavior configuration.

    The boosts and fuzzy distance feed the relevance scorer and the fuzzy
    strategy; ``max_limit`` caps the page size a caller may request.
    """

    default_limit: int = Field(default=50, ge=0, description="Page size when a request does not set one")
    max_limit: int = Field(default=500, ge=1, description="Largest page size a request may ask for")
    fuzzy_max_distance: int = Field(default=2, ge=0, description="Maximum edit distance for fuzzy matches")
    filename_boost: float = Field(default=0.5, description="Score added per query term found in the file name")
    phrase_boost: float = Field(default=1.0, description="Score added when the raw query appears verbatim")
    suggestion_limit: int = Field(default=5, ge=1, description="Default number of autocomplete suggestions")
    highlight_class: str = Field(default="highlight", description="CSS class used by the highlighter")


class AnalyticsSettings(BaseModel):
    """Query-history and analytics configuration."""

    top_queries: int = Field(default=10, ge=1, description="Number of top queries reported")
    trend_window_days: int = Field(default=30, ge=1, description="Days of history included in search trends")
    history_size: int = Field(default=1000, ge=1, description="Maximum number of recorded searches kept")


class DocumentSettings(BaseModel):
    """Document collection configuration."""

    path: Path | None = Field(default=None, description="Optional JSON file used to seed the collection")


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the HISTORIFY_ prefix.
    Nested settings use double underscores: HISTORIFY_SERVER__PORT=9090

    Example:
        HISTORIFY_SERVER__PORT=9090
        HISTORIFY_SEARCH__MAX_LIMIT=200
        HISTORIFY_DOCUMENTS__PATH=./documents.json
    """

    model_config = {
        "env_prefix": "HISTORIFY_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    app_name: str = Field(default="Historify", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    server: ServerSettings = Field(default_factory=ServerSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    analytics: AnalyticsSettings = Field(default_factory=AnalyticsSettings)
    documents: DocumentSettings = Field(default_factory=DocumentSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Keys set in the YAML file win over environment variables; anything
        the file leaves out is still read from the environment.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
