"""Service configuration using Pydantic v2 Settings.

Values come from ``DOCFILL_*`` environment variables or a .env file and
are shared through ``get_settings()``.
"""

import codecs
import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

STORE_TYPES = ("sql", "memory")


class Settings(BaseSettings):
    """docfill settings.

    Example:
        ``DOCFILL_STORE_TYPE=memory DOCFILL_LOG_LEVEL=debug uvicorn ...``
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCFILL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Persistence
    database_url: str = Field(
        default="sqlite+aiosqlite:///./docfill.db",
        description="Async SQLAlchemy URL, e.g. sqlite+aiosqlite or postgresql+asyncpg.",
    )
    store_type: str = Field(
        default="sql",
        description="Document store: 'sql' or 'memory'.",
    )

    # Ingestion
    max_upload_bytes: int = Field(
        default=10 * 1024 * 1024,
        gt=0,
        description="Largest accepted source document, in bytes.",
    )

    # Blank spaces
    insert_width: int = Field(
        default=10,
        gt=0,
        description="data-length given to a blank space inserted at the caret.",
    )

    # Export
    export_encoding: str = Field(
        default="utf-8",
        description="Codec for .txt and .html exports.",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="DEBUG, INFO, WARNING or ERROR.",
    )
    log_dir: Path = Field(
        default=Path("./logs"),
        description="Where info.log and error.log are written.",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    @field_validator("store_type")
    @classmethod
    def validate_store_type(cls, v: str) -> str:
        v = v.lower()
        if v not in STORE_TYPES:
            raise ValueError(f"store_type must be one of {', '.join(STORE_TYPES)}, got {v!r}")
        return v

    @field_validator("export_encoding")
    @classmethod
    def validate_export_encoding(cls, v: str) -> str:
        """Reject codecs Python does not know."""
        try:
            return codecs.lookup(v).name
        except LookupError as e:
            raise ValueError(f"Unknown export encoding: {v}") from e

    @property
    def uses_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    def configure_logging(self) -> None:
        """Configure structlog on top of the stdlib logging level.

        DEBUG gets a readable console renderer; every other level renders
        JSON lines.
        """
        import structlog

        level = getattr(logging, self.log_level, logging.INFO)
        renderer = (
            structlog.dev.ConsoleRenderer()
            if level == logging.DEBUG
            else structlog.processors.JSONRenderer()
        )

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.format_exc_info,
                renderer,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(format="%(message)s", level=level)
        logger.debug(f"Settings loaded: store={self.store_type}, log_level={self.log_level}")


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.configure_logging()
    return _settings
