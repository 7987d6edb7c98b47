from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_snapshot_path() -> str:
    """Default location of the local highlights snapshot (next to the project root)."""
    return str((Path(__file__).parent.parent.parent / "highlights_snapshot.json").resolve())


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="HIGHLIGHTS_LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="HIGHLIGHTS_LOG_FILE")
    log_rotation: str = Field(default="10 MB", validation_alias="HIGHLIGHTS_LOG_ROTATION")
    log_retention: str = Field(default="7 days", validation_alias="HIGHLIGHTS_LOG_RETENTION")
    default_title: str = Field(
        default="Especiais do Dia",
        validation_alias="HIGHLIGHTS_DEFAULT_TITLE",
        description="Title used when the highlights configuration is created or reset",
    )
    default_description: str = Field(
        default="Ofertas especiais selecionadas para cada dia da semana",
        validation_alias="HIGHLIGHTS_DEFAULT_DESCRIPTION",
    )
    currency_symbol: str = Field(default="R$", validation_alias="HIGHLIGHTS_CURRENCY_SYMBOL")
    default_price_range_max: float = Field(
        default=100.0,
        validation_alias="HIGHLIGHTS_DEFAULT_PRICE_RANGE_MAX",
        description="Upper bound of the catalog price filter after clear_filters()",
    )
    snapshot_path: str = Field(
        default_factory=get_snapshot_path,
        validation_alias="HIGHLIGHTS_SNAPSHOT_PATH",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid HIGHLIGHTS_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("default_price_range_max")
    @classmethod
    def validate_price_range_max(cls, value: float) -> float:
        """Reject a negative price filter ceiling."""
        if value < 0:
            raise ValueError(f"default_price_range_max must be >= 0, got {value}")
        return value

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
