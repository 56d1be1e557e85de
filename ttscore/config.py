"""Application configuration with validation."""
from typing import Literal, Optional
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from the environment and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Table Tennis Skill Test Scorer"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Localization
    DEFAULT_LOCALE: Literal["id", "en"] = "id"

    # Document export
    EXPORT_LAYOUT_WIDTH_PX: int = Field(
        default=1024,
        ge=320,
        le=4096,
        description="Reference (desktop) layout width used for every export",
    )
    EXPORT_SCALE: int = Field(default=2, ge=1, le=4, description="Supersampling factor")
    EXPORT_BACKGROUND: str = Field(default="#ffffff", pattern=r"^#[0-9a-fA-F]{6}$")
    EXPORT_TOP_PADDING_MM: float = Field(default=20.0, ge=0, le=100)
    EXPORT_FILENAME_PREFIX: str = "Hasil-Tes-Tenis-Meja"
    EXPORT_PAGE_MODE: Literal["paginate", "single_page"] = "paginate"
    EXPORT_FONT_PATH: Optional[str] = Field(
        default=None,
        description="TrueType font for the rasterizer; Pillow's bundled font when unset",
    )

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production has safe settings."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
