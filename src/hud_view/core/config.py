"""Application configuration via Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HudSettings(BaseSettings):
    """Construction options for a HUD panel."""

    model_config = SettingsConfigDict(env_prefix="HUD_")

    width: float = Field(default=320.0, gt=0)
    height: float = Field(default=360.0, gt=0)
    title: str = "HUD"
    include_plots: bool = True


class PlotSettings(BaseSettings):
    """Rolling history and chart drawing parameters."""

    model_config = SettingsConfigDict(env_prefix="PLOT_")

    history_length: int = Field(default=120, ge=2)
    line_thickness: int = Field(default=1, ge=1)
    margin: int = Field(default=10, ge=0)


class UISettings(BaseSettings):
    """Display window and overlay settings."""

    model_config = SettingsConfigDict(env_prefix="")

    display_width: int = Field(default=1280, alias="DISPLAY_WIDTH")
    display_height: int = Field(default=720, alias="DISPLAY_HEIGHT")
    panel_alpha: float = Field(default=0.85, ge=0.0, le=1.0, alias="PANEL_ALPHA")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"
    file: str | None = None


class Settings(BaseSettings):
    """Root settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    hud: HudSettings = Field(default_factory=HudSettings)
    plot: PlotSettings = Field(default_factory=PlotSettings)
    ui: UISettings = Field(default_factory=UISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings instance."""
    return Settings()
