"""
Configuration management for the curve-series pipeline.

Uses pydantic-settings for environment-based configuration with validation.
All settings can be overridden via environment variables with CURVE_SERIES_ prefix.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class ExportFormat(str, Enum):
    """Supported tabular export formats."""

    XLSX = "xlsx"
    CSV = "csv"
    JSON = "json"


DEFAULT_CURVE_COLORS = [
    "hsl(175, 70%, 50%)",  # cyan
    "hsl(280, 70%, 60%)",  # purple
    "hsl(35, 90%, 55%)",  # orange
    "hsl(340, 70%, 55%)",  # pink
    "hsl(140, 60%, 50%)",  # green
]


class CaptureSettings(BaseSettings):
    """Settings for the drawing surface that feeds point capture."""

    model_config = SettingsConfigDict(env_prefix="CURVE_SERIES_CAPTURE_")

    # Canvas size in internal pixels
    canvas_width: float = Field(default=800.0, gt=0)
    canvas_height: float = Field(default=500.0, gt=0)

    # Margins around the inner drawing rectangle
    margin_top: float = Field(default=40.0, ge=0)
    margin_right: float = Field(default=40.0, ge=0)
    margin_bottom: float = Field(default=60.0, ge=0)
    margin_left: float = Field(default=80.0, ge=0)


class AxisSettings(BaseSettings):
    """Default value axis applied to new workspaces."""

    model_config = SettingsConfigDict(env_prefix="CURVE_SERIES_AXIS_")

    y_min: float = Field(default=0.0)
    y_max: float = Field(default=100.0)


class CurveSettings(BaseSettings):
    """Settings for the curve collection."""

    model_config = SettingsConfigDict(env_prefix="CURVE_SERIES_CURVE_")

    max_curves: int = Field(default=5, ge=1, le=50)
    default_roughness: int = Field(default=0, ge=0, le=100)
    name_template: str = Field(default="Curve {n}")
    colors: list[str] = Field(default_factory=lambda: list(DEFAULT_CURVE_COLORS), min_length=1)


class ExportSettings(BaseSettings):
    """Settings for time series generation and file export."""

    model_config = SettingsConfigDict(env_prefix="CURVE_SERIES_EXPORT_")

    # Time grid
    window_months: int = Field(default=6, ge=1, le=120)
    date_column: str = Field(default="Date", min_length=1)
    date_format: str = Field(default="%Y-%m-%d")

    # Value reconstruction
    decimal_places: int = Field(default=2, ge=0, le=10)
    single_point_tolerance: float = Field(default=0.01, gt=0.0, le=0.5)
    max_variation_fraction: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Jitter bound as a fraction of the axis range at roughness 100",
    )

    # Output files
    default_format: ExportFormat = Field(default=ExportFormat.XLSX)
    filename_prefix: str = Field(default="curve_data", min_length=1)
    timestamp_format: str = Field(default="%Y%m%d_%H%M%S")
    sheet_name: str = Field(default="Data", min_length=1, max_length=31)


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings."""

    model_config = SettingsConfigDict(
        env_prefix="CURVE_SERIES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application info
    app_name: str = Field(default="Curve Data Generator")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Output directory
    exports_dir: Path = Field(default=Path.cwd())

    # Subsettings
    capture: CaptureSettings = Field(default_factory=CaptureSettings)
    axis: AxisSettings = Field(default_factory=AxisSettings)
    curves: CurveSettings = Field(default_factory=CurveSettings)
    export: ExportSettings = Field(default_factory=ExportSettings)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case and check the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    def ensure_directories(self) -> None:
        """Create the export directory if it doesn't exist."""
        self.exports_dir.mkdir(parents=True, exist_ok=True)


# Global settings instance - lazy loaded
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if necessary."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(settings: Optional[Settings] = None, **kwargs) -> Settings:
    """
    Configure the global settings.

    Args:
        settings: Optional Settings instance to use directly
        **kwargs: Settings overrides

    Returns:
        The configured Settings instance
    """
    global _settings
    if settings is not None:
        _settings = settings
    elif kwargs:
        _settings = Settings(**kwargs)
    else:
        _settings = Settings()
    return _settings
