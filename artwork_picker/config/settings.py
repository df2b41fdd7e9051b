"""
Artwork picker settings
Loads and validates settings from settings.yml using Pydantic
"""

import logging
from pathlib import Path
from typing import List, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger("ArtworkPicker.Settings")

DEFAULT_FIELDS = [
    "id",
    "title",
    "place_of_origin",
    "artist_display",
    "inscriptions",
    "date_start",
    "date_end",
]


class DisplaySettings(BaseModel):
    """Table display settings"""
    page_size: int = Field(
        default=12,
        ge=1,
        le=100,
        description="Number of rows per page (1-100), shared with the bulk select scan"
    )


class SourceSettings(BaseModel):
    """Remote collection settings"""
    kind: Literal["http", "websocket"] = Field(
        default="http",
        description="Transport used to fetch pages"
    )
    base_url: str = Field(default="https://api.artic.edu/api/v1")
    endpoint: str = Field(default="artworks")
    fields: List[str] = Field(default_factory=lambda: list(DEFAULT_FIELDS))
    timeout: float = Field(
        default=10.0,
        gt=0,
        description="Request timeout in seconds"
    )
    websocket_uri: str = Field(default="ws://localhost:8765")
    max_message_size: int = Field(default=5 * 1024 * 1024, ge=1024)

    @field_validator('base_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator('fields')
    @classmethod
    def require_id_field(cls, v: List[str]) -> List[str]:
        """The id column is always requested"""
        if "id" not in v:
            return ["id", *v]
        return v


class Settings(BaseModel):
    """Main settings model"""
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    source: SourceSettings = Field(default_factory=SourceSettings)


class SettingsManager:
    """Manages loading and accessing settings"""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize settings manager

        Args:
            config_path: Path to settings.yml file. Defaults to ./settings.yml
        """
        if config_path is None:
            config_path = Path("settings.yml")

        self.config_path = Path(config_path)
        self.settings = self._load_settings()

    def _load_settings(self) -> Settings:
        """Load and validate settings from YAML file"""
        if not self.config_path.exists():
            logger.info(f"Settings file not found at {self.config_path}, using defaults")
            return Settings()

        try:
            with open(self.config_path, "r") as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Error reading settings file {self.config_path}: {e}")
            return Settings()

        if not config_data:
            logger.info("Settings file is empty, using defaults")
            return Settings()

        try:
            settings = Settings(**config_data)
        except (ValidationError, TypeError) as e:
            logger.error(f"Invalid settings in {self.config_path}: {e}")
            return Settings()

        logger.info(f"Loaded settings from {self.config_path}")
        logger.debug(f"  - Page size: {settings.display.page_size}")
        return settings

    def reload(self):
        """Reload settings from file"""
        self.settings = self._load_settings()

    @property
    def page_size(self) -> int:
        return self.settings.display.page_size

    @property
    def source_kind(self) -> str:
        return self.settings.source.kind

    @property
    def base_url(self) -> str:
        return self.settings.source.base_url

    @property
    def timeout(self) -> float:
        return self.settings.source.timeout


# Global settings instance
_settings_manager: Optional[SettingsManager] = None


def get_settings() -> SettingsManager:
    """Get the global settings manager instance"""
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager
