"""
Application configuration using Pydantic Settings.
Reads settings from environment variables.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from pathlib import Path


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # R-Forge theme assets (not derived from the request host)
    THEME_ROOT: str = "r-forge.r-project.org/themes/rforge/"

    # Project title fragment service
    FRAGMENT_PATH: str = "/export/projtitl.php"
    FRAGMENT_CHUNK_SIZE: int = 8192
    # None = block until the upstream answers
    FRAGMENT_TIMEOUT_SEC: Optional[float] = None

    # Appended after </html>, relative to the working directory
    TAIL_FILE: str = "stops.html"

    model_config = SettingsConfigDict(
        env_file=[
            str(Path(__file__).resolve().parents[2] / ".env"),
            str(Path(__file__).resolve().parents[1] / ".env"),
        ],
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def tail_file_path(self) -> Path:
        """Tail file path; relative paths resolve against the current directory."""
        return Path(self.TAIL_FILE)


# Create a singleton instance
settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the settings singleton."""
    return settings
