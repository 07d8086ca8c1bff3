"""Configuration settings."""

from pathlib import Path
from typing import Literal

from pydantic import ConfigDict
from pydantic_settings import BaseSettings

EnvironmentType = Literal["development", "production", "test"]


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = ConfigDict(
        env_file=[".env", "../.env"],
        extra="ignore",
    )

    environment: EnvironmentType = "development"
    log_level: str = "INFO"

    # SQLite
    database_path: str = "data/vidshare.db"

    # CORS (comma-separated list of allowed origins)
    frontend_url: str = "http://localhost:3000"

    @property
    def cors_origins(self) -> list[str]:
        """Split frontend_url into individual origins."""
        return [url.strip() for url in self.frontend_url.split(",") if url.strip()]

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def app_version(self) -> str:
        """Read app version from pyproject.toml."""
        import re

        pyproject = Path(__file__).parent.parent / "pyproject.toml"
        try:
            text = pyproject.read_text(encoding="utf-8")
        except FileNotFoundError:
            return "unknown"
        match = re.search(r'(?m)^version\s*=\s*"([^"]+)"', text)
        return match.group(1) if match else "unknown"


settings = Settings()


def get_settings() -> Settings:
    """Get application settings (for dependency injection)."""
    return settings
