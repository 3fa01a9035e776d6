# gohome/core/config.py
from pathlib import Path

from pydantic import validator
from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    PROJECT_NAME: str = "GoHome"

    # Server settings
    PORT: int = 8080

    # Where the bookmarks ConfigMap lives
    NAMESPACE: str = "default"
    CONFIG_MAP_NAME: str = "gohome-config"

    # Upper bound for the cluster calls made while serving one page, in seconds
    REQUEST_TIMEOUT: float = 30.0

    LOG_LEVEL: str = "INFO"

    # Bundled with the package unless overridden
    TEMPLATES_DIR: str = str(PACKAGE_DIR / "templates")
    STATIC_DIR: str = str(PACKAGE_DIR / "static")

    @validator("LOG_LEVEL")
    def normalize_log_level(cls, v):
        """Accept lower-case level names from the environment."""
        return v.upper()

    class Config:
        case_sensitive = True
        env_file = ".env"


settings = Settings()
