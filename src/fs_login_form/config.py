from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings using Pydantic BaseSettings for robust configuration management."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"  # Allow extra fields in environment without validation errors
    )

    API_BASE_URL: str = "http://localhost:5050/api"
    LOGIN_PATH: str = "/login"
    ACCESS_TOKEN_KEY: str = "accessToken"
    HOME_PATH: str = "/"
    LOGIN_ROUTE: str = "/login"
    PASSWORD_MIN_LENGTH: int = Field(default=5, ge=1)
    LOG_LEVEL: str = "INFO"

    # Navigator paths mapped to page scripts, relative to frontend/app.py
    PAGE_ROUTES: dict[str, str] = Field(
        default_factory=lambda: {
            "/": "pages/home_page.py",
            "/login": "pages/login_page.py",
        }
    )

    @property
    def login_url(self) -> str:
        return f"{self.API_BASE_URL.rstrip('/')}{self.LOGIN_PATH}"


# Module-level settings instance
settings = Settings()
