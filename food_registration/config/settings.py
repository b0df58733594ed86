from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database - async driver URL (aiosqlite locally, asyncpg in production)
    database_url: str = "sqlite+aiosqlite:///./food_registration.db"

    # Application
    debug: bool = False

    # Uploaded images are written to <web_root>/<images_dir> and served from /<images_dir>
    web_root: str = "static"
    images_dir: str = "images"
    max_image_bytes: int = 5 * 1024 * 1024
    allowed_image_extensions: list[str] = [".jpg", ".jpeg", ".png", ".gif", ".webp"]

    # Identity - tokens are issued by the external identity provider
    # Generate with: python -c "import secrets; print(secrets.token_urlsafe(32))"
    jwt_secret: str = "change-me"
    jwt_algorithm: str = "HS256"
    jwt_audience: str = "authenticated"

    # Signs the session cookie that carries flash messages between redirects
    session_secret: str = "change-me-too"

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite."""
        return self.database_url.startswith("sqlite")


settings = Settings()
