"""Application configuration."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from environment variables."""

    app_name: str = "Rentfeed API"
    debug: bool = False
    log_level: str | None = None
    api_prefix: str = "/api"
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"
    database_url: str = "sqlite:///./data/rentfeed.db"  # Use DATABASE_URL env for PostgreSQL
    jwt_secret: str = "dev-secret-change-me"
    jwt_algorithm: str = "HS256"
    access_token_minutes: int = 15
    auth_cookie_name: str = "token"
    cookie_secure: bool = False
    password_min_length: int = 8
    # Uploaded rental photos
    upload_dir: str = "./uploads"
    upload_url_prefix: str = "/uploads"
    max_upload_bytes: int = 5 * 1024 * 1024
    max_images_per_rental: int = 6
    # Feed paging
    feed_default_limit: int = 8
    feed_max_limit: int = 50
    feed_comment_preview: int = 5

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
