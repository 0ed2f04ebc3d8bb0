from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str
    # Non-pooled URL for Alembic DDL; migrations fall back to database_url.
    database_url_direct: str | None = None

    # App
    app_name: str = "Demo Admin"
    log_level: str = "INFO"

    # Local file storage root; uploaded images live under ``<storage_path>/public``.
    storage_path: Path = Path("storage/app")
    # Base URL of the admin panel, used to build links inside notifications.
    admin_url: str = "http://localhost:8000/admin"

    # Seeding
    seed_admin_name: str = "Demo User"
    seed_admin_email: str = "admin@filamentphp.com"
    seed_admin_password: str = "demo.Filament@2021!"
    seed_random_seed: int | None = None


settings = Settings()
