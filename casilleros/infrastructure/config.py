from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "sqlite+pysqlite:///./casilleros.db"
    app_name: str = "AEIS - Gestión de Casilleros"
    version: str = "2.0.0"
    environment: str = "development"
    log_level: str | None = None
    host: str = "0.0.0.0"
    port: int = 4000
    cors_origins: list[str] = ["*"]
    static_dir: Path = Path("public")
    max_rows: int = 10
    max_columns: int = 15
