"""ContactDesk configuration via pydantic-settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class ContactDeskSettings(BaseSettings):
    environment: str = "development"
    app_title: str = "ContactDesk"
    # "memory" keeps everything in process; "database" uses database_url
    storage_backend: str = "memory"
    database_url: str = "sqlite+aiosqlite:///contactdesk.db"
    echo_sql: bool = False
    log_level: str = "INFO"

    model_config = {"env_prefix": "CONTACTDESK_", "env_file": ".env", "extra": "ignore"}

    @property
    def uses_database(self) -> bool:
        return self.storage_backend.strip().lower() in {"database", "db", "sql"}

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() in {"prod", "production"}


settings = ContactDeskSettings()
