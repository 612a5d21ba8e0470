from datetime import date
from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    ENV: str = "local"

    # Storage: any SQLAlchemy URL; defaults to a SQLite file under DATA_DIR
    DATABASE_URL: str | None = None
    DATA_DIR: Path = Path("./data")
    AUTO_CREATE_SCHEMA: bool = True     # off when alembic owns the schema
    SEED_BASELINE: bool = True          # seed an empty store with the baseline log

    # Profile carried in exports
    PROFILE_NAME: str = "Brian"
    PROFILE_DEVICE: str = "phone-only"

    # HTTP
    ALLOW_ORIGINS: str = "*"
    API_VERSION: str = "dev"

    # Pin "today" for analytics (e.g. demos); unset = local calendar date
    TODAY: date | None = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite:///{self.DATA_DIR / 'liftlog.db'}"

    def today(self) -> date:
        return self.TODAY or date.today()

@lru_cache
def get_settings() -> Settings:
    return Settings()
