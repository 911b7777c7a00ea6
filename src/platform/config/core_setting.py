from pathlib import Path
from typing import Optional

from pydantic import SecretStr, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Venue Map Inventory'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Enables debug IO logs and the rotating log file

    # PostgreSQL
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'venue_inventory'
    POSTGRES_PORT: int = 5432
    DATABASE_URL_OVERRIDE: Optional[str] = None  # Any SQLAlchemy async URL, e.g. sqlite+aiosqlite

    # Connection pool (ignored for sqlite)
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    # Text interpretation oracle (OpenAI-compatible chat completions)
    ORACLE_API_URL: str = 'https://api.openai.com/v1/chat/completions'
    ORACLE_API_KEY: SecretStr = SecretStr('')  # Empty key disables the oracle
    ORACLE_MODEL: str = 'gpt-4o-mini'
    ORACLE_TIMEOUT_SECONDS: float = 20.0
    ORACLE_MAX_CONTENT_CHARS: int = 50000  # Documents are truncated before upload

    @property
    def ORACLE_ENABLED(self) -> bool:
        return bool(self.ORACLE_API_KEY.get_secret_value())

    # Section type bands for numbered sections (upper bounds, exclusive)
    SECTION_FLOOR_BELOW: int = 100
    SECTION_LOWER_BELOW: int = 200
    SECTION_PREMIUM_BELOW: int = 300

    @field_validator('SECTION_PREMIUM_BELOW')
    @classmethod
    def validate_section_bands(cls, v: int, info: ValidationInfo) -> int:
        lower_below = info.data.get('SECTION_LOWER_BELOW', 0)
        floor_below = info.data.get('SECTION_FLOOR_BELOW', 0)
        if not floor_below <= lower_below <= v:
            raise ValueError('Section bands must be ascending: floor <= lower <= premium')
        return v

    # Inventory synthesis
    DEFAULT_SECTION_CAPACITY: int = 100
    SERVICE_FEE_RATE: float = 0.15
    LISTING_PRICE_FLOOR: float = 12.0
    LISTING_PRICE_CAP: float = 1200.0
    SYNTHESIS_RANDOM_SEED: Optional[int] = None  # Fix for reproducible listings
    JITTER_SEED: str = 'section-jitter-v1'

    # Batch ingestion
    MAX_REPORTED_ERRORS: int = 20


settings = Settings()  # type: ignore
