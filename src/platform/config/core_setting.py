from pathlib import Path
from typing import List, Optional

from pydantic import SecretStr, field_validator
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

    PROJECT_NAME: str = 'Ticketify'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Database
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'ticketify'
    POSTGRES_PORT: int = 5432

    # Full async URL override, e.g. sqlite+aiosqlite:///./ticketify.db
    DATABASE_URL: Optional[str] = None

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    # Connection pool
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True
    DB_CREATE_TABLES_ON_STARTUP: bool = False

    # SQLite writers wait this long (seconds) for the database lock
    SQLITE_BUSY_TIMEOUT: float = 30.0

    # Ordering
    QR_CODE_LENGTH: int = 20
    ORDER_CREATE_MAX_ATTEMPTS: int = 3
    MAX_LINE_ITEMS_PER_ORDER: int = 20
    MAX_QUANTITY_PER_LINE_ITEM: int = 50

    @field_validator('QR_CODE_LENGTH')
    @classmethod
    def validate_qr_code_length(cls, v: int) -> int:
        if not 10 <= v <= 255:
            raise ValueError('QR_CODE_LENGTH must be between 10 and 255')
        return v

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []


settings = Settings()  # type: ignore
