import os
import tempfile
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./inventory.db"
    LOCKS_DIR: Optional[str] = None
    LOCK_TIMEOUT_SECONDS: int = 10
    PHONE_NUM_MIN: int = 7
    CURRENCY_SYMBOL: str = "$"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def locks_dir(self) -> str:
        return self.LOCKS_DIR or os.path.join(tempfile.gettempdir(), "inventory_locks")


settings = Settings()
