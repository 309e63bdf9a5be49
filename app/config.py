from pydantic_settings import BaseSettings
from typing import Optional
from pydantic import Field

class Settings(BaseSettings):
    DATABASE_URL: str = Field("sqlite+aiosqlite:///./habits.db")
    SQLALCHEMY_DATABASE_URL: Optional[str] = None
    SQL_ECHO: bool = Field(False)

    LOG_LEVEL: str = Field("INFO")

    # Seed sample habits + 30 days of history on startup when the registry is empty
    SEED_DEMO_DATA: bool = Field(False)

    model_config = {
        "env_file": ".env",
        "extra": "allow",
    }

    @property
    def effective_database_url(self) -> str:
        """
        Returns the URL the async engine should use:
          - SQLALCHEMY_DATABASE_URL wins over DATABASE_URL
          - plain postgresql:// URLs are switched to the asyncpg driver
        """
        url = self.SQLALCHEMY_DATABASE_URL or self.DATABASE_URL
        if url.startswith("postgresql://") and "+asyncpg" not in url:
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

settings = Settings()
