"""
Configuration management for the Bookshelf service
"""

from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class IdPolicy(str, Enum):
    """How the book store assigns ids to new records.

    ``SEQUENCE`` is the default and never reuses an id, so the first book added
    to a freshly seeded store gets id 3. Earlier versions of the service used the
    collection size instead, which gives that book id 2 and duplicates the
    second seed book; ``LENGTH`` keeps that behaviour for compatibility.
    """

    # Monotonic counter, never reuses an id
    SEQUENCE = "sequence"
    # Id equals the collection size at insertion time (historical behaviour)
    LENGTH = "length"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BOOKSHELF_",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["*"]

    # GraphQL
    graphiql: bool = True

    # Book store
    id_policy: IdPolicy = IdPolicy.SEQUENCE
    seed_books: bool = True

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = False
    log_level: str = "INFO"

    @property
    def server_url(self) -> str:
        host = "localhost" if self.api_host in ("0.0.0.0", "::") else self.api_host
        return f"http://{host}:{self.api_port}/"


# Global settings instance
settings = Settings()
