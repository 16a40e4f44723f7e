from pathlib import Path

from kungfu import cache
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    knowledge_base_dir: Path = Field(
        default=Path("knowledgeBase"),
        alias="KNOWLEDGE_BASE_DIR",
        description="Directory holding the markdown documents",
    )
    log_level: str = Field(
        default="WARNING",
        alias="LOG_LEVEL",
        description="Root log level for the CLI (DEBUG, INFO, WARNING, ...)",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v: str | None) -> str:
        if not v:
            return "WARNING"
        return str(v).strip().upper()


@cache
def get_settings() -> Settings:
    return Settings()
