"""Runner configuration settings."""

from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runner configuration loaded from environment variables."""

    # Notion
    notion_api_key: str
    notion_database_id: str
    notion_version: str = "2022-06-28"
    notion_status_property: str = "Status"
    notion_status_value: str = "Ready to Import"

    # AnkiConnect
    anki_connect_url: str = "http://localhost:8765"
    anki_deck_name: str = "Notion Import"
    anki_model_name: str = "Basic"
    # Comma-separated in the environment: ANKI_TAGS=notion,chinese
    anki_tags: Annotated[list[str], NoDecode] = Field(default_factory=list)

    # Parsing
    # Only read question/answer markers inside fenced code blocks
    fence_only: bool = False

    # Write a deck file instead of posting to AnkiConnect when set
    export_path: str | None = None
    export_format: str = "apkg"

    # HTTP
    request_timeout: float = 30.0
    max_retries: int = 3

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @field_validator("anki_tags", mode="before")
    @classmethod
    def split_tags(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [tag.strip() for tag in value.split(",") if tag.strip()]
        return value


def load_settings(**overrides) -> Settings:
    """Load settings from the environment, applying explicit overrides."""
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
