# src/elm_review/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="ELM_REVIEW_")

    # Project
    default_base_path: str = "."
    config_path: str | None = None

    # Rendering
    font_family: str = "monospace"

    log_level: str = "INFO"
