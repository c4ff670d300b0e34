from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from typing import Literal
from pathlib import Path

# Get the directory where config.py is located
BASE_DIR = Path(__file__).resolve().parent.parent

class Settings(BaseSettings):
    model_config = ConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding='utf-8',
        extra='ignore'
    )

    azure_openai_endpoint: str = ""
    azure_openai_api_key: str = ""
    azure_openai_api_version: str = "2024-06-01"
    azure_openai_deployment_name: str = "gpt-4o-mini"
    temperature: float = 0.7

    # "snapshot" = single JSON call, "outline" = overview/areas/details chain
    generation_strategy: Literal["snapshot", "outline"] = "snapshot"
    content_area_count: int = 3

    log_level: str = "INFO"

settings = Settings()
