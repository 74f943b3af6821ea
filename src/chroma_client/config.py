import importlib.metadata
import os

from pydantic import Field, constr
from pydantic_settings import BaseSettings, SettingsConfigDict

# httpx default
DEFAULT_TIMEOUT = 5.0


class Config(BaseSettings):
    _env_file: str = os.getenv("ENV_FILE", ".env")

    CHROMA_ENV: constr(to_upper=True) = Field(default="DEV")
    VERSION: str = importlib.metadata.version("chroma-client")

    base_url: str = "http://localhost:8000"
    collection_name: str = "TestCollection"
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    log_level: constr(to_upper=True) = "INFO"

    model_config = SettingsConfigDict(
        env_file=_env_file,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def api_mode(self) -> str:
        return dict(self).get("CHROMA_ENV")
