from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data paths relative to the package config directory
_CONFIG_DIR = Path(__file__).parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ANCESTRY_MAP_")

    log_json: bool = False
    log_level: str = "INFO"
    pipeline_config_path: Path = Path("config/pipeline.yaml")
    default_data_path: Path = _CONFIG_DIR / "sample_data.tsv"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def load_default_data(settings: Settings | None = None) -> str:
    """Return the bundled dataset shown before the user loads their own."""
    settings = settings or get_settings()
    return settings.default_data_path.read_text(encoding="utf-8")
