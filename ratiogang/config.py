from functools import lru_cache
from typing import Optional
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ratiogang.errors import ConfigError, EnvMissingError
from ratiogang.schemas import Credentials

APP_NAME = "ratio-gang-cli"
APP_VERSION = "0.2.0"

class Settings(BaseSettings):
    # API Keys
    POLYGON_KEY: str = ""
    COINGECKO_KEY: str = ""

    # Endpoints
    POLYGON_BASE_URL: str = "https://api.polygon.io"
    COINGECKO_BASE_URL: str = "https://api.coingecko.com"
    REQUEST_TIMEOUT: float = Field(30.0, gt=0, allow_inf_nan=False)  # seconds, per request

    # Defaults
    GOLD_ABOVE_GROUND_TONNES: float = Field(212582.0, gt=0, allow_inf_nan=False)
    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

def load_settings() -> Settings:
    """
    Read settings from the environment and .env, reporting malformed
    overrides as a ConfigError instead of a pydantic traceback.
    """
    try:
        return Settings()
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigError(problems) from e

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()

# Checked in this order so the reported variable is deterministic
REQUIRED_KEYS = ("POLYGON_KEY", "COINGECKO_KEY")

def load_credentials(settings: Optional[Settings] = None) -> Credentials:
    """
    Resolve both provider keys, failing on the first one that is unset or empty.
    """
    if settings is None:
        settings = load_settings()

    for name in REQUIRED_KEYS:
        if not getattr(settings, name):
            raise EnvMissingError(name)

    return Credentials(
        polygon_key=settings.POLYGON_KEY,
        coingecko_key=settings.COINGECKO_KEY,
    )
