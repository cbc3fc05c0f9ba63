# core/config.py
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from dotenv import dotenv_values

from .errors import ConfigError
from .filters import parse_query_urls
from .logger import get_logger

logger = get_logger(__name__)

ENV_FILE = os.getenv("ENV_FILE", ".env")


@dataclass(frozen=True)
class Settings:
    query_url: str
    threshold_price: float
    recipient_email: str = ""
    from_gmail: str = ""
    from_gmail_app_password: str = field(default="", repr=False)
    request_timeout: Optional[float] = None

    @property
    def query_urls(self) -> List[str]:
        return parse_query_urls(self.query_url)


def _parse_float(name: str, raw: str) -> float:
    # float() alone would accept " 50 " and "1_000"
    if raw != raw.strip() or "_" in raw:
        raise ConfigError(f"{name} must be a number, got {raw!r}")
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None


def _read_env_file(env_file: str) -> Dict[str, str]:
    if not os.path.isfile(env_file):
        raise ConfigError(f"Env file not found at {env_file}")
    try:
        values = dotenv_values(env_file)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read env file {env_file}: {e}") from e
    return {k: v for k, v in values.items() if v is not None}


def load_settings(env_file: str = ENV_FILE) -> Settings:
    """
    Build Settings from the env file, with the process environment taking
    precedence over values in the file. The file is read, not exported, so
    LOG_* values in it have no effect; logging reads the process environment.
    """
    values = {**_read_env_file(env_file), **os.environ}

    query_url = values.get("QUERY_URL", "")
    if not query_url.strip():
        raise ConfigError("QUERY_URL is empty; at least one query URL is required.")

    threshold_price = _parse_float("THRESHOLD_PRICE", values.get("THRESHOLD_PRICE", ""))

    raw_timeout = values.get("REQUEST_TIMEOUT", "")
    request_timeout = _parse_float("REQUEST_TIMEOUT", raw_timeout) if raw_timeout else None

    settings = Settings(
        query_url=query_url,
        threshold_price=threshold_price,
        recipient_email=values.get("RECIPIENT_EMAIL", "").strip(),
        from_gmail=values.get("FROM_GMAIL", "").strip(),
        from_gmail_app_password=values.get("FROM_GMAIL_APP_PASSWORD", ""),
        request_timeout=request_timeout,
    )
    logger.debug(
        "Loaded settings from %s: %d query URL(s), threshold %.2f.",
        env_file, len(settings.query_urls), settings.threshold_price,
    )
    return settings
