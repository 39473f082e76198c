import logging
import os

from pydantic import BaseModel, SecretStr

from .errors import ConfigurationError

DEFAULT_CATALOG_TIMEOUT_SECONDS = 5.0
DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseModel):
    model_config = {"frozen": True}

    api_url: str
    public_key: str
    private_key: SecretStr
    catalog_timeout_seconds: float = DEFAULT_CATALOG_TIMEOUT_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL


def _required(environ, name: str) -> str:
    value = environ.get(name, "").strip()
    if not value:
        raise ConfigurationError(f"{name} is not set")
    return value


def load_settings(environ=None) -> Settings:
    """
    Read configuration from the process environment (or the given mapping).
    Raises ConfigurationError when the catalog URL or either key is missing.
    """
    if environ is None:
        environ = os.environ

    api_url = _required(environ, "MARVEL_API_URL").rstrip("/")
    public_key = _required(environ, "MARVEL_API_PUBLIC_KEY")
    private_key = _required(environ, "MARVEL_API_PRIVATE_KEY")

    try:
        timeout = float(environ.get("CATALOG_TIMEOUT_SECONDS", DEFAULT_CATALOG_TIMEOUT_SECONDS))
    except ValueError as exc:
        raise ConfigurationError("CATALOG_TIMEOUT_SECONDS must be a number") from exc

    log_level = environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"LOG_LEVEL {log_level!r} is not a logging level")

    return Settings(
        api_url=api_url,
        public_key=public_key,
        private_key=private_key,
        catalog_timeout_seconds=timeout,
        log_level=log_level,
    )
