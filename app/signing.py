import hashlib
import time
from typing import Callable

from .errors import ConfigurationError
from .settings import Settings


def now_ms() -> int:
    return int(time.time() * 1000)


def sign(private_key: str, public_key: str, now: int) -> str:
    """
    Build the catalog API auth query string:
      ts=<now>&apikey=<public_key>&hash=md5(<now><private_key><public_key>)
    """
    if not private_key or not public_key:
        raise ConfigurationError("catalog API keys are missing")

    digest = hashlib.md5(f"{now}{private_key}{public_key}".encode("utf-8")).hexdigest()
    return f"ts={now}&apikey={public_key}&hash={digest}"


class RequestSigner:
    """Signs catalog requests with keys injected at construction time."""

    def __init__(self, settings: Settings, clock: Callable[[], int] = now_ms):
        self._public_key = settings.public_key
        self._private_key = settings.private_key.get_secret_value()
        self._clock = clock
        if not self._private_key or not self._public_key:
            raise ConfigurationError("catalog API keys are missing")

    def query(self) -> str:
        return sign(self._private_key, self._public_key, self._clock())
