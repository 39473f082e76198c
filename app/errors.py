class ConfigurationError(RuntimeError):
    """Required configuration (catalog URL or API keys) is missing or invalid."""


class CatalogError(Exception):
    """The upstream catalog answered with a non-2xx status."""

    def __init__(self, status_code: int, path: str):
        super().__init__(f"catalog returned {status_code} for {path}")
        self.status_code = status_code
        self.path = path
