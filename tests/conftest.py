import pytest

from app.settings import Settings
from tests.factories import ENV


@pytest.fixture
def catalog_env(monkeypatch):
    for name, value in ENV.items():
        monkeypatch.setenv(name, value)
    return ENV


@pytest.fixture
def settings():
    return Settings(
        api_url=ENV["MARVEL_API_URL"],
        public_key=ENV["MARVEL_API_PUBLIC_KEY"],
        private_key=ENV["MARVEL_API_PRIVATE_KEY"],
    )
