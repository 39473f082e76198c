import pytest

from app.errors import ConfigurationError
from app.settings import DEFAULT_CATALOG_TIMEOUT_SECONDS, load_settings

from tests.factories import ENV


def test_loads_required_values():
    s = load_settings(dict(ENV))
    assert s.api_url == "https://catalog.test/v1/public"
    assert s.public_key == "pub-key"
    assert s.private_key.get_secret_value() == "priv-key"
    assert s.catalog_timeout_seconds == DEFAULT_CATALOG_TIMEOUT_SECONDS
    assert s.log_level == "INFO"


def test_trailing_slash_stripped():
    s = load_settings({**ENV, "MARVEL_API_URL": "https://catalog.test/v1/public/"})
    assert s.api_url == "https://catalog.test/v1/public"


@pytest.mark.parametrize("name", sorted(ENV))
def test_missing_required_value(name):
    environ = dict(ENV)
    del environ[name]
    with pytest.raises(ConfigurationError, match=name):
        load_settings(environ)


@pytest.mark.parametrize("name", sorted(ENV))
def test_blank_required_value(name):
    with pytest.raises(ConfigurationError, match=name):
        load_settings({**ENV, name: "  "})


def test_bad_timeout():
    with pytest.raises(ConfigurationError, match="CATALOG_TIMEOUT_SECONDS"):
        load_settings({**ENV, "CATALOG_TIMEOUT_SECONDS": "soon"})


def test_private_key_not_in_repr():
    s = load_settings(dict(ENV))
    assert "priv-key" not in repr(s)
    assert "priv-key" not in str(s)


def test_reads_process_environment(catalog_env, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = load_settings()
    assert s.public_key == "pub-key"
    assert s.log_level == "DEBUG"


@pytest.mark.parametrize("level", ["VERBOSE", "10", "", "info level"])
def test_bad_log_level(level):
    with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
        load_settings({**ENV, "LOG_LEVEL": level})


@pytest.mark.parametrize("level", ["debug", " Warning ", "ERROR"])
def test_log_level_names(level):
    assert load_settings({**ENV, "LOG_LEVEL": level}).log_level == level.strip().upper()
