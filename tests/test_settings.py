import pytest
from pydantic import ValidationError

from popcorn.settings import Settings


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("OMDB_API", "9fd95467")
    settings = Settings(_env_file=None)  # type: ignore[call-arg]
    assert settings.omdb_api == "9fd95467"
    assert settings.omdb_url == "http://www.omdbapi.com"
    assert settings.initial_query == "inception"


def test_settings_require_api_key(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("OMDB_API", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)  # type: ignore[call-arg]
