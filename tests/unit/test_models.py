import pytest
from pydantic import ValidationError
from apertium_translator.models import ApertiumConfig, Language, LanguagePair


def test_config_defaults():
    config = ApertiumConfig()

    assert config.api_key is None
    assert config.referrer is None
    assert config.base_url == "http://api.apertium.org/json"
    assert config.timeout == 5.0
    assert config.redis_url is None


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("APERTIUM_API_KEY", "k" * 27)
    monkeypatch.setenv("APERTIUM_REFERRER", "http://my.site")
    monkeypatch.setenv("APERTIUM_BASE_URL", "http://localhost:2737")
    monkeypatch.setenv("APERTIUM_TIMEOUT", "12.5")
    monkeypatch.setenv("REDIS_URL", "redis://cache:6379")

    config = ApertiumConfig.from_env()

    assert config.api_key == "k" * 27
    assert config.referrer == "http://my.site"
    assert config.base_url == "http://localhost:2737"
    assert config.timeout == 12.5
    assert config.redis_url == "redis://cache:6379"


def test_config_from_empty_env_keeps_defaults(monkeypatch):
    for name in ("APERTIUM_API_KEY", "APERTIUM_REFERRER", "APERTIUM_BASE_URL", "APERTIUM_TIMEOUT", "REDIS_URL"):
        monkeypatch.delenv(name, raising=False)

    assert ApertiumConfig.from_env() == ApertiumConfig()


def test_setters_return_updated_copies():
    config = ApertiumConfig()

    updated = config.with_key("k" * 27).with_referrer("http://my.site")

    assert updated.api_key == "k" * 27
    assert updated.referrer == "http://my.site"
    assert config.api_key is None  # original untouched


def test_config_is_frozen():
    with pytest.raises(ValidationError):
        ApertiumConfig().api_key = "k" * 27


def test_language_pair_param():
    assert LanguagePair.of(Language.ENGLISH, Language.CATALAN).to_param() == "en|ca"
    assert LanguagePair.of("es", "pt").to_param() == "es|pt"


@pytest.mark.parametrize("raw", ["0", "0.0", "none", "None", " NONE "])
def test_env_timeout_zero_or_none_disables_timeout(monkeypatch, raw):
    monkeypatch.setenv("APERTIUM_TIMEOUT", raw)

    assert ApertiumConfig.from_env().timeout is None


@pytest.mark.parametrize("raw", ["soon", "-1"])
def test_env_timeout_rejects_invalid_values(monkeypatch, raw):
    monkeypatch.setenv("APERTIUM_TIMEOUT", raw)

    with pytest.raises(ValidationError) as excinfo:
        ApertiumConfig.from_env()

    assert "timeout" in str(excinfo.value)


def test_zero_timeout_argument_means_no_timeout():
    assert ApertiumConfig(timeout=0).timeout is None
    assert ApertiumConfig(timeout=None).timeout is None
