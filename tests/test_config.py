import pytest
from news_headlines.config import SOURCE_URLS, Settings, load_settings
from news_headlines.exceptions import ConfigError
from news_headlines.rules import resolve


def test_defaults():
    assert load_settings({}) == Settings()
    s = Settings()
    assert s.scorer == "vader"
    assert s.timeout is None
    assert s.workers == 1
    assert s.skip_failed is False


def test_values_from_env():
    env = {
        "NEWS_HEADLINES_SCORER": "OpenAI",
        "NEWS_HEADLINES_MODEL": "gpt-4o-mini",
        "NEWS_HEADLINES_TIMEOUT": "7.5",
        "NEWS_HEADLINES_WORKERS": "3",
        "NEWS_HEADLINES_SKIP_FAILED": "yes",
    }
    assert load_settings(env) == Settings(
        scorer="openai", model="gpt-4o-mini", timeout=7.5, workers=3, skip_failed=True,
    )


@pytest.mark.parametrize("raw,expected", [
    ("1", True), ("true", True), ("ON", True), ("0", False), ("no", False), ("", False),
])
def test_skip_failed_parsing(raw, expected):
    assert load_settings({"NEWS_HEADLINES_SKIP_FAILED": raw}).skip_failed is expected


@pytest.mark.parametrize("env", [
    {"NEWS_HEADLINES_TIMEOUT": "soon"},
    {"NEWS_HEADLINES_WORKERS": "many"},
    {"NEWS_HEADLINES_WORKERS": "0"},
    {"NEWS_HEADLINES_SCORER": "magic"},
    {"NEWS_HEADLINES_SCORER": "gemini"},
])
def test_invalid_values(env):
    with pytest.raises(ConfigError):
        load_settings(env)


def test_every_source_has_a_rule():
    assert len(SOURCE_URLS) == 5
    for url in SOURCE_URLS:
        resolve(url)
