import pytest
from news_headlines.exceptions import UnsupportedSiteError
from news_headlines.models import AttributeRule, SiteRule, TextRule
from news_headlines.rules import SITE_RULES, resolve, supported_domains


@pytest.mark.parametrize("url,expected", [
    ("https://www.nytimes.com", TextRule("p.indicate-hover")),
    ("https://www.nytimes.com/section/world", TextRule("p.indicate-hover")),
    ("https://www.theguardian.com/uk", AttributeRule("a.dcr-lv2v9o", "aria-label")),
    ("https://www.bbc.com/news", TextRule('h2[data-testid="card-headline"]')),
    ("https://www.nature.com", TextRule("a.c-card__link")),
    ("https://www.economist.com/", TextRule("a[data-analytics]")),
    ("nytimes.com", TextRule("p.indicate-hover")),  # bare domain, no scheme
])
def test_resolve_known_sites(url, expected):
    assert resolve(url) == expected


@pytest.mark.parametrize("url", [
    "https://www.reuters.com",
    "https://example.com/nytimes",
    "https://www.bbc.co.uk/news",
    "",
])
def test_resolve_unknown_sites(url):
    with pytest.raises(UnsupportedSiteError):
        resolve(url)


def test_unsupported_message_names_url_and_known_domains():
    with pytest.raises(UnsupportedSiteError) as exc:
        resolve("https://www.reuters.com")
    msg = str(exc.value)
    assert "https://www.reuters.com" in msg
    assert "nytimes.com" in msg


def test_first_match_wins():
    # A URL mentioning two known domains takes the earlier table row
    url = "https://www.bbc.com/redirect?to=nytimes.com"
    assert resolve(url) == TextRule("p.indicate-hover")


def test_resolve_with_custom_table():
    rules = (SiteRule("example.org", TextRule("h1")),)
    assert resolve("https://example.org/x", rules) == TextRule("h1")
    with pytest.raises(UnsupportedSiteError):
        resolve("https://www.nytimes.com", rules)


def test_supported_domains_in_table_order():
    assert supported_domains() == [
        "nytimes.com", "theguardian.com", "bbc.com", "nature.com", "economist.com",
    ]
    assert len(SITE_RULES) == 5
