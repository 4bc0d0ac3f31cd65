from __future__ import annotations

import logging
from typing import List, Sequence

from .exceptions import UnsupportedSiteError
from .models import AttributeRule, ExtractionRule, SiteRule, TextRule


logger = logging.getLogger(__name__)


# First match wins. Adding a site means adding a row here.
SITE_RULES: Sequence[SiteRule] = (
    SiteRule("nytimes.com", TextRule("p.indicate-hover")),
    SiteRule("theguardian.com", AttributeRule("a.dcr-lv2v9o", "aria-label")),
    SiteRule("bbc.com", TextRule('h2[data-testid="card-headline"]')),
    SiteRule("nature.com", TextRule("a.c-card__link")),
    SiteRule("economist.com", TextRule("a[data-analytics]")),
)


def supported_domains(rules: Sequence[SiteRule] = SITE_RULES) -> List[str]:
    return [r.domain for r in rules]


def resolve(url: str, rules: Sequence[SiteRule] = SITE_RULES) -> ExtractionRule:
    """
    Return the extraction rule for `url` by substring match on the raw URL.

    Raises UnsupportedSiteError when no known domain appears in the URL.
    """
    for site in rules:
        if site.matches(url):
            logger.debug("Resolved %s to %s rule %r", url, site.domain, site.rule)
            return site.rule
    raise UnsupportedSiteError(
        f"Unsupported site: {url} (known: {', '.join(supported_domains(rules))})"
    )
