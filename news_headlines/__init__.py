"""
news_headlines

A small, focused library that scrapes headline text from a fixed set of news homepages
and optionally scores each headline's sentiment polarity.

Core ideas:
- Input: a supported homepage URL, or all known sources
- Process: resolve site rule → fetch → parse → extract → filter (noise + boilerplate) → score (optional)
- Output: List[str] of headlines, plus an AggregateReport when scoring

Example
-------
from news_headlines import HeadlineFetcher

fetcher = HeadlineFetcher(sentiment=True)

result = fetcher.run(all_sources=True)

for r in result.report.results:
    print(r.score, r.headline)
print("overall", result.report.average_score)
"""
from .models import AggregateReport, AttributeRule, ExtractionRule, SentimentResult, TextRule
from .core import HeadlineFetcher, RunResult
from .rules import SITE_RULES, resolve
from .classifier import DENYLIST, filter_headlines
from .sentiment import ScoreOptions, aggregate

__all__ = [
    "AggregateReport",
    "AttributeRule",
    "ExtractionRule",
    "SentimentResult",
    "TextRule",
    "HeadlineFetcher",
    "RunResult",
    "SITE_RULES",
    "resolve",
    "DENYLIST",
    "filter_headlines",
    "ScoreOptions",
    "aggregate",
]
