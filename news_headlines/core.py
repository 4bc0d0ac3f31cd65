from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, Iterable, List, Optional, Sequence

from .classifier import DENYLIST
from .config import SOURCE_URLS
from .fetcher import fetch, fetch_many
from .models import AggregateReport
from .parser import extract_headlines
from .rules import resolve
from .sentiment import ScoreOptions, Scorer, aggregate


logger = logging.getLogger(__name__)


@dataclass
class FetchOptions:
    sentiment: bool = False
    score_options: Optional[ScoreOptions] = None
    skip_failed: bool = False
    max_workers: int = 1
    timeout: Optional[float] = None


@dataclass(frozen=True)
class RunResult:
    headlines: List[str]
    report: Optional[AggregateReport] = None


class HeadlineFetcher:
    """
    High-level API: fetch news homepages and return their filtered headlines.

    Pipeline: resolve rule → fetch → parse → extract → filter → (optional) score + average
    """

    def __init__(
        self,
        *,
        sentiment: bool = False,
        score_options: Optional[ScoreOptions] = None,
        skip_failed: bool = False,
        max_workers: int = 1,
        timeout: Optional[float] = None,
        sources: Sequence[str] = SOURCE_URLS,
        denylist: AbstractSet[str] = DENYLIST,
        scorer: Optional[Scorer] = None,
    ) -> None:
        self.options = FetchOptions(
            sentiment=sentiment,
            score_options=score_options,
            skip_failed=skip_failed,
            max_workers=max_workers,
            timeout=timeout,
        )
        self.sources = tuple(sources)
        self.denylist = denylist
        self._scorer = scorer

    def headlines(self, url: str) -> List[str]:
        # Resolve before fetching: an unsupported URL never hits the network
        rule = resolve(url)
        html = fetch(url, timeout=self.options.timeout)
        found = extract_headlines(html, rule, self.denylist)
        logger.info("Found %d headlines on %s", len(found), url)
        return found

    def all_headlines(self) -> List[str]:
        """Headlines from every source, concatenated in source-list order."""
        rules = {u: resolve(u) for u in self.sources}
        pages = fetch_many(
            self.sources,
            skip_failed=self.options.skip_failed,
            max_workers=self.options.max_workers,
            timeout=self.options.timeout,
        )
        combined: List[str] = []
        for url, html in pages:
            found = extract_headlines(html, rules[url], self.denylist)
            logger.info("Found %d headlines on %s", len(found), url)
            combined.extend(found)
        return combined

    def analyze(self, headlines: Iterable[str]) -> AggregateReport:
        return aggregate(
            headlines,
            scorer=self._scorer,
            options=self.options.score_options or ScoreOptions(),
        )

    def run(self, url: Optional[str] = None, *, all_sources: bool = False) -> RunResult:
        if (url is None) == (not all_sources):
            raise ValueError("Exactly one of url or all_sources must be given")

        found = self.all_headlines() if all_sources else self.headlines(url)

        report = None
        if self.options.sentiment:
            report = self.analyze(found)
        return RunResult(headlines=found, report=report)
