from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Protocol
import logging
import os
import re

from .exceptions import EmptyInputError, ScoringError
from .models import AggregateReport, SentimentResult


logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?")


class Scorer(Protocol):
    def score(self, text: str) -> float:  # pragma: no cover - interface
        ...


@dataclass
class ScoreOptions:
    provider: str = "vader"  # "vader" | "openai"
    model: Optional[str] = None
    timeout_sec: float = 15.0


class VaderScorer:
    """Lexicon/rule-based compound polarity from vaderSentiment."""

    def __init__(self) -> None:
        from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

        self._analyzer = SentimentIntensityAnalyzer()

    def score(self, text: str) -> float:
        return float(self._analyzer.polarity_scores(text)["compound"])


_PROMPT = (
    "Rate the overall sentiment polarity of the news headline below. "
    "Reply with a single number between -1 (very negative) and 1 (very positive), "
    "0 for neutral. No words, only the number."
)


def _parse_score(content: Optional[str]) -> float:
    if not content:
        raise ScoringError("Sentiment provider returned an empty response")
    m = _NUMBER_RE.search(content)
    if not m:
        raise ScoringError(f"Sentiment provider returned no score: {content!r}")
    return max(-1.0, min(1.0, float(m.group(0))))


class OpenAIScorer:
    """Asks an OpenAI chat model for a compound score. `client` replaces the SDK client."""

    def __init__(
        self,
        *,
        api_key: Optional[str],
        model: Optional[str],
        timeout_sec: float,
        client: Optional[Any] = None,
    ) -> None:
        if client is None:
            try:
                from openai import OpenAI  # type: ignore
            except ImportError as e:  # pragma: no cover - optional dep
                raise ScoringError("openai package is required for OpenAI scoring. Install with `pip install news-headlines[openai]`.") from e
            key = api_key or os.getenv("OPENAI_API_KEY")
            if not key:
                raise ScoringError("OPENAI_API_KEY not set.")
            client = OpenAI(api_key=key)
        self._client = client
        self._model = model or os.getenv("OPENAI_MODEL", "gpt-4o-mini")
        self._timeout = timeout_sec

    def score(self, text: str) -> float:
        try:
            resp = self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": _PROMPT},
                    {"role": "user", "content": text},
                ],
                timeout=self._timeout,
            )
        except Exception as e:
            raise ScoringError(f"OpenAI scoring failed for {text!r}: {e}") from e
        content = resp.choices[0].message.content if resp and resp.choices else None
        return _parse_score(content)


def build_scorer(options: Optional[ScoreOptions]) -> Scorer:
    if not options:
        return VaderScorer()
    provider = (options.provider or "").lower()
    if provider == "vader":
        return VaderScorer()
    if provider == "openai":
        return OpenAIScorer(api_key=os.getenv("OPENAI_API_KEY"), model=options.model, timeout_sec=options.timeout_sec)
    raise ValueError(f"Unknown sentiment provider: {options.provider!r}")


def score_headlines(headlines: Iterable[str], scorer: Scorer) -> List[SentimentResult]:
    """Score each headline on its own, keeping encounter order."""
    return [SentimentResult(headline=h, score=float(scorer.score(h))) for h in headlines]


def aggregate(
    headlines: Iterable[str],
    *,
    scorer: Optional[Scorer] = None,
    options: Optional[ScoreOptions] = None,
) -> AggregateReport:
    """
    Score every headline and average the scores.

    Raises EmptyInputError before building a scorer when there is nothing to score.
    """
    headlines = list(headlines)
    if not headlines:
        raise EmptyInputError("No headlines to score; overall sentiment is undefined")
    scorer = scorer or build_scorer(options)
    report = AggregateReport.from_results(score_headlines(headlines, scorer))
    logger.info("Scored %d headlines, average %.4f", len(report), report.average_score)
    return report
