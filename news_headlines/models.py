from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from .exceptions import EmptyInputError


@dataclass(frozen=True)
class TextRule:
    """Read the rendered text of every element matching `selector`."""
    selector: str


@dataclass(frozen=True)
class AttributeRule:
    """Read the `attribute` value of every element matching `selector`."""
    selector: str
    attribute: str


ExtractionRule = Union[TextRule, AttributeRule]


@dataclass(frozen=True)
class SiteRule:
    domain: str
    rule: ExtractionRule

    def matches(self, url: str) -> bool:
        return self.domain in url


@dataclass(frozen=True)
class SentimentResult:
    headline: str
    score: float


@dataclass(frozen=True)
class AggregateReport:
    """
    Scored headlines in encounter order plus their mean score.

    WARNING: a report always holds at least one result; use `from_results`
    so that an empty batch is reported as EmptyInputError instead of NaN.
    """
    results: Tuple[SentimentResult, ...]
    average_score: float

    @classmethod
    def from_results(cls, results: Sequence[SentimentResult]) -> "AggregateReport":
        if not results:
            raise EmptyInputError("Cannot compute an average sentiment over zero headlines")
        total = sum(r.score for r in results)
        return cls(results=tuple(results), average_score=total / len(results))

    def __len__(self) -> int:
        return len(self.results)
