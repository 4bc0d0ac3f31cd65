from __future__ import annotations

from typing import AbstractSet, Iterable, List


# Exact-match boilerplate that shows up in headline slots (games, footers).
DENYLIST: AbstractSet[str] = frozenset({
    "Connections Companion",
    "Spelling Bee",
    "The Crossword",
    "Read full edition",
})


def is_headline(candidate: str, denylist: AbstractSet[str] = DENYLIST) -> bool:
    """
    Decide whether a raw candidate string is genuine headline text.

    Rejects one-word fragments (after trimming) and exact denylist matches.
    Substrings of denylisted entries are not rejected.
    """
    text = candidate.strip()
    if len(text.split()) <= 1:
        return False
    if text in denylist:
        return False
    return True


def filter_headlines(candidates: Iterable[str], denylist: AbstractSet[str] = DENYLIST) -> List[str]:
    """Trim candidates and keep the headlines, in input order. Duplicates are kept."""
    return [c.strip() for c in candidates if is_headline(c, denylist)]
