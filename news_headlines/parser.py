from __future__ import annotations

import logging
from typing import AbstractSet, List

import soupsieve
from bs4 import BeautifulSoup, Tag

from .classifier import DENYLIST, filter_headlines
from .exceptions import SelectorError
from .models import AttributeRule, ExtractionRule, TextRule


logger = logging.getLogger(__name__)


def parse_document(html: str) -> BeautifulSoup:
    """Parse raw HTML once; lxml recovers from malformed markup."""
    return BeautifulSoup(html, "lxml")


def _attribute_value(element: Tag, attribute: str) -> str:
    value = element.get(attribute, "")
    # bs4 hands back multi-valued attributes (class, rel, ...) as lists
    if isinstance(value, list):
        return " ".join(value)
    return value or ""


def _element_text(element: Tag) -> str:
    # Every descendant text node, joined by a single space; the filter trims
    return element.get_text(" ")


def extract(document: BeautifulSoup, rule: ExtractionRule) -> List[str]:
    """
    Apply an extraction rule to a parsed document.

    Returns one candidate string per matched element, in document order.
    Raises SelectorError when the rule's selector cannot be compiled.
    """
    try:
        elements = document.select(rule.selector)
    except soupsieve.SelectorSyntaxError as e:
        raise SelectorError(f"Invalid selector {rule.selector!r}: {e}") from e

    if isinstance(rule, AttributeRule):
        candidates = [_attribute_value(el, rule.attribute) for el in elements]
    elif isinstance(rule, TextRule):
        candidates = [_element_text(el) for el in elements]
    else:  # pragma: no cover - ExtractionRule is closed
        raise TypeError(f"Unknown extraction rule: {rule!r}")

    logger.debug("Selector %r matched %d elements", rule.selector, len(candidates))
    return candidates


def extract_headlines(
    html: str,
    rule: ExtractionRule,
    denylist: AbstractSet[str] = DENYLIST,
) -> List[str]:
    """Parse, extract and filter in one step."""
    return filter_headlines(extract(parse_document(html), rule), denylist)
