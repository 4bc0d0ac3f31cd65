from __future__ import annotations

import concurrent.futures as _fut
import logging
from typing import Iterable, List, Optional, Tuple

import requests

from .exceptions import NetworkError


logger = logging.getLogger(__name__)


def fetch(
    url: str,
    *,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> str:
    """
    Fetch a single page and return its body as text.

    One plain GET: no custom headers, no retry, no timeout unless one is given.
    The body is returned whatever the HTTP status; error pages are parsed like any other.
    Raises NetworkError on connection failures and body read errors.
    """
    getter = session.get if session is not None else requests.get
    logger.debug("GET %s", url)
    try:
        response = getter(url, timeout=timeout)
        text = response.text
    except requests.RequestException as e:
        raise NetworkError(f"Failed to fetch page: {url} ({e})") from e
    if response.status_code >= 400:
        logger.warning("%s answered HTTP %s; parsing the body anyway", url, response.status_code)
    logger.info("Fetched %s (%d chars)", url, len(text))
    return text


def fetch_many(
    urls: Iterable[str],
    *,
    skip_failed: bool = False,
    max_workers: int = 1,
    timeout: Optional[float] = None,
) -> List[Tuple[str, str]]:
    """
    Fetch multiple pages and return (url, html) pairs in input order.

    By default the first failure aborts the whole batch. With skip_failed=True
    failed URLs are logged and left out so the rest of the batch still returns.
    """
    urls = list(urls)
    pages: List[Tuple[str, str]] = []

    def _one(u: str) -> str:
        return fetch(u, timeout=timeout)

    def _keep(u: str, outcome: Optional[_fut.Future]) -> None:
        try:
            html = outcome.result() if outcome is not None else _one(u)
        except NetworkError as e:
            if not skip_failed:
                raise
            logger.warning("Skipping source %s: %s", u, e)
            return
        pages.append((u, html))

    workers = max(1, int(max_workers or 1))
    if workers == 1 or len(urls) <= 1:
        for u in urls:
            _keep(u, None)
        return pages

    with _fut.ThreadPoolExecutor(max_workers=workers) as ex:
        futures = [ex.submit(_one, u) for u in urls]
        # Joined in submission order so output order never depends on timing
        for u, fu in zip(urls, futures):
            _keep(u, fu)
    return pages
