from __future__ import annotations

from typing import Optional

import httpx  # HTTP client with timeouts & retries

from .errors import RemoteCallFailure
from .logging_config import get_logger

logger = get_logger(__name__)

HEADERS = {
    "User-Agent": "JobBoard/0.1 (+https://localhost) httpx",
    "Accept": "text/csv, text/plain;q=0.9, */*;q=0.5",
    "Cache-Control": "no-store",
}


def fetch_csv(url: str, *, timeout: float = 10.0, transport: Optional[httpx.BaseTransport] = None) -> str:
    """GET a published CSV (e.g. a Google Sheet "publish to web" link).

    Raises RemoteCallFailure on any transport error or non-2xx response.
    """
    # retries only cover connection failures, not HTTP error statuses
    transport = transport or httpx.HTTPTransport(retries=2)
    try:
        with httpx.Client(transport=transport, timeout=timeout, headers=HEADERS, follow_redirects=True) as client:
            resp = client.get(url)
            resp.raise_for_status()
            text = resp.text
    except httpx.HTTPError as e:
        raise RemoteCallFailure(f"Failed to fetch CSV source: {e!s}") from e
    logger.info("fetched csv source url=%s bytes=%d", url, len(text))
    return text
