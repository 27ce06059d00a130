"""Lazy-initialized HTTP clients, reused across warm function invocations."""

from functools import lru_cache

import httpx


@lru_cache(maxsize=4)
def get_http_client(timeout: float) -> httpx.Client:
    """One pooled client per timeout value."""
    return httpx.Client(timeout=timeout, follow_redirects=True)
