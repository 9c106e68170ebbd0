"""
remote_fetch.urls

Query-string construction for request URLs.
"""

from __future__ import annotations

from collections.abc import Sequence
from urllib.parse import urlencode


def build_url(base_url: str, params: Sequence[tuple[str, str]]) -> str:
    """
    Append `params` to `base_url` as a query string.

    Keys and values are percent-encoded with spaces as `+`. Pair order is kept as given;
    duplicate keys are neither merged nor sorted.
    """

    if not params:
        return base_url
    return f"{base_url}?{urlencode(list(params))}"
