"""
remote_fetch.orchestrator.headers

Header policy for JSON requests.

Responsibilities:
- Define the two cache modes a call site can pick.
- Build the header list for a request from its cache mode and body presence.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

from remote_fetch.transport.base import Header

# Exact literal; existing clients match on this signature.
NO_CACHE_HEADER: Header = ("Cache-Control", "no-store, must-revalidate, no-cache, max-age=0")
JSON_CONTENT_TYPE: Header = ("Content-Type", "application/json")
_POLICY_NAMES = frozenset(name.lower() for name, _ in (NO_CACHE_HEADER, JSON_CONTENT_TYPE))


class CachePolicy(str, Enum):
    # NO_CACHE forces the request past any HTTP/browser cache.
    NO_CACHE = "no_cache"
    # ALLOW_CACHE adds nothing; the transport's default caching applies.
    ALLOW_CACHE = "allow_cache"


def build_headers(
    policy: CachePolicy,
    *,
    with_body: bool,
    defaults: Mapping[str, str] | None = None,
) -> tuple[Header, ...]:
    # Policy-owned names in defaults are dropped so each header is sent once.
    headers: list[Header] = [
        (name, value)
        for name, value in (defaults or {}).items()
        if name.lower() not in _POLICY_NAMES
    ]
    if with_body:
        headers.append(JSON_CONTENT_TYPE)
    if policy is CachePolicy.NO_CACHE:
        headers.append(NO_CACHE_HEADER)
    return tuple(headers)
