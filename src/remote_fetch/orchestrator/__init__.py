"""
remote_fetch.orchestrator

JSON request orchestration.

Responsibilities:
- Task form (`RequestOrchestrator`) and command form (`CommandRunner`).
- Cache header policy.
"""

from remote_fetch.orchestrator.commands import CommandRunner
from remote_fetch.orchestrator.headers import NO_CACHE_HEADER, CachePolicy, build_headers
from remote_fetch.orchestrator.requests import NO_BODY, RequestOrchestrator

__all__ = [
    "NO_BODY",
    "NO_CACHE_HEADER",
    "CachePolicy",
    "CommandRunner",
    "RequestOrchestrator",
    "build_headers",
]
