"""
remote_fetch.observability

Observability package.

Responsibilities:
- Structured logging configuration (structlog).
"""

# Package marker.
