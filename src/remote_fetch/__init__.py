"""
remote_fetch

Top-level package for the remote fetch state library.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal to avoid import-time side effects across the codebase.
# Public entry points live in `remote_fetch.state` and `remote_fetch.orchestrator`.
