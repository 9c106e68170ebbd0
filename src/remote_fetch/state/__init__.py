"""
remote_fetch.state

Remote fetch lifecycle model.

Responsibilities:
- Re-export the `RemoteState` variants and their pure helpers.
"""

from remote_fetch.state.remote import (
    Failed,
    InFlight,
    NotRequested,
    RemoteState,
    Succeeded,
    combine,
    fold,
    from_outcome,
    in_flight,
    is_settled,
    map_failure,
    map_success,
    not_requested,
    to_optional,
    with_default,
)

__all__ = [
    "Failed",
    "InFlight",
    "NotRequested",
    "RemoteState",
    "Succeeded",
    "combine",
    "fold",
    "from_outcome",
    "in_flight",
    "is_settled",
    "map_failure",
    "map_success",
    "not_requested",
    "to_optional",
    "with_default",
]
