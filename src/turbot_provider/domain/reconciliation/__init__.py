"""Resource reconcilers built on the Turbot operations ports."""

from __future__ import annotations

from .grant import GrantReconciler, aka_in_resource_akas, suppress_if_resource_aka_matches
from .policy_setting import (
    PolicySettingReconciler,
    WriteAttempt,
    next_attempt,
    suppress_if_encrypted_or_value_source_matches,
)

__all__ = [
    "GrantReconciler",
    "PolicySettingReconciler",
    "WriteAttempt",
    "aka_in_resource_akas",
    "next_attempt",
    "suppress_if_encrypted_or_value_source_matches",
    "suppress_if_resource_aka_matches",
]
