"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CompanyCode and SiteId wrap str — never compare raw strings against the site set
    - SaveResult is a closed enumeration: every save returns exactly one member
    - DEFAULT_SITES is ordered and read-only (tuple)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders (used in log extras)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CompanyCode = NewType("CompanyCode", str)
SiteId = NewType("SiteId", str)


# ─── Sharding ────────────────────────────────────────────────────

DEFAULT_SITES: tuple[SiteId, ...] = (
    SiteId("Bravo"), SiteId("Hotel"), SiteId("Lima"),
)


# ─── Enums ───────────────────────────────────────────────────────

class SaveResult(str, Enum):
    """Outcome of CompanyService.save — first failing rule wins."""
    SUCCESS = "success"
    DUPLICATE_KEY = "duplicate_key"
    MISSING_CODE = "missing_code"
    INVALID_VALUE = "invalid_value"
    CANNOT_CHANGE_CODE = "cannot_change_code"
