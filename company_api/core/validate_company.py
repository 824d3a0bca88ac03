"""Save Validation — pure rules applied to a candidate record before persistence.

Invariants:
    - Rules run in fixed order; the first failing rule wins (short-circuit)
    - Returns None when the candidate may be persisted
    - Never touches site assignment or the repository

Design Decisions:
    - Typed outcome over exceptions: business-rule violations are expected,
      only impossible states raise
"""

from company_api.core.company_record import CompanyInfo
from company_api.core.domain_types import SaveResult


def has_company_code(candidate: CompanyInfo) -> bool:
    """True when company_code is present and not whitespace-only."""
    return bool(candidate.company_code and candidate.company_code.strip())


def check_save_candidate(
    candidate: CompanyInfo, existing: CompanyInfo | None = None,
) -> SaveResult | None:
    """Return the failing SaveResult for candidate, or None if it passes.

    existing is the currently persisted record on update, None on create.
    """
    if not has_company_code(candidate):
        return SaveResult.MISSING_CODE

    if existing is not None and candidate.company_code != existing.company_code:
        return SaveResult.CANNOT_CHANGE_CODE

    # Clients may not choose their own site
    if existing is None and candidate.site_id is not None:
        return SaveResult.INVALID_VALUE

    return None
