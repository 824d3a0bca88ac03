"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Persistence and randomness reach the service only through these Protocols
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in CompanyRepository: implementations do IO; SiteSelector is sync
"""

from collections.abc import Sequence
from typing import Protocol

from company_api.core.company_record import CompanyInfo
from company_api.core.domain_types import CompanyCode, SiteId


class CompanyRepository(Protocol):
    """Contract for company persistence — implemented by shell."""
    async def get_all(self) -> list[CompanyInfo]: ...
    async def get_by_code(self, company_code: CompanyCode) -> CompanyInfo | None: ...
    async def save(self, company: CompanyInfo, *, replace: bool = False) -> bool:
        """Persist company. False signals a duplicate company_code on insert."""
        ...
    async def delete(self, company_code: CompanyCode) -> bool: ...


class SiteSelector(Protocol):
    """Strategy choosing one site out of N."""
    def pick(self, sites: Sequence[SiteId]) -> SiteId: ...
