"""Company Service — validates, shards and persists company records.

Invariants:
    - save() returns exactly one SaveResult; business-rule failures never raise
    - Validation failures never reach the repository
    - On success candidate.site_id is a member of the configured site set
    - reassign_site_on_update=True re-shards on every save (update included)

Design Decisions:
    - Validation delegated to core.validate_company (pure, testable without IO)
    - SiteSelector injected: seedable in production, deterministic in tests
    - Duplicate detection delegated entirely to the repository (no CAS here)
"""

import logging
from collections.abc import Sequence

from company_api.core.company_record import CompanyInfo
from company_api.core.domain_types import CompanyCode, DEFAULT_SITES, SaveResult, SiteId
from company_api.core.repository_protocols import CompanyRepository, SiteSelector
from company_api.core.validate_company import check_save_candidate

logger = logging.getLogger(__name__)


class CompanyService:
    """Domain service for company records."""

    def __init__(
        self,
        repository: CompanyRepository,
        selector: SiteSelector,
        sites: Sequence[SiteId] = DEFAULT_SITES,
        reassign_site_on_update: bool = True,
    ):
        if not sites:
            raise ValueError("CompanyService requires at least one site")
        self.repository = repository
        self.selector = selector
        self.sites = tuple(sites)
        self.reassign_site_on_update = reassign_site_on_update

    async def list_all(self) -> list[CompanyInfo]:
        return await self.repository.get_all()

    async def get_by_code(self, company_code: CompanyCode) -> CompanyInfo | None:
        return await self.repository.get_by_code(company_code)

    async def save(
        self, candidate: CompanyInfo, existing: CompanyInfo | None = None,
    ) -> SaveResult:
        """Validate candidate, assign its site and persist it.

        existing is the persisted record when updating, None when creating.
        """
        failure = check_save_candidate(candidate, existing)
        if failure is not None:
            logger.info(
                f"Rejected company save: {failure.value}",
                extra={
                    "company_code": candidate.company_code,
                    "save_result": failure.value,
                },
            )
            return failure

        candidate.site_id = self._assign_site(existing)

        if await self.repository.save(candidate, replace=existing is not None):
            logger.info(
                "Company saved",
                extra={
                    "company_code": candidate.company_code,
                    "site_id": candidate.site_id,
                },
            )
            return SaveResult.SUCCESS

        logger.info(
            "Company code already exists",
            extra={
                "company_code": candidate.company_code,
                "save_result": SaveResult.DUPLICATE_KEY.value,
            },
        )
        return SaveResult.DUPLICATE_KEY

    async def delete(self, company_code: CompanyCode) -> bool:
        return await self.repository.delete(company_code)

    def _assign_site(self, existing: CompanyInfo | None) -> SiteId:
        """Pick the shard for this save."""
        if (
            existing is not None
            and not self.reassign_site_on_update
            and existing.site_id is not None
        ):
            return existing.site_id
        # Uniform random stand-in for a real sharding algorithm
        return self.selector.pick(self.sites)
