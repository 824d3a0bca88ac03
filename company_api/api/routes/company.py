"""Company Routes — CRUD over company records, mapping SaveResult to HTTP.

Invariants:
    - Routes hold no business rules: validation and sharding live in CompanyService
    - SaveResult → HTTP mapping is exhaustive; an unknown value logs and raises
    - PUT and GET on an unknown code return 404 before any save is attempted
    - A delete the repository reports as not performed raises DeleteFailedError
      (logged CRITICAL once by the global handler, 500)
    - The 201 echo carries the site the service assigned. This departs from the
      original controller, which echoed the pre-save payload without a site

Design Decisions:
    - One CompanyService per request (request-scoped AsyncSession), one shared
      SiteSelector per process so a seeded RNG advances across requests
    - 400 bodies use plain HTTPException detail strings (client-facing reasons)
"""

import logging
from dataclasses import asdict
from functools import lru_cache
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from company_api.config import Settings, get_settings
from company_api.core.company_record import CompanyInfo
from company_api.core.domain_types import CompanyCode, SaveResult, SiteId
from company_api.core.errors import (
    DeleteFailedError, ErrorContext, ResourceNotFoundError, UnknownSaveResultError,
)
from company_api.core.repository_protocols import SiteSelector
from company_api.core.site_selection import RandomSiteSelector
from company_api.infrastructure.company_repository import SqlCompanyRepository
from company_api.infrastructure.database import get_db
from company_api.schemas.company import CompanyDto, to_company_dto, to_company_info
from company_api.services.company_service import CompanyService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/company", tags=["company"])

SAVE_ERROR_MESSAGES = {
    SaveResult.DUPLICATE_KEY: "Company code already exists.",
    SaveResult.MISSING_CODE: "Missing company code.",
    SaveResult.INVALID_VALUE: "Cannot specify value for site ID.",
    SaveResult.CANNOT_CHANGE_CODE: "Cannot change company code.",
}


@lru_cache
def get_site_selector() -> SiteSelector:
    """Process-wide site selector, seeded from settings."""
    return RandomSiteSelector(get_settings().site_selection_seed)


def get_company_service(
    db: AsyncSession = Depends(get_db),
    selector: SiteSelector = Depends(get_site_selector),
    settings: Settings = Depends(get_settings),
) -> CompanyService:
    return CompanyService(
        SqlCompanyRepository(db),
        selector,
        sites=[SiteId(s) for s in settings.sites],
        reassign_site_on_update=settings.reassign_site_on_update,
    )


def company_location(company_code: str) -> str:
    return f"/api/company/{quote(company_code, safe='')}"


def _not_found(company_code: str) -> HTTPException:
    return HTTPException(
        status.HTTP_404_NOT_FOUND,
        detail=ResourceNotFoundError(
            "Company", company_code, ErrorContext(company_code=company_code),
        ).to_response(),
    )


def _save_result_to_response(
    result: SaveResult, company: CompanyInfo, response: Response,
) -> CompanyDto:
    """Translate a save outcome: DTO echo on success, HTTPException otherwise."""
    match result:
        case SaveResult.SUCCESS:
            response.headers["Location"] = company_location(company.company_code)
            return to_company_dto(company)
        case (
            SaveResult.DUPLICATE_KEY
            | SaveResult.MISSING_CODE
            | SaveResult.INVALID_VALUE
            | SaveResult.CANNOT_CHANGE_CODE
        ):
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST, detail=SAVE_ERROR_MESSAGES[result],
            )
        case _:
            logger.error(
                "Unknown result.",
                extra={"company": asdict(company), "save_result": repr(result)},
            )
            raise UnknownSaveResultError(
                result, ErrorContext(company_code=company.company_code),
            )


@router.get("", response_model=list[CompanyDto])
async def list_companies(
    service: CompanyService = Depends(get_company_service),
):
    """List all companies."""
    return [to_company_dto(c) for c in await service.list_all()]


@router.get("/{company_code}", response_model=CompanyDto)
async def get_company(
    company_code: str, service: CompanyService = Depends(get_company_service),
):
    """Get a company by code."""
    company = await service.get_by_code(CompanyCode(company_code))
    if company is None:
        raise _not_found(company_code)
    return to_company_dto(company)


@router.post(
    "", response_model=CompanyDto, status_code=status.HTTP_201_CREATED,
)
async def create_company(
    body: CompanyDto,
    response: Response,
    service: CompanyService = Depends(get_company_service),
):
    """Create a company; the site is assigned by the service."""
    company = to_company_info(body)
    result = await service.save(company)
    return _save_result_to_response(result, company, response)


@router.put(
    "/{company_code}", response_model=CompanyDto,
    status_code=status.HTTP_201_CREATED,
)
async def replace_company(
    company_code: str,
    body: CompanyDto,
    response: Response,
    service: CompanyService = Depends(get_company_service),
):
    """Replace the company stored under company_code."""
    existing = await service.get_by_code(CompanyCode(company_code))
    if existing is None:
        raise _not_found(company_code)
    company = to_company_info(body)
    result = await service.save(company, existing)
    return _save_result_to_response(result, company, response)


@router.delete("/{company_code}")
async def delete_company(
    company_code: str, service: CompanyService = Depends(get_company_service),
):
    """Delete a company by code."""
    if await service.delete(CompanyCode(company_code)):
        return {"message": "Company deleted"}

    # Deleting should not fail once routing reached this point.
    # Logged once, at CRITICAL with company_code, by the CompanyApiError handler.
    raise DeleteFailedError(company_code)
