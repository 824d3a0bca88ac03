"""Company Record — the domain entity handed between routes, service and repository.

Invariants:
    - company_code is the identity; it is never rewritten by an update
    - site_id is None until CompanyService assigns it
    - last_modified is owned by the repository (stamped on every save)

Design Decisions:
    - Plain mutable dataclass: the service assigns site_id in place so the
      route can echo the assigned site without a second read
"""

from dataclasses import dataclass
from datetime import datetime

from company_api.core.domain_types import CompanyCode, SiteId


@dataclass
class CompanyInfo:
    """Company record keyed by company_code with an assigned site."""
    company_code: CompanyCode | None
    site_id: SiteId | None = None
    company_name: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    address_line3: str | None = None
    postal_zip_code: str | None = None
    country: str | None = None
    equipment_company_code: str | None = None
    phone_number: str | None = None
    fax_number: str | None = None
    last_modified: datetime | None = None
