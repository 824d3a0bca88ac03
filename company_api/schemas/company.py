"""Company Schemas — wire shape of a company record and its mapping to CompanyInfo.

Invariants:
    - company_code is optional on input: a missing code is reported as
      MISSING_CODE by the service, not as a schema validation error
    - company_code is never stripped (whitespace-only must reach validation)
    - Descriptive fields are stripped; blank strings become None

Design Decisions:
    - Explicit mapping functions over a mapper library: the field set is small
      and both sides are declared in this repository
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from company_api.core.company_record import CompanyInfo
from company_api.core.domain_types import CompanyCode, SiteId


class CompanyDto(BaseModel):
    """Company payload for create, update and read."""
    model_config = ConfigDict(from_attributes=True)

    company_code: str | None = Field(None, max_length=50)
    site_id: str | None = Field(None, max_length=50)
    company_name: str | None = Field(None, max_length=200)
    address_line1: str | None = Field(None, max_length=200)
    address_line2: str | None = Field(None, max_length=200)
    address_line3: str | None = Field(None, max_length=200)
    postal_zip_code: str | None = Field(None, max_length=20)
    country: str | None = Field(None, max_length=100)
    equipment_company_code: str | None = Field(None, max_length=50)
    phone_number: str | None = Field(None, max_length=50)
    fax_number: str | None = Field(None, max_length=50)
    last_modified: datetime | None = None

    @field_validator(
        "company_name", "address_line1", "address_line2", "address_line3",
        "postal_zip_code", "country", "equipment_company_code",
        "phone_number", "fax_number",
    )
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None


def to_company_info(dto: CompanyDto) -> CompanyInfo:
    """Map an inbound payload to a candidate record."""
    return CompanyInfo(
        company_code=CompanyCode(dto.company_code) if dto.company_code is not None else None,
        site_id=SiteId(dto.site_id) if dto.site_id is not None else None,
        company_name=dto.company_name,
        address_line1=dto.address_line1,
        address_line2=dto.address_line2,
        address_line3=dto.address_line3,
        postal_zip_code=dto.postal_zip_code,
        country=dto.country,
        equipment_company_code=dto.equipment_company_code,
        phone_number=dto.phone_number,
        fax_number=dto.fax_number,
    )


def to_company_dto(company: CompanyInfo) -> CompanyDto:
    """Map a record to its wire shape."""
    return CompanyDto.model_validate(company)
