"""SQL Company Repository — CompanyRepository implementation over an AsyncSession.

Invariants:
    - save(replace=False) inserts; a primary-key collision returns False (never raises)
    - save(replace=True) upserts by company_code and returns True
    - delete returns True only when a row was removed
    - last_modified is stamped on every successful save
    - Rows never leave this module: callers only see CompanyInfo

Design Decisions:
    - IntegrityError caught here, not in DatabaseSessionManager: a duplicate code is
      an expected outcome (DUPLICATE_KEY), other SQLAlchemy errors still map to DatabaseError
    - Field mapping driven by dataclasses.fields(CompanyInfo): one place to add a column
"""

import logging
from dataclasses import fields
from datetime import datetime, timezone

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from company_api.core.company_record import CompanyInfo
from company_api.core.domain_types import CompanyCode
from company_api.models.company import Company

logger = logging.getLogger(__name__)

_FIELD_NAMES = tuple(f.name for f in fields(CompanyInfo))


def _to_info(row: Company) -> CompanyInfo:
    return CompanyInfo(**{name: getattr(row, name) for name in _FIELD_NAMES})


def _values(company: CompanyInfo) -> dict:
    return {name: getattr(company, name) for name in _FIELD_NAMES}


def _to_row(company: CompanyInfo) -> Company:
    return Company(**_values(company))


class SqlCompanyRepository:
    """Company persistence backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all(self) -> list[CompanyInfo]:
        result = await self.db.execute(
            select(Company).order_by(Company.company_code),
        )
        return [_to_info(row) for row in result.scalars().all()]

    async def get_by_code(self, company_code: CompanyCode) -> CompanyInfo | None:
        result = await self.db.execute(
            select(Company).where(Company.company_code == company_code),
        )
        row = result.scalar_one_or_none()
        return _to_info(row) if row else None

    async def save(self, company: CompanyInfo, *, replace: bool = False) -> bool:
        """Insert (or upsert when replace) company. False on duplicate code."""
        company.last_modified = datetime.now(timezone.utc)
        if replace:
            await self.db.merge(_to_row(company))
            await self.db.commit()
            return True

        try:
            await self.db.execute(insert(Company).values(**_values(company)))
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning(
                "Duplicate company code on insert",
                extra={"company_code": company.company_code},
            )
            return False
        return True

    async def delete(self, company_code: CompanyCode) -> bool:
        result = await self.db.execute(
            delete(Company).where(Company.company_code == company_code),
        )
        await self.db.commit()
        return result.rowcount > 0
