"""Company ORM — persists company records keyed by company code.

Invariants:
    - company_code is the primary key (inserting an existing code raises IntegrityError)
    - site_id is nullable at the column level; the service always sets it
    - last_modified stamped on every save
    - Columns and indexes match alembic/versions (autogenerate yields no diff)

Design Decisions:
    - Natural key over surrogate UUID: the code is the only lookup path
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from company_api.db.base import Base


class Company(Base):
    """Company record stored on one of the configured sites."""
    __tablename__ = "companies"

    company_code: Mapped[str] = mapped_column(String(50), primary_key=True)
    site_id: Mapped[str | None] = mapped_column(
        String(50), nullable=True, index=True,
    )
    company_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    address_line1: Mapped[str | None] = mapped_column(String(200), nullable=True)
    address_line2: Mapped[str | None] = mapped_column(String(200), nullable=True)
    address_line3: Mapped[str | None] = mapped_column(String(200), nullable=True)
    postal_zip_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    equipment_company_code: Mapped[str | None] = mapped_column(
        String(50), nullable=True,
    )
    phone_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    fax_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    last_modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )
