"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - company_code is the natural primary key (uniqueness = duplicate detection)

Design Decisions:
    - Models imported here so Base.metadata is populated for create_all and alembic
"""

from company_api.models.company import Company  # noqa: F401
