"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; core never imports it
    - SQLAlchemy errors mapped to DatabaseError at the session boundary
"""
