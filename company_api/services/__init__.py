"""Services Layer — async orchestration around the pure core.

Invariants:
    - Services await repositories; validation rules live in core/
    - Services never import from api/ (transport concerns stay in routes)

Design Decisions:
    - Collaborators injected by construction (no module-level singletons)
"""
