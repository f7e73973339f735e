"""ORM Models — SQLAlchemy declarative models for both tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - Projects and contacts are independent tables (no relationships)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all runs
"""

from app.models.project import Project  # noqa: F401
from app.models.contact import Contact  # noqa: F401
