"""Database Metadata — SQLAlchemy declarative Base.

Invariants:
    - Engine and pool live in infrastructure/database.py, not here
"""
