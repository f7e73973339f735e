"""Pydantic Schemas — request validation and response shapes for API endpoints.

Invariants:
    - Request bodies are validated and coerced before any handler logic runs
    - Every rule violation carries the offending field and a human message
    - Unknown keys in request bodies are ignored

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Shared rule helpers in rules.py; each resource declares its own rule set
"""
