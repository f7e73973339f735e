"""Agency Site API Package — projects and contact-form HTTP API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
