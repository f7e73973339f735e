"""Infrastructure Layer — connection pool, schema bootstrap, logging.

Invariants:
    - Infrastructure maps driver exceptions to core/errors.py types
"""
