"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
    - Driver exceptions are mapped to core/errors.py types at this boundary
"""
