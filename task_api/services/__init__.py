"""Services Layer — persistence operations behind the HTTP routes.

Invariants:
    - Services receive an AsyncSession; they never open their own
    - Domain failures raised as core/errors.py types, never HTTPException
"""
