"""Database Infrastructure — SQLAlchemy declarative base and standalone session factory.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite for local/tests, asyncpg for PostgreSQL: both native async drivers
"""
