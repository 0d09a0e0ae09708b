"""Database Package — SQLAlchemy declarative Base shared by all ORM models.

Invariants:
    - Single async engine per app (constructed by the lifespan, see main.py)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for local runs and tests
"""
