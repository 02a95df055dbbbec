"""
linkboard.db

Persistence package (SQLAlchemy async).

Responsibilities:
- ORM models for the two owned record kinds (profiles, analyses).
- Engine/session setup and owner-scoped repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# SQLite (aiosqlite) backs dev/test; the schema is plain enough for PostgreSQL in prod.
