"""
linkboard.db.repositories

Owner-scoped repositories (the record store gateway).

Responsibilities:
- Every statement is filtered by (or stamped with) the owning identity.
- Store errors surface as `StoreFault` with the driver's message.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories never commit; the services own transaction boundaries.
