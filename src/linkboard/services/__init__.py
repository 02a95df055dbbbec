"""
linkboard.services

Service-layer package (the CRUD action set).

Responsibilities:
- Enforce the identity precondition and field validation before any store call.
- Own transaction boundaries (commit / rollback).
- Report which views a mutation invalidates.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services take an explicit `Identity`; they never look at request or session globals.
