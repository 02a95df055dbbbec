"""
linkboard.errors

Domain error taxonomy shared by services and the API layer.

Responsibilities:
- `Unauthorized`: no resolvable caller identity.
- `ValidationError`: a form field is missing, blank or too long.
- `StoreFault`: any persistence failure; message is the store's, verbatim.

"Not found" is not an error here: single-record lookups return `None`.
"""

from __future__ import annotations


class LinkboardError(Exception):
    pass


class Unauthorized(LinkboardError):
    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)
        self.message = message


class ValidationError(LinkboardError):
    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class StoreFault(LinkboardError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# --- Module Notes -----------------------------------------------------------
# The API layer maps these to 401 / 422 / 500 in `linkboard.api.errors`.
