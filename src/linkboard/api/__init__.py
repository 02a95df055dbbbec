"""
linkboard.api

API package for the linkboard service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring, error mapping and response models.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: auth + plan gate + delegation to services + rendering.
