"""
linkboard.auth

Authentication/authorization package.

Responsibilities:
- Session token validation (identity provider JWTs).
- Identity context, plan resolution and the plan-based access gate.
- FastAPI auth dependencies.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing here issues real credentials; the provider owns sign-in. `issue_token` exists for dev/tests.
