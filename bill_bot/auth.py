"""
Authentication Module for Bill Bot
==================================

HTTP Basic Authentication for the admin menu endpoints.

Security Features:
------------------
- **Timing Attack Prevention**: Credentials are compared with
  `secrets.compare_digest()`, which takes constant time regardless of how
  many characters match.

- **Fail Closed**: If ADMIN_PASSWORD is not configured, admin endpoints
  return 503 Service Unavailable rather than allowing unauthenticated access.

Configuration:
--------------
Environment variables (see config.py):
- ADMIN_USERNAME: Username for admin access (default: "admin")
- ADMIN_PASSWORD: Password for admin access (required, no default)

Usage:
------
    from bill_bot.auth import verify_admin_credentials

    @router.get("/admin/menu")
    def list_menu(
        _admin: str = Depends(verify_admin_credentials),
        db: Session = Depends(get_db),
    ):
        ...
"""

import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from . import config


# =============================================================================
# HTTP Basic Auth Setup
# =============================================================================
# The realm is shared across all admin routes so browsers cache credentials.

security = HTTPBasic(realm="Bill Bot Admin")


# =============================================================================
# Admin Authentication Dependency
# =============================================================================

def verify_admin_credentials(
    credentials: HTTPBasicCredentials = Depends(security),
) -> str:
    """
    Verify HTTP Basic Auth credentials for admin endpoints.

    Args:
        credentials: HTTP Basic Auth credentials extracted from the request.

    Returns:
        str: The authenticated username if credentials are valid.

    Raises:
        HTTPException (503): If ADMIN_PASSWORD is not set.
        HTTPException (401): If credentials are invalid. Includes a
                            WWW-Authenticate header to trigger the browser prompt.
    """
    if not config.ADMIN_PASSWORD:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Admin authentication not configured. Set ADMIN_PASSWORD environment variable.",
        )

    username_correct = secrets.compare_digest(
        credentials.username.encode("utf-8"),
        config.ADMIN_USERNAME.encode("utf-8"),
    )
    password_correct = secrets.compare_digest(
        credentials.password.encode("utf-8"),
        config.ADMIN_PASSWORD.encode("utf-8"),
    )

    if not (username_correct and password_correct):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin credentials",
            headers={"WWW-Authenticate": "Basic"},
        )

    return credentials.username
