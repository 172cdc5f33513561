"""
Authentication dependency for protected routes.

Applies the Basic auth check to any route that declares
``Depends(require_basic_auth)``.
"""

from fastapi import HTTPException, Header, Request
from typing import Optional
import logging

from .core import check_basic_auth, WWW_AUTHENTICATE

logger = logging.getLogger(__name__)


async def require_basic_auth(
    request: Request,
    authorization: Optional[str] = Header(None)
) -> None:
    """
    Reject the request unless it carries the configured Basic credentials.

    Raises:
        HTTPException: 401 with a WWW-Authenticate challenge
    """
    settings = request.app.state.settings
    error = check_basic_auth(authorization, settings)
    if error is None:
        return

    logger.warning(f"Authentication failed for {request.method} {request.url.path}: {error}")
    raise HTTPException(
        status_code=401,
        detail=error,
        headers={"WWW-Authenticate": WWW_AUTHENTICATE}
    )
