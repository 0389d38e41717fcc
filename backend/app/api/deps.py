"""Dependency injection for API routes.

Provides FastAPI dependencies for configuration, the portal service,
and mock authentication. There are no tokens: the frontend sends the id
returned by ``/auth/login`` in an ``X-User-Id`` header, and the
dependency resolves it against the mock store.

Called by: All route modules via type aliases (CurrentUser, Portal, etc.)
Depends on: config.py, services/portal.py
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from app.config import Settings, get_settings
from app.models.schemas import User
from app.services.portal import PortalAPI

logger = logging.getLogger(__name__)

# ─── Settings ──────────────────────────────────────────────────────────────────


def get_config() -> Settings:
    """Return the application config."""
    return get_settings()


ConfigDep = Annotated[Settings, Depends(get_config)]

# ─── Portal ────────────────────────────────────────────────────────────────────


def get_portal(config: ConfigDep) -> PortalAPI:
    """Return a portal service bound to the shared mock store."""
    return PortalAPI(settings=config)


Portal = Annotated[PortalAPI, Depends(get_portal)]

# ─── Auth ──────────────────────────────────────────────────────────────────────


async def get_current_user(
    portal: Portal,
    x_user_id: Annotated[str | None, Header()] = None,
) -> User:
    """Resolve the ``X-User-Id`` header to a stored user.

    Raises:
        HTTPException: 401 if the header is missing, malformed, or unknown.
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "UNAUTHORIZED", "message": "Missing X-User-Id header"},
        )
    try:
        user_id = int(x_user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "UNAUTHORIZED", "message": "X-User-Id must be an integer"},
        ) from None

    user = await portal.get_user(user_id)
    if user is None:
        logger.warning("Rejected unknown user id %s", user_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "UNAUTHORIZED", "message": "Unknown user"},
        )
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


def require_role(user: User, *roles: str) -> None:
    """Raise 403 unless the user holds one of ``roles``."""
    if user.role not in roles:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"{' or '.join(r.capitalize() for r in roles)} access required",
        )
