"""auth.py — Login and registration against the mock user list.

Called by: Frontend login and register pages
Depends on: deps.py (Portal), services/portal.py
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from app.api.deps import Portal
from app.models.schemas import AuthResult, LoginRequest, RegisterRequest

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/login", response_model=AuthResult)
async def login(body: LoginRequest, portal: Portal) -> AuthResult:
    """Exchange email and password for the public user profile.

    Returns:
        AuthResult with the user (no password).

    Raises:
        HTTPException: 401 when the credentials match no user.
    """
    result = await portal.login(body.email, body.password)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=result.error)
    return result


@router.post("/register", response_model=AuthResult, status_code=status.HTTP_201_CREATED)
async def register(body: RegisterRequest, portal: Portal) -> AuthResult:
    """Create an author account.

    Validation (422): password of at least 6 characters; email, name,
    and affiliation not blank.
    """
    return await portal.register(body)
