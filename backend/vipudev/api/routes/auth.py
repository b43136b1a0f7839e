"""Login, token verification and logout routes."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, status

from vipudev.api.deps import extract_bearer_token, require_session
from vipudev.core.security.credentials import CredentialVerifier, get_credential_verifier
from vipudev.core.security.sessions import SessionStore, get_session_store
from vipudev.models.schemas import LoginRequest, LoginResponse, MessageResponse, VerifyResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    verifier: CredentialVerifier = Depends(get_credential_verifier),
    store: SessionStore = Depends(get_session_store),
):
    """Exchange the operator credentials for a bearer token."""
    if not verifier.verify(credentials.username, credentials.password):
        logger.info("Rejected login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    token = await store.issue()
    return LoginResponse(token=token)


@router.get("/verify", response_model=VerifyResponse)
async def verify(_token: str = Depends(require_session)):
    """Check that the bearer token is still valid."""
    return VerifyResponse(valid=True)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    authorization: Optional[str] = Header(default=None),
    store: SessionStore = Depends(get_session_store),
):
    """Revoke the bearer token if one was sent. Always succeeds."""
    token = extract_bearer_token(authorization)
    if token:
        await store.revoke(token)
    return MessageResponse(message="Logged out")
