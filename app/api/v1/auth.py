"""Register/login/logout routes and auth dependencies (get_current_user, require_role)."""

from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import Forbidden, Unauthenticated
from app.core.security import ROLE_ADMIN
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    Principal,
    RegisterRequest,
    RegisterResponse,
)
from app.schemas.common import MessageResponse
from app.services.auth import authenticate, issue_token, register_user, revoke_token

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> str:
    """Dependency: raw token from 'Authorization: Bearer <token>'. Raises 401 if absent."""
    if credentials is None or not credentials.credentials:
        raise Unauthenticated("No token provided")
    return credentials.credentials


def get_current_user(
    token: Annotated[str, Depends(get_bearer_token)],
    db: Annotated[Session, Depends(get_db)],
) -> Principal:
    """Dependency: require a valid, non-revoked bearer token and return the principal."""
    return authenticate(db, token)


def require_role(role: str) -> Callable[..., Principal]:
    """Dependency factory: pass through only principals whose role equals `role` exactly."""

    def dependency(
        principal: Annotated[Principal, Depends(get_current_user)],
    ) -> Principal:
        if principal.role != role:
            raise Forbidden(f"Forbidden: need role {role}")
        return principal

    return dependency


require_admin = require_role(ROLE_ADMIN)


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> RegisterResponse:
    """Create an account. Role defaults to 'user'."""
    user = register_user(db, body)
    return RegisterResponse(id=user.id)


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> LoginResponse:
    """
    Authenticate with email and password; returns a bearer token.
    Include the token in the Authorization header as: Bearer <token>
    """
    token = issue_token(db, body.email, body.password)
    return LoginResponse(token=token)


@router.post("/logout", response_model=MessageResponse)
def logout(
    token: Annotated[str, Depends(get_bearer_token)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Revoke the presented token. Idempotent: an already revoked token still returns 200."""
    revoke_token(db, token)
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=Principal)
def me(
    principal: Annotated[Principal, Depends(get_current_user)],
) -> Principal:
    """Return the authenticated principal."""
    return principal
