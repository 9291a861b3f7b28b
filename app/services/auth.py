"""
Authenticator: login issues a signed token and records it in the token ledger,
logout removes it, and every protected request needs both a valid signature
and a ledger row.
"""

import logging

import jwt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import InvalidCredential, NotFound, Unauthenticated, ValidationError
from app.core.security import create_access_token, decode_access_token, hash_password, verify_password
from app.models import Token, User
from app.schemas.auth import Principal, RegisterRequest

logger = logging.getLogger(__name__)


def register_user(db: Session, body: RegisterRequest) -> User:
    """Create a user with a salted password hash. Duplicate email raises ValidationError."""
    user = User(
        name=body.name,
        email=body.email,
        password_hash=hash_password(body.password),
        role=body.role,
    )
    try:
        db.add(user)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ValidationError("Email already exists") from e
    db.refresh(user)
    logger.info("Registered user id=%s role=%s", user.id, user.role)
    return user


def issue_token(db: Session, email: str, password: str) -> str:
    """
    Verify credentials and return a new bearer token recorded in the ledger.

    Raises NotFound for an unknown (or soft-deleted) email and
    InvalidCredential for a wrong password.
    """
    user = (
        db.query(User)
        .filter(User.email == email, User.deleted_at.is_(None))
        .first()
    )
    if user is None:
        raise NotFound("Email not found")
    if not verify_password(password, user.password_hash):
        raise InvalidCredential("Invalid password")

    token = create_access_token(user_id=user.id, role=user.role, email=user.email)
    try:
        db.add(Token(user_id=user.id, token=token))
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Issued token for user id=%s", user.id)
    return token


def revoke_token(db: Session, token: str) -> None:
    """Remove a token from the ledger. Revoking an unknown token is not an error."""
    try:
        deleted = (
            db.query(Token)
            .filter(Token.token == token)
            .delete(synchronize_session=False)
        )
        db.commit()
    except Exception:
        db.rollback()
        raise
    if deleted:
        logger.info("Revoked token (ledger rows removed=%s)", deleted)


def revoke_user_tokens(db: Session, user_id: int) -> int:
    """Delete every ledger row of a user. Does not commit; runs inside the caller's transaction."""
    return (
        db.query(Token)
        .filter(Token.user_id == user_id)
        .delete(synchronize_session=False)
    )


def authenticate(db: Session, token: str) -> Principal:
    """
    Resolve a bearer token to a Principal.

    The signature and exp claim prove integrity; the ledger row proves the
    session is still live. Both are required.
    """
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError as e:
        raise Unauthenticated("Invalid token") from e

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError) as e:
        raise Unauthenticated("Invalid token payload") from e
    role = payload.get("role")
    email = payload.get("email")
    if not role or not email:
        raise Unauthenticated("Invalid token payload")

    live = db.query(Token.id).filter(Token.token == token).first()
    if live is None:
        raise Unauthenticated("Invalid token")
    return Principal(id=user_id, role=role, email=email)
