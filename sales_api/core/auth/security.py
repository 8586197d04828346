# sales_api/core/auth/security.py
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import List, Optional

import jwt
from passlib.context import CryptContext

from sales_api.config.settings import settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class InvalidTokenError(Exception):
    """Raised when a bearer token cannot be trusted"""


@dataclass(frozen=True)
class TokenClaims:
    """Identity decoded from one request's token. Never shared between requests."""
    username: str
    user_id: Optional[int]
    roles: List[str] = field(default_factory=list)
    expires_at: Optional[datetime] = None


# ==================== PASSWORDS ====================

def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return pwd_context.verify(password, password_hash)
    except ValueError:
        # Malformed hash stored for the account
        return False


# ==================== TOKENS ====================

def create_access_token(
    username: str,
    user_id: int,
    roles: List[str],
    expires_minutes: Optional[int] = None
) -> str:
    """Issue a signed JWT for the given account"""
    now = datetime.now(timezone.utc)
    expire = now + timedelta(minutes=expires_minutes or settings.access_token_expire_minutes)
    payload = {
        "sub": username,
        "uid": user_id,
        "roles": list(roles),
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> TokenClaims:
    """Validate signature, issuer, audience and expiry of a token"""
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options={"require": ["exp", "sub", "iss", "aud"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise InvalidTokenError("Token expired") from e
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError(f"Invalid token: {e}") from e

    roles = payload.get("roles") or []
    if not isinstance(roles, list):
        raise InvalidTokenError("Invalid token: roles claim must be a list")

    return TokenClaims(
        username=str(payload["sub"]),
        user_id=payload.get("uid"),
        roles=[str(r) for r in roles],
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token part of an ``Authorization: Bearer`` header"""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
