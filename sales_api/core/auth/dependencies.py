# sales_api/core/auth/dependencies.py
from typing import List

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from sales_api.config.database import get_db
from sales_api.shared.database.models import User
from sales_api.shared.responses import ResponseMessages
from .security import InvalidTokenError, TokenClaims, decode_access_token, extract_bearer_token


def get_token_claims(request: Request) -> TokenClaims:
    """
    Claims of the current request.

    The auth gate decodes the token before routing; routes mounted on a
    bypassed path still get their own header decoded here.
    """
    claims = getattr(request.state, "claims", None)
    if claims is not None:
        return claims

    token = extract_bearer_token(request.headers.get("Authorization"))
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ResponseMessages.NOT_LOGGED_IN,
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        claims = decode_access_token(token)
    except InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
    request.state.claims = claims
    return claims


def get_current_user(
    claims: TokenClaims = Depends(get_token_claims),
    db: Session = Depends(get_db)
) -> User:
    """Load the account named by the request's token"""
    user = db.query(User).filter(User.username == claims.username).first()
    if user is None or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ResponseMessages.NOT_LOGGED_IN,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def require_roles(allowed_roles: List[str]):
    """Dependency factory that admits users holding any of ``allowed_roles``"""
    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if not any(role in allowed_roles for role in current_user.role_names):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=ResponseMessages.FORBIDDEN,
            )
        return current_user
    return role_checker
