# sales_api/modules/users/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sales_api.config.database import get_db
from sales_api.core.auth.dependencies import get_current_user
from sales_api.core.auth.schemas import LoginRequest, RegisterRequest
from sales_api.shared.database.models import User
from sales_api.shared.responses import ResponseEnvelope
from .service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/register", response_model=ResponseEnvelope, status_code=201)
async def register(
    request_data: RegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Create an account with the default role. Reachable without a token.
    """
    service = UserService(db)
    return service.register(request_data).to_response()


@router.post("/login", response_model=ResponseEnvelope)
async def login(
    request_data: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Exchange username and password for a bearer token
    """
    service = UserService(db)
    return service.login(request_data).to_response()


@router.get("/me", response_model=ResponseEnvelope)
async def me(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    service = UserService(db)
    return service.profile(current_user).to_response()
