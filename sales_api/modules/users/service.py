# sales_api/modules/users/service.py
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from sales_api.config.settings import settings
from sales_api.core.auth.schemas import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from sales_api.core.auth.security import create_access_token, hash_password, verify_password
from sales_api.shared.database.models import User
from sales_api.shared.responses import ResponseMessages, ServiceResult
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    Registration, login and profile lookups
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = UserRepository(db)

    def register(self, request: RegisterRequest) -> ServiceResult:
        try:
            if self.repository.get_by_username(request.username):
                return ServiceResult.conflict(f"Username '{request.username}' already exists")

            role = self.repository.get_or_create_role(settings.default_user_role)
            user = self.repository.create_user(
                {
                    "username": request.username,
                    "email": request.email,
                    "password_hash": hash_password(request.password),
                },
                roles=[role],
            )
            logger.info(f"Registered user {user.username} (id={user.id})")
            return ServiceResult.created(UserResponse.model_validate(user))
        except IntegrityError:
            # A concurrent registration won the unique username
            logger.info(f"Username {request.username} taken by a concurrent registration")
            return ServiceResult.conflict(f"Username '{request.username}' already exists")
        except SQLAlchemyError:
            logger.exception(f"Failed to register user {request.username}")
            return ServiceResult.persistence_failure()

    def login(self, request: LoginRequest) -> ServiceResult:
        try:
            user = self.repository.get_by_username(request.username)
        except SQLAlchemyError:
            logger.exception(f"Failed to load user {request.username} for login")
            return ServiceResult.persistence_failure()

        if user is None or not user.is_active or not verify_password(request.password, user.password_hash):
            logger.info(f"Rejected login for {request.username}")
            return ServiceResult.unauthorized()

        token = create_access_token(user.username, user.id, user.role_names)
        return ServiceResult.success(
            TokenResponse(
                access_token=token,
                expires_in=settings.access_token_expire_minutes * 60,
            )
        )

    def profile(self, user: User) -> ServiceResult:
        return ServiceResult.success(UserResponse.model_validate(user))
