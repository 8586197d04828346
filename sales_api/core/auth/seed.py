# sales_api/core/auth/seed.py
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sales_api.config.settings import settings
from sales_api.modules.users.repository import UserRepository
from .security import hash_password

logger = logging.getLogger(__name__)


class SeedError(RuntimeError):
    """Startup cannot continue without the administrator account"""


def seed_admin_user(db: Session) -> None:
    """
    Ensure the administrator role and account exist.

    Safe to run on every start: existing role and account are left untouched.
    """
    repository = UserRepository(db)

    role = repository.get_role(settings.admin_role)
    if role is None:
        role = repository.create_role(settings.admin_role)
        logger.info(f"Created role '{role.name}'")

    admin = repository.get_by_username(settings.admin_username)
    if admin is not None:
        return

    try:
        admin = repository.create_user(
            {
                "username": settings.admin_username,
                "email": settings.admin_email,
                "password_hash": hash_password(settings.admin_password),
            },
            roles=[role],
        )
    except SQLAlchemyError as e:
        raise SeedError("Failed to create the admin user") from e

    logger.info(f"Created admin user '{admin.username}'")
