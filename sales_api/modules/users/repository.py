# sales_api/modules/users/repository.py
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sales_api.shared.database.models import Role, User


class UserRepository:
    """
    Data access for accounts and roles
    """

    def __init__(self, db: Session):
        self.db = db

    # ==================== ROLES ====================

    def get_role(self, name: str) -> Optional[Role]:
        return self.db.query(Role).filter(Role.name == name).first()

    def create_role(self, name: str) -> Role:
        try:
            role = Role(name=name)
            self.db.add(role)
            self.db.commit()
            self.db.refresh(role)
            return role
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def get_or_create_role(self, name: str) -> Role:
        return self.get_role(name) or self.create_role(name)

    # ==================== USERS ====================

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def create_user(self, user_data: dict, roles: Optional[list] = None) -> User:
        """Create an account; ``user_data`` must already carry ``password_hash``"""
        try:
            user = User(**user_data)
            for role in roles or []:
                user.roles.append(role)
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

