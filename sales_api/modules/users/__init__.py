# sales_api/modules/users/__init__.py
"""
Users module - accounts and bearer tokens

- POST /users/register: create an account (no token required)
- POST /users/login: obtain a bearer token (no token required)
- GET /users/me: profile of the token's owner

Architecture:
- router.py: FastAPI endpoints
- service.py: business logic
- repository.py: data access
"""

from .router import router as users_router
from .service import UserService
from .repository import UserRepository

__all__ = [
    "users_router",
    "UserService",
    "UserRepository"
]
