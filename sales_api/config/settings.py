from pydantic import Field
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # App Info
    app_name: str = "Sales Records API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str

    # Security
    secret_key: str
    algorithm: str = "HS256"
    jwt_issuer: str = "sales-api"
    jwt_audience: str = "sales-api-clients"
    access_token_expire_minutes: int = 60

    # Seeded administrator
    admin_username: str = "admin"
    admin_email: str = "admin@domain.com"
    admin_password: str = Field(default="Nesl@admin123", description="Password of the seeded admin account")
    admin_role: str = "admin"
    default_user_role: str = "user"

    # Paths reachable without a bearer token
    auth_bypass_paths: List[str] = [
        "/api/users/login",
        "/api/users/register",
        "/api/health",
        "/docs",
        "/redoc",
        "/openapi.json",
        "/swagger",
    ]

    # CORS
    allowed_origins: List[str] = ["http://localhost:3000"]

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    class Config:
        env_file = ".env"
        case_sensitive = False

settings = Settings()
