from typing import Iterable
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from sales_api.config.settings import settings
from sales_api.core.auth.security import InvalidTokenError, decode_access_token, extract_bearer_token
from sales_api.shared.responses import ResponseMessages, error_response
import time
import logging

logger = logging.getLogger(__name__)

def is_bypassed(path: str, bypass_paths: Iterable[str]) -> bool:
    """Segment-wise, case-insensitive prefix match: /docs matches /docs/x but not /docsx"""
    path = path.rstrip("/").lower() or "/"
    if path == "/":
        return True
    for prefix in bypass_paths:
        prefix = prefix.rstrip("/").lower()
        if prefix and (path == prefix or path.startswith(prefix + "/")):
            return True
    return False

def setup_middleware(app: FastAPI):
    """Configure all middleware for the application"""

    # Registered first so it sits innermost; CORS preflights never reach it
    @app.middleware("http")
    async def authenticate_request(request: Request, call_next):
        if request.method == "OPTIONS" or is_bypassed(request.url.path, settings.auth_bypass_paths):
            return await call_next(request)

        token = extract_bearer_token(request.headers.get("Authorization"))
        if token is None:
            return error_response(status.HTTP_401_UNAUTHORIZED, ResponseMessages.NOT_LOGGED_IN)

        try:
            claims = decode_access_token(token)
        except InvalidTokenError as e:
            logger.info(f"Rejected token for {request.method} {request.url.path}: {e}")
            return error_response(status.HTTP_401_UNAUTHORIZED, ResponseMessages.NOT_LOGGED_IN)

        # Scoped to this request only
        request.state.claims = claims
        return await call_next(request)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.4f}s"
        )

        return response

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With"
        ],
        max_age=3600
    )
