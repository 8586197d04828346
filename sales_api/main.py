import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from sales_api.config.settings import settings
from sales_api.config.database import Base, SessionLocal, engine
from sales_api.core.auth.seed import seed_admin_user
from sales_api.core.middleware import setup_middleware
from sales_api.api.v1.router import api_router
from sales_api.shared.responses import error_response

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

def init_database():
    """Create tables and seed the administrator account"""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_admin_user(db)
    finally:
        db.close()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"🚀 {settings.app_name} starting - version {settings.version}")
    logger.info(f"🌍 Environment: {'Development' if settings.debug else 'Production'}")
    logger.info(f"🔐 JWT issuer={settings.jwt_issuer} audience={settings.jwt_audience}")
    init_database()

    yield

    # Shutdown
    logger.info(f"🛑 {settings.app_name} shutting down")

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="Sale records with JWT authentication",
    lifespan=lifespan
)

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    response = error_response(exc.status_code, str(exc.detail))
    for name, value in (exc.headers or {}).items():
        response.headers[name] = value
    return response

# Setup middleware
setup_middleware(app)

# Include routers
app.include_router(api_router)

# Root endpoint
@app.get("/")
async def root():
    return {
        "message": settings.app_name,
        "version": settings.version,
        "status": "running",
        "docs": "/docs",
        "api": "/api"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "sales_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
