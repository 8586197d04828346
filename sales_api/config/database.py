from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from .settings import settings

def _engine_options(url: str) -> dict:
    """SQLite needs a shared connection for in-memory databases"""
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True, "pool_recycle": 300}

    options = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        options["poolclass"] = StaticPool
    return options

# Create engine
engine = create_engine(
    settings.database_url,
    echo=settings.debug,
    **_engine_options(settings.database_url)
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()

# Database dependency
def get_db():
    """Database dependency for FastAPI"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
