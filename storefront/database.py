# storefront/database.py
from sqlmodel import SQLModel, create_engine, Session

from storefront.core.config import get_settings

settings = get_settings()

# ---------------------------------------------------------
# Database engine
#
# Postgres (production):
#   - sslmode=require   : enforce SSL when running in the cloud
#   - pool_pre_ping=True: validate connections before using them
#
# SQLite (local runs / tests):
#   - check_same_thread=False: FastAPI may hand the connection
#     to a different worker thread than the one that opened it
# ---------------------------------------------------------


def build_engine_url(db_url: str, ssl: bool = True) -> str:
    """
    Append sslmode=require to Postgres URLs if it is not already present.
    Other backends are returned unchanged.
    """
    if not ssl or not db_url.startswith("postgresql"):
        return db_url
    if "sslmode=" in db_url:
        return db_url
    if "?" in db_url:
        return db_url + "&sslmode=require"
    return db_url + "?sslmode=require"


db_url = build_engine_url(settings.DATABASE_URL, settings.DATABASE_SSL)

connect_args = {"check_same_thread": False} if db_url.startswith("sqlite") else {}

engine = create_engine(
    db_url,
    echo=settings.DATABASE_ECHO,  # set to True if you want to debug SQL queries
    pool_pre_ping=True,
    connect_args=connect_args,
)


def create_db_and_tables() -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup.
    """
    SQLModel.metadata.create_all(engine)


def get_session():
    """
    FastAPI dependency that yields a SQLModel Session.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
