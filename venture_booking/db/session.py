"""Database session management."""
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from venture_booking.config.settings import settings


def build_engine(url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given URL.

    Pool sizing only applies to server databases; SQLite gets a
    thread-tolerant connection instead.
    """
    if make_url(url).get_backend_name() == "sqlite":
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        url,
        pool_pre_ping=True,
        echo=echo,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_POOL_OVERFLOW,
        connect_args=settings.DB_CONNECT_ARGS,
    )


engine = build_engine(settings.get_database_url(), echo=settings.DATABASE_ECHO)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function that yields a database session.

    Usage in FastAPI endpoints:
        @router.get("/items/")
        def read_items(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
