from uuid import uuid4

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


def generate_id() -> str:
    """Primary keys are opaque 32-char hex strings."""
    return uuid4().hex

# Async engine and session factory
def get_engine(database_url: str, **kwargs):
    return create_async_engine(database_url, **kwargs)

def get_session_factory(engine):
    return sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
