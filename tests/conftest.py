# tests/conftest.py
import asyncio
import os
from uuid import uuid4

# must be set before doctor_profiles.config.settings is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select
from sqlalchemy.pool import NullPool

from doctor_profiles.core.middleware import get_db
from doctor_profiles.db.base import Base, get_engine, get_session_factory
from doctor_profiles.db.models import DoctorModel, UserModel
from doctor_profiles.main import app



@pytest.fixture
def session_factory(tmp_path):
    # NullPool: the test thread and the TestClient thread run separate event loops
    engine = get_engine(f"sqlite+aiosqlite:///{tmp_path / 'doctors.db'}", poolclass=NullPool)

    async def create_schema():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(create_schema())
    yield get_session_factory(engine)
    asyncio.run(engine.dispose())


@pytest.fixture
def db_call(session_factory):
    """Run ``fn(session)`` to completion against the test database."""
    def _call(fn):
        async def _run():
            async with session_factory() as session:
                return await fn(session)
        return asyncio.run(_run())
    return _call


@pytest.fixture
def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_call):
    def _make(**fields) -> str:
        fields.setdefault("email", f"{uuid4().hex[:8]}@example.com")

        async def _add(session):
            user = UserModel(**fields)
            session.add(user)
            await session.commit()
            return user.id

        return db_call(_add)
    return _make


@pytest.fixture
def fetch_user(db_call):
    def _fetch(user_id: str):
        return db_call(lambda session: session.get(UserModel, user_id))
    return _fetch


@pytest.fixture
def delete_user(db_call):
    def _delete(user_id: str) -> None:
        async def _remove(session):
            await session.delete(await session.get(UserModel, user_id))
            await session.commit()
        db_call(_remove)
    return _delete


@pytest.fixture
def count_doctors(db_call):
    def _count(user_id: str = None) -> int:
        async def _run(session):
            query = select(func.count(DoctorModel.id))
            if user_id is not None:
                query = query.where(DoctorModel.user_id == user_id)
            return (await session.execute(query)).scalar_one()
        return db_call(_run)
    return _count


@pytest.fixture
def profile_body():
    def _body(user_id: str, **overrides) -> dict:
        body = {
            "userId": user_id,
            "name": "A. Perera",
            "specialization": "Cardiology",
            "hospital": "General Hospital",
            "location": "Colombo",
            "experience": 5,
            "consultationFee": 3000,
        }
        body.update(overrides)
        return body
    return _body
