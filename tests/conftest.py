import os

# Must be set before mindscript.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

from mindscript.db.config import build_engine, get_session
from mindscript.main import app
from mindscript.models import User
from mindscript.services.auth_service import create_jwt_token, hash_password


@pytest.fixture(name="session")
def session_fixture():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session: Session):
    """Insert users directly, bypassing the register route."""
    created = []

    def _make_user(password: str = "pw123", **overrides) -> User:
        n = len(created) + 1
        user = User(
            username=overrides.get("username", f"user{n}"),
            firstname=overrides.get("firstname", "First"),
            lastname=overrides.get("lastname", "Last"),
            email=overrides.get("email", f"user{n}@mail.com"),
            password=hash_password(password),
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        created.append(user)
        return user

    return _make_user


@pytest.fixture
def bearer():
    """Build an Authorization header for a user."""

    def _bearer(user: User) -> dict:
        return {"Authorization": f"Bearer {create_jwt_token(user.id, user.email)}"}

    return _bearer


@pytest.fixture
def user(make_user) -> User:
    return make_user()


@pytest.fixture
def headers(user, bearer) -> dict:
    return bearer(user)
