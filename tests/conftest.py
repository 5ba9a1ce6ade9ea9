import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-cornerstones")
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["RUN_STARTUP_DDL"] = "false"
os.environ.pop("CONTENT_TRANSFORM_BASE_URL", None)

from dataclasses import dataclass
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from cornerstones.db.database import Base, SessionLocal, engine
from cornerstones.main import app


@dataclass
class Account:
    id: int
    email: str
    role: str
    headers: dict


@pytest.fixture()
def db_setup():
    # Fresh schema per test keeps join codes and memberships independent
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    app.dependency_overrides.clear()


@pytest.fixture()
def client(db_setup):
    return TestClient(app)


@pytest.fixture()
def session(db_setup):
    with SessionLocal() as db:
        yield db


@pytest.fixture()
def make_account(client):
    def _make(role: str = "student", full_name: str | None = None) -> Account:
        email = f"{role}-{uuid4().hex[:8]}@cornerstones.edu"
        r = client.post(
            "/auth/register",
            json={
                "full_name": full_name or f"{role.title()} User",
                "email": email,
                "password": "correct-horse",
                "role": role,
            },
        )
        assert r.status_code == 201, r.text
        r = client.post("/auth/login", json={"email": email, "password": "correct-horse"})
        assert r.status_code == 200, r.text
        token = r.json()["access_token"]
        return Account(
            id=client.get("/auth/me", headers={"Authorization": f"Bearer {token}"}).json()["id"],
            email=email,
            role=role,
            headers={"Authorization": f"Bearer {token}"},
        )

    return _make


@pytest.fixture()
def teacher(make_account):
    return make_account("teacher", "Ms Teacher")


@pytest.fixture()
def student(make_account):
    return make_account("student", "Sam Student")
