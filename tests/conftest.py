"""
Pytest configuration and shared fixtures

- Sets the mandatory environment before any app module is imported
- Runs every test against a fresh in-memory SQLite database
- Provides admin/user bearer headers and an employee factory
"""

import os

# Required env vars must exist BEFORE importing app modules
os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_ENV", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import app.models  # noqa: E402,F401
from app.database import Base, get_db  # noqa: E402
from app.models.user import User, UserRole  # noqa: E402
from app.utils.security import create_access_token, hash_password  # noqa: E402
from main import app as fastapi_app  # noqa: E402


@pytest.fixture
def session_factory():
    """Sessionmaker bound to a throwaway in-memory database"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield TestingSessionLocal
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    fastapi_app.dependency_overrides[get_db] = override_get_db
    yield TestClient(fastapi_app)
    fastapi_app.dependency_overrides.clear()


def _create_user(session_factory, email: str, role: str, password: str = "secret123") -> User:
    db = session_factory()
    try:
        user = User(email=email, name=email.split("@")[0], role=role, hashed_password=hash_password(password))
        db.add(user)
        db.commit()
        db.refresh(user)
        db.expunge(user)
        return user
    finally:
        db.close()


def _bearer(user: User) -> dict:
    token = create_access_token({"id": user.id, "email": user.email, "role": user.role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_user(session_factory) -> User:
    return _create_user(session_factory, "admin@company.com", UserRole.ADMIN)


@pytest.fixture
def regular_user(session_factory) -> User:
    return _create_user(session_factory, "viewer@company.com", UserRole.USER)


@pytest.fixture
def admin_headers(admin_user) -> dict:
    return _bearer(admin_user)


@pytest.fixture
def user_headers(regular_user) -> dict:
    return _bearer(regular_user)


@pytest.fixture
def employee_data():
    """Valid employee payload; pass overrides to vary it"""

    def _make(**overrides):
        payload = {
            "firstName": "Ann",
            "lastName": "Lee",
            "email": "ann@x.com",
            "department": "Engineering",
            "position": "Dev",
            "salary": 90000,
            "hireDate": "2023-01-01",
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def create_employee(client, admin_headers, employee_data):
    """Create an employee through the API and return its JSON"""

    def _create(**overrides):
        response = client.post("/api/employees", json=employee_data(**overrides), headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create


@pytest.fixture
def create_task(client, admin_headers):
    def _create(employee_id: int, **overrides):
        payload = {"title": "Fix bug", "employeeId": employee_id}
        payload.update(overrides)
        response = client.post("/api/tasks", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create
