"""Shared fixtures: a throwaway SQLite database per test."""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from app import main as main_module
from app.db import session as db_session
from app.db.base import Base
from app.db.seed import ensure_seed_data
from app.main import app
from app.models import Restaurant, User
from app.schemas.restaurant import RestaurantCreate
from app.schemas.user import UserCreate
from app.services.restaurant_service import register_restaurant
from app.services.user_service import register_user


def _prepare_db(tmp_path: Path, monkeypatch) -> sessionmaker:
    engine = db_session.build_engine(f"sqlite:///{tmp_path / 'ledger.db'}")
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    monkeypatch.setattr(db_session, "engine", engine)
    monkeypatch.setattr(db_session, "SessionLocal", testing_session_local)
    monkeypatch.setattr(main_module, "engine", engine)
    monkeypatch.setattr(main_module, "SessionLocal", testing_session_local)
    with testing_session_local() as session:
        ensure_seed_data(session)
    return testing_session_local


@pytest.fixture()
def session_local(tmp_path: Path, monkeypatch) -> sessionmaker:
    return _prepare_db(tmp_path, monkeypatch)


@pytest.fixture()
def db(session_local: sessionmaker) -> Iterator[Session]:
    with session_local() as session:
        yield session


@pytest.fixture()
def client(session_local: sessionmaker) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_user(db: Session) -> Callable[..., User]:
    def _make_user(email: str, password: str = "secret123", first_name: str = "Test", last_name: str = "User") -> User:
        return register_user(
            db,
            UserCreate(email_address=email, password=password, first_name=first_name, last_name=last_name),
        )

    return _make_user


@pytest.fixture()
def make_restaurant(db: Session) -> Callable[..., Restaurant]:
    def _make_restaurant(owner: User, name: str = "Bistro") -> Restaurant:
        return register_restaurant(db, owner.id, RestaurantCreate(name=name))

    return _make_restaurant


@pytest.fixture()
def api_user(client: TestClient) -> Callable[..., tuple[int, dict[str, str]]]:
    """Register through the API and return the new user id with auth headers."""

    def _api_user(email: str, password: str = "secret123") -> tuple[int, dict[str, str]]:
        response = client.post(
            "/api/v1/auth/register",
            json={"emailAddress": email, "password": password, "firstName": "Api", "lastName": "User"},
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return body["user"]["id"], {"Authorization": f"Bearer {body['token']}"}

    return _api_user
