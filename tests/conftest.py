# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from datetime import datetime, timedelta, timezone
from itertools import count

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from patidestek.core.security import create_access_token, hash_password
from patidestek.db.session import Base
from patidestek.db.session import get_db as app_get_session
from patidestek.main import app as fastapi_app
from patidestek.models import Category, Post, PostStatus, Tag, User, UserRole

TEST_DB_URL = "sqlite://"
DEFAULT_PASSWORD = "secret123"

# bcrypt is deliberately slow; hash the shared fixture password once.
_PASSWORD_HASH = hash_password(DEFAULT_PASSWORD)
_EMAIL_COUNTER = count(1)
_BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

DEFAULT_LOCATION = {
    "province_code": "34",
    "province_name": "İstanbul",
    "district_code": "1421",
    "district_name": "Kadıköy",
    "neighbourhood_name": "Caferağa",
}


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Services commit, so each test wipes the tables instead of rolling back.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory persisting users with the shared test password."""

    def _make_user(
        name: str = "Test User",
        email: str | None = None,
        role: UserRole = UserRole.USER,
        is_banned: bool = False,
    ) -> User:
        user = User(
            name=name,
            email=email or f"user{next(_EMAIL_COUNTER)}@example.com",
            password_hash=_PASSWORD_HASH,
            role=role,
            is_banned=is_banned,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


def headers_for(user: User) -> dict[str, str]:
    token = create_access_token(user.id, user.role.value)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def test_user(make_user: Callable[..., User]) -> User:
    """Create and return the primary test user."""
    return make_user(name="Ayşe Yılmaz", email="ayse@example.com")


@pytest.fixture()
def other_user(make_user: Callable[..., User]) -> User:
    """Create and return a second regular user."""
    return make_user(name="Mehmet Kaya", email="mehmet@example.com")


@pytest.fixture()
def admin_user(make_user: Callable[..., User]) -> User:
    return make_user(name="Admin", email="admin@example.com", role=UserRole.ADMIN)


@pytest.fixture()
def banned_user(make_user: Callable[..., User]) -> User:
    return make_user(name="Banned User", email="banned@example.com", is_banned=True)


@pytest.fixture()
def auth_token(test_user: User) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    return headers_for(test_user)


@pytest.fixture()
def other_auth_token(other_user: User) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    return headers_for(other_user)


@pytest.fixture()
def admin_token(admin_user: User) -> dict[str, str]:
    return headers_for(admin_user)


@pytest.fixture()
def banned_token(banned_user: User) -> dict[str, str]:
    return headers_for(banned_user)


@pytest.fixture()
def make_category(db_session: Session) -> Callable[[str], Category]:
    def _make_category(name: str) -> Category:
        category = Category(name=name)
        db_session.add(category)
        db_session.commit()
        db_session.refresh(category)
        return category

    return _make_category


@pytest.fixture()
def make_tag(db_session: Session) -> Callable[[str], Tag]:
    def _make_tag(name: str) -> Tag:
        tag = Tag(name=name)
        db_session.add(tag)
        db_session.commit()
        db_session.refresh(tag)
        return tag

    return _make_tag


@pytest.fixture()
def make_post(db_session: Session, test_user: User) -> Callable[..., Post]:
    """Return a factory persisting listings; approved and owned by ``test_user`` by default.

    ``age_minutes`` places ``created_at`` that many minutes before a fixed base
    time so ordering tests are deterministic.
    """

    def _make_post(
        title: str = "Kayıp kedi aranıyor",
        description: str = "Tekir kedimiz dün akşam kayboldu.",
        status: PostStatus = PostStatus.APPROVED,
        owner: User | None = None,
        category: Category | None = None,
        tags: list[Tag] | None = None,
        age_minutes: int = 0,
        **location: str,
    ) -> Post:
        created_at = _BASE_TIME - timedelta(minutes=age_minutes)
        post = Post(
            title=title,
            description=description,
            status=status,
            owner=owner or test_user,
            category=category,
            created_at=created_at,
            updated_at=created_at,
            **{**DEFAULT_LOCATION, **location},
        )
        post.tags = list(tags or [])
        db_session.add(post)
        db_session.commit()
        db_session.refresh(post)
        return post

    return _make_post


@pytest.fixture()
def post_payload() -> dict[str, object]:
    """Return a valid camelCase body for ``POST /posts``."""
    return {
        "title": "Kayıp Golden Retriever",
        "description": "Beş yaşındaki köpeğimiz Max parkta kayboldu.",
        "imageUrl": "https://example.com/max.jpg",
        "provinceCode": "34",
        "provinceName": "İstanbul",
        "districtCode": "1421",
        "districtName": "Kadıköy",
        "neighbourhoodName": "Caferağa",
    }
