import asyncio
from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient
from sqlalchemy.orm import sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from session_auth.adapter.repositories.user_repository import UserRepository
from session_auth.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from session_auth.app.use_cases.auth import RegisterCommand, RegisterUseCase
from session_auth.domain.entities import Session, User
from tests.utils.json_compare import PUBLIC_USER_KEYS, find_secret_keys


@pytest.mark.asyncio
async def test_successful_register(client: AsyncClient, db_session, test_data):
    """Register returns the public user, a token and an expiry 24h out"""
    response = await client.post("/auth/register", json=test_data.payload("register_alice"))

    assert response.status_code == 201
    data = response.json()

    assert set(data["user"]) == PUBLIC_USER_KEYS
    assert data["user"]["email"] == "alice@example.com"
    assert data["user"]["first_name"] == "Alice"
    assert data["user"]["last_name"] == "Lee"
    assert data["user"]["is_active"] is True
    assert len(data["token"]) == 64
    assert find_secret_keys(data) == set()

    user = (await db_session.exec(select(User))).one()
    assert user.password_verifier != "password123"
    sessions = (await db_session.exec(select(Session))).all()
    assert len(sessions) == 1
    assert sessions[0].token == data["token"]
    assert sessions[0].user_id == user.id


@pytest.mark.asyncio
async def test_register_duplicate_email(client: AsyncClient, db_session, test_data):
    first = await client.post("/auth/register", json=test_data.payload("register_alice"))
    assert first.status_code == 201

    second = await client.post(
        "/auth/register",
        json=test_data.payload("register_alice", email="ALICE@example.com", first_name="Al"),
    )

    assert second.status_code == 409
    assert second.json()["error"]["code"] == "EMAIL_TAKEN"
    users = (await db_session.exec(select(User))).all()
    assert len(users) == 1


@pytest.mark.asyncio
async def test_register_race_yields_exactly_one_user(client: AsyncClient, db_session, test_data):
    """Second request passes the lookup (as under a race) and hits the unique index"""
    first = await client.post("/auth/register", json=test_data.payload("register_alice"))
    assert first.status_code == 201

    with patch.object(UserRepository, "get_by_email", AsyncMock(return_value=None)):
        second = await client.post(
            "/auth/register", json=test_data.payload("register_alice")
        )

    assert second.status_code == 409
    assert second.json()["error"]["code"] == "EMAIL_TAKEN"

    users = (await db_session.exec(select(User))).all()
    assert len(users) == 1
    sessions = (await db_session.exec(select(Session))).all()
    assert len(sessions) == 1


@pytest.mark.asyncio
async def test_concurrent_registrations_yield_one_success(engine, db_session, test_data):
    """Two sessions register the same email at once; only one row survives"""
    SessionFactory = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    command = RegisterCommand(**test_data.payload("register_alice"))

    async def register():
        async with SessionFactory() as session:
            result = await RegisterUseCase(SqlAlchemyUnitOfWork(session)).execute(command)
        return "ok" if result.is_ok() else result.error.code

    outcomes = await asyncio.gather(register(), register())

    assert sorted(outcomes) == ["EMAIL_TAKEN", "ok"]
    users = (await db_session.exec(select(User))).all()
    assert len(users) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"email": "not-an-email"},
        {"password": "short"},
        {"password": "x" * 101},
        {"first_name": ""},
        {"last_name": "y" * 51},
    ],
)
async def test_register_invalid_input(client: AsyncClient, test_data, overrides):
    response = await client.post(
        "/auth/register", json=test_data.payload("register_alice", **overrides)
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_register_accepts_boundary_lengths(client: AsyncClient, test_data):
    response = await client.post(
        "/auth/register",
        json=test_data.payload(
            "register_alice", password="p" * 100, first_name="A", last_name="L" * 50
        ),
    )

    assert response.status_code == 201
