import pytest
from httpx import AsyncClient
from sqlmodel import select

from session_auth.domain.base import utc_now
from session_auth.domain.entities import Session, User
from tests.utils.headers import bearer


@pytest.mark.asyncio
async def test_validate_session(client: AsyncClient, alice):
    response = await client.post("/auth/validate-session", json={"token": alice["token"]})

    assert response.status_code == 200
    assert response.json() == alice["user"]


@pytest.mark.asyncio
async def test_validate_unknown_token(client: AsyncClient):
    response = await client.post("/auth/validate-session", json={"token": "0" * 64})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_SESSION"


@pytest.mark.asyncio
async def test_expired_session_is_indistinguishable_from_unknown(
    client: AsyncClient, db_session, alice
):
    user = (await db_session.exec(select(User))).one()
    expired = Session(user_id=user.id, token="e" * 64, expires_at=utc_now())
    db_session.add(expired)
    await db_session.commit()

    expired_response = await client.post("/auth/validate-session", json={"token": "e" * 64})
    unknown_response = await client.post("/auth/validate-session", json={"token": "u" * 64})

    assert expired_response.status_code == unknown_response.status_code == 401
    assert expired_response.json() == unknown_response.json()

    me = await client.get("/users/me", headers=bearer("e" * 64))
    assert me.status_code == 401


@pytest.mark.asyncio
async def test_inactive_account_session(client: AsyncClient, db_session, alice):
    user = (await db_session.exec(select(User))).one()
    user.is_active = False
    db_session.add(user)
    await db_session.commit()

    response = await client.post("/auth/validate-session", json={"token": alice["token"]})

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "ACCOUNT_INACTIVE"
