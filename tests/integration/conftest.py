import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from gatepass.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from gatepass.api.utils.jwt import generate_jwt
from gatepass.depends import get_unit_of_work


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from gatepass.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def admin_headers():
    return {"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY}


def auth_headers(user_id: str, organization_id: str, role: str, name: str = "") -> dict:
    token = generate_jwt(user_id, organization_id, role, name=name)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def communities(client, admin_headers):
    """
    Two organizations with one resident each:
    org-1 / M1 (Maria) and org-2 / M2 (Ken).
    """
    for org_id, name in (("org-1", "Sunset Hills"), ("org-2", "Harbor Towers")):
        response = await client.post(
            "/admin/organizations",
            json={"id": org_id, "name": name, "community_type": "house_based"},
            headers=admin_headers,
        )
        assert response.status_code == 201

    for org_id, member_id, name, email in (
        ("org-1", "M1", "Maria Lopez", "maria@example.com"),
        ("org-2", "M2", "Ken Ito", "ken@example.com"),
    ):
        response = await client.post(
            f"/admin/organizations/{org_id}/members",
            json={
                "id": member_id,
                "name": name,
                "email": email,
                "home_address": "Lot 12",
                "vehicle_info": "ABC-123",
            },
            headers=admin_headers,
        )
        assert response.status_code == 201

    return {
        "member_1": auth_headers("M1", "org-1", "member", name="Maria Lopez"),
        "member_2": auth_headers("M2", "org-2", "member", name="Ken Ito"),
        "guard_1": auth_headers("guard-1", "org-1", "guard", name="Pat"),
        "guard_2": auth_headers("guard-2", "org-2", "guard", name="Sam"),
        "admin_1": auth_headers("admin-1", "org-1", "admin", name="Alex"),
    }
