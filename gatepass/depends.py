from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from gatepass.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from gatepass.api.utils.jwt import verify_jwt
from gatepass.domain.entities import PrincipalRole
from gatepass.domain.principal import Principal

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Verify the bearer token presented by a member, guard or admin.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload: user_id (member, guard or admin ID), tenant_id
        (organization ID), role (member, guard, admin) and an optional name
        that is recorded as the guard name on scans

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    token = credentials.credentials
    payload = verify_jwt(token)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return payload


async def get_current_principal(current_user: dict = Depends(get_current_user)) -> Principal:
    """
    Build the Principal handed to use cases.

    The tenant_id claim is the only organization binding the service trusts;
    nothing in a presented credential can override it.
    """
    try:
        return Principal(
            id=str(current_user["user_id"]),
            organization_id=str(current_user["tenant_id"]),
            role=PrincipalRole(current_user["role"]),
            name=current_user.get("name", ""),
        )
    except (KeyError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token is missing required claims",
        )
