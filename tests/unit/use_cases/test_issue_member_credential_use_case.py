"""
Unit tests for Issue Member Credential Use Case
Tests business logic in isolation with mocked dependencies.
"""

import pytest
from unittest.mock import AsyncMock
from datetime import datetime, timedelta

from gatepass.app.use_cases.credentials import IssueMemberCredentialUseCase
from gatepass.domain.credentials import derive_manual_code, derive_member_credential_hash
from gatepass.domain.entities import Member, Organization, PrincipalRole
from gatepass.domain.principal import Principal

SECRET = "unit-test-secret"
NOW = datetime(2024, 6, 1, 12, 0, 0)


def make_member(**overrides):
    data = dict(
        id="M1",
        organization_id="org-1",
        name="Maria Lopez",
        email="maria@example.com",
        is_active=True,
    )
    data.update(overrides)
    return Member(**data)


def setup_uow(mock_uow, member, organization=None, foreign=None):
    mock_uow.members.get_by_organization_and_id = AsyncMock(return_value=member)
    mock_uow.members.get_by_id = AsyncMock(return_value=foreign)
    mock_uow.members.update = AsyncMock(side_effect=lambda m: m)
    mock_uow.members.get_by_manual_code = AsyncMock(return_value=None)
    mock_uow.organizations.get_by_id = AsyncMock(
        return_value=organization or Organization(id="org-1", name="Sunset Hills")
    )


@pytest.mark.asyncio
async def test_issue_member_credential_success(mock_uow):
    """Test issuing a credential sets hash, expiry and manual code"""
    # Arrange
    member = make_member()
    setup_uow(mock_uow, member)
    principal = Principal(id="M1", organization_id="org-1", role=PrincipalRole.member)

    # Act
    use_case = IssueMemberCredentialUseCase(mock_uow, secret=SECRET, clock=lambda: NOW)
    result = await use_case.execute(principal, "M1")

    # Assert
    assert result.is_ok()
    response = result.value
    assert response.member_id == "M1"
    assert response.hash == derive_member_credential_hash(
        SECRET, "org-1", "M1", "maria@example.com"
    )
    assert response.expiry == NOW + timedelta(hours=24)
    assert len(response.manual_code) == 6
    assert response.manual_code.isdigit()

    # Verify the member record carries the credential
    assert member.credential_hash == response.hash
    assert member.credential_expiry == response.expiry
    mock_uow.members.update.assert_called_once_with(member)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_reissue_keeps_hash_and_slides_expiry(mock_uow):
    """Test re-issuing returns the same hash with a later expiry"""
    member = make_member()
    setup_uow(mock_uow, member)
    principal = Principal(id="M1", organization_id="org-1", role=PrincipalRole.member)

    first = await IssueMemberCredentialUseCase(
        mock_uow, secret=SECRET, clock=lambda: NOW
    ).execute(principal, "M1")
    second = await IssueMemberCredentialUseCase(
        mock_uow, secret=SECRET, clock=lambda: NOW + timedelta(hours=2)
    ).execute(principal, "M1")

    assert first.value.hash == second.value.hash
    assert first.value.manual_code == second.value.manual_code
    assert second.value.expiry == NOW + timedelta(hours=26)


@pytest.mark.asyncio
async def test_issue_uses_organization_ttl(mock_uow):
    """Test the organization's credential TTL overrides the 24h default"""
    member = make_member()
    setup_uow(
        mock_uow,
        member,
        organization=Organization(id="org-1", name="Sunset Hills", credential_ttl_hours=8),
    )
    principal = Principal(id="G1", organization_id="org-1", role=PrincipalRole.guard)

    result = await IssueMemberCredentialUseCase(
        mock_uow, secret=SECRET, clock=lambda: NOW
    ).execute(principal, "M1")

    assert result.is_ok()
    assert result.value.expiry == NOW + timedelta(hours=8)


@pytest.mark.asyncio
async def test_issue_unknown_member(mock_uow):
    """Test unknown member returns OWNER_NOT_FOUND and writes nothing"""
    setup_uow(mock_uow, None, foreign=None)
    principal = Principal(id="A1", organization_id="org-1", role=PrincipalRole.admin)

    result = await IssueMemberCredentialUseCase(mock_uow, secret=SECRET).execute(
        principal, "missing"
    )

    assert result.is_err()
    assert result.error.code == "OWNER_NOT_FOUND"
    mock_uow.members.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_issue_member_of_other_organization(mock_uow):
    """Test a member from another organization returns UNAUTHORIZED"""
    setup_uow(mock_uow, None, foreign=make_member(organization_id="org-2"))
    principal = Principal(id="G1", organization_id="org-1", role=PrincipalRole.guard)

    result = await IssueMemberCredentialUseCase(mock_uow, secret=SECRET).execute(principal, "M1")

    assert result.is_err()
    assert result.error.code == "UNAUTHORIZED"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_member_cannot_issue_for_another_member(mock_uow):
    """Test a member principal cannot issue someone else's credential"""
    setup_uow(mock_uow, make_member(id="M2"))
    principal = Principal(id="M1", organization_id="org-1", role=PrincipalRole.member)

    result = await IssueMemberCredentialUseCase(mock_uow, secret=SECRET).execute(principal, "M2")

    assert result.is_err()
    assert result.error.code == "UNAUTHORIZED"
    mock_uow.members.update.assert_not_called()


@pytest.mark.asyncio
async def test_manual_code_collision_is_rederived(mock_uow):
    """Test a manual code held by another member is re-derived with the next attempt"""
    member = make_member(id="M2")
    other = make_member(id="M9", manual_code=derive_manual_code(SECRET, "org-1", "M2"))
    setup_uow(mock_uow, member)
    mock_uow.members.get_by_manual_code = AsyncMock(side_effect=[other, None])
    principal = Principal(id="A1", organization_id="org-1", role=PrincipalRole.admin)

    result = await IssueMemberCredentialUseCase(
        mock_uow, secret=SECRET, clock=lambda: NOW
    ).execute(principal, "M2")

    assert result.is_ok()
    assert result.value.manual_code != other.manual_code
    assert result.value.manual_code == derive_manual_code(SECRET, "org-1", "M2", 1)
    assert mock_uow.members.get_by_manual_code.call_count == 2


@pytest.mark.asyncio
async def test_manual_code_held_by_same_member_is_kept(mock_uow):
    """Test re-issuing keeps the member's own code"""
    member = make_member(manual_code=derive_manual_code(SECRET, "org-1", "M1"))
    setup_uow(mock_uow, member)
    mock_uow.members.get_by_manual_code = AsyncMock(return_value=member)
    principal = Principal(id="M1", organization_id="org-1", role=PrincipalRole.member)

    result = await IssueMemberCredentialUseCase(
        mock_uow, secret=SECRET, clock=lambda: NOW
    ).execute(principal, "M1")

    assert result.value.manual_code == member.manual_code
    mock_uow.members.get_by_manual_code.assert_called_once()
