"""
Unit tests for Validate Credential Use Case
Covers tenant isolation, validity windows and access logging.
"""

import pytest
from unittest.mock import AsyncMock
from datetime import datetime, timedelta

from gatepass.app.use_cases.credentials import ValidateCredentialUseCase
from gatepass.domain.entities import (
    DenialReason,
    Guest,
    GuestCredential,
    Member,
    SubjectType,
)

T = datetime(2024, 6, 1, 12, 0, 0)
MEMBER_HASH = "a" * 64
GUEST_HASH = "guest_abcdefghijklmnopqrstuvwx"


def make_member(**overrides):
    data = dict(
        id="M1",
        organization_id="org-1",
        name="Maria Lopez",
        email="maria@example.com",
        is_active=True,
        home_address="Lot 12",
        vehicle_info="ABC-123",
        credential_hash=MEMBER_HASH,
        credential_expiry=T + timedelta(hours=24),
        manual_code="123456",
    )
    data.update(overrides)
    return Member(**data)


def make_guest_credential(**overrides):
    data = dict(
        id="C1",
        guest_id="G1",
        organization_id="org-1",
        hash=GUEST_HASH,
        purpose="Dinner",
        is_active=True,
        start_at=T,
        end_at=T + timedelta(hours=2),
    )
    data.update(overrides)
    return GuestCredential(**data)


def make_guest():
    return Guest(id="G1", organization_id="org-1", host_member_id="M1", name="Juan Perez")


def setup_member_lookup(mock_uow, member=None, foreign=None):
    mock_uow.members.get_by_credential = AsyncMock(return_value=member)
    mock_uow.members.find_by_credential_any_organization = AsyncMock(return_value=foreign)
    mock_uow.access_logs.create = AsyncMock(side_effect=lambda e: e)


def setup_guest_lookup(mock_uow, credential=None, foreign=None):
    mock_uow.guest_credentials.get_by_hash = AsyncMock(return_value=credential)
    mock_uow.guest_credentials.find_by_hash_any_organization = AsyncMock(return_value=foreign)
    mock_uow.guests.get_by_id = AsyncMock(return_value=make_guest())
    mock_uow.members.get_by_id = AsyncMock(return_value=make_member())
    mock_uow.access_logs.create = AsyncMock(side_effect=lambda e: e)


async def validate(mock_uow, presented, now=T, organization_id="org-1"):
    use_case = ValidateCredentialUseCase(mock_uow, clock=lambda: now)
    return await use_case.execute(
        presented, guard_organization_id=organization_id, guard_id="guard-1", guard_name="Pat"
    )


def logged_entry(mock_uow):
    mock_uow.access_logs.create.assert_called_once()
    return mock_uow.access_logs.create.call_args[0][0]


@pytest.mark.asyncio
async def test_member_credential_granted(mock_uow):
    """Test a valid member credential is granted and logged"""
    setup_member_lookup(mock_uow, member=make_member())

    decision = await validate(mock_uow, MEMBER_HASH)

    assert decision.granted is True
    assert decision.reason is None
    assert decision.subject.subject_id == "M1"
    assert decision.subject.home_address == "Lot 12"
    assert decision.audit_recorded is True

    mock_uow.members.get_by_credential.assert_called_once_with("org-1", MEMBER_HASH)
    entry = logged_entry(mock_uow)
    assert entry.granted is True
    assert entry.subject_id == "M1"
    assert entry.subject_type == SubjectType.member
    assert entry.organization_id == "org-1"
    assert entry.guard_id == "guard-1"
    assert entry.timestamp == T
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_member_credential_expired(mock_uow):
    """Test a member credential past its expiry is denied EXPIRED"""
    setup_member_lookup(mock_uow, member=make_member(credential_expiry=T - timedelta(seconds=1)))

    decision = await validate(mock_uow, MEMBER_HASH)

    assert decision.granted is False
    assert decision.reason == DenialReason.EXPIRED
    assert decision.subject is None
    assert logged_entry(mock_uow).denial_reason == DenialReason.EXPIRED


@pytest.mark.asyncio
async def test_member_credential_valid_at_exact_expiry(mock_uow):
    """Test expiry is inclusive"""
    setup_member_lookup(mock_uow, member=make_member(credential_expiry=T))

    decision = await validate(mock_uow, MEMBER_HASH)

    assert decision.granted is True


@pytest.mark.asyncio
async def test_inactive_member_denied_before_expiry_check(mock_uow):
    """Test an inactive member is denied INACTIVE even with an expired credential"""
    setup_member_lookup(
        mock_uow,
        member=make_member(is_active=False, credential_expiry=T - timedelta(hours=1)),
    )

    decision = await validate(mock_uow, MEMBER_HASH)

    assert decision.granted is False
    assert decision.reason == DenialReason.INACTIVE
    assert "inactive" in decision.message


@pytest.mark.asyncio
async def test_unknown_credential_not_found(mock_uow):
    """Test a hash unknown everywhere is denied NOT_FOUND"""
    setup_member_lookup(mock_uow)

    decision = await validate(mock_uow, "b" * 64)

    assert decision.reason == DenialReason.NOT_FOUND
    entry = logged_entry(mock_uow)
    assert entry.granted is False
    assert entry.subject_id is None


@pytest.mark.asyncio
async def test_cross_tenant_member_credential(mock_uow):
    """Test a member hash owned by another organization is CROSS_TENANT_MISMATCH"""
    setup_member_lookup(mock_uow, foreign=make_member(organization_id="org-2"))

    decision = await validate(mock_uow, MEMBER_HASH)

    assert decision.granted is False
    assert decision.reason == DenialReason.CROSS_TENANT_MISMATCH
    assert decision.subject is None

    # Logged against the guard's organization, without the foreign subject
    entry = logged_entry(mock_uow)
    assert entry.organization_id == "org-1"
    assert entry.subject_id is None
    assert entry.denial_reason == DenialReason.CROSS_TENANT_MISMATCH


@pytest.mark.asyncio
async def test_empty_credential_not_found(mock_uow):
    """Test a blank credential is NOT_FOUND without any lookup"""
    setup_member_lookup(mock_uow)

    decision = await validate(mock_uow, "   ")

    assert decision.reason == DenialReason.NOT_FOUND
    mock_uow.members.get_by_credential.assert_not_called()
    logged_entry(mock_uow)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "offset, granted, reason",
    [
        (timedelta(minutes=-1), False, DenialReason.NOT_YET_VALID),
        (timedelta(0), True, None),
        (timedelta(hours=1), True, None),
        (timedelta(hours=2), True, None),
        (timedelta(hours=3), False, DenialReason.EXPIRED),
    ],
)
async def test_guest_credential_window(mock_uow, offset, granted, reason):
    """Test the guest window [T, T+2h] is inclusive on both ends"""
    setup_guest_lookup(mock_uow, credential=make_guest_credential())

    decision = await validate(mock_uow, GUEST_HASH, now=T + offset)

    assert decision.granted is granted
    assert decision.reason == reason
    entry = logged_entry(mock_uow)
    assert entry.subject_type == SubjectType.guest
    assert entry.subject_id == "G1"
    assert entry.purpose == "Dinner"


@pytest.mark.asyncio
async def test_guest_credential_granted_payload(mock_uow):
    """Test a granted guest decision carries host and purpose"""
    setup_guest_lookup(mock_uow, credential=make_guest_credential())

    decision = await validate(mock_uow, GUEST_HASH, now=T + timedelta(hours=1))

    assert decision.granted is True
    assert decision.subject.subject_type == "guest"
    assert decision.subject.host_member_id == "M1"
    assert decision.subject.host_name == "Maria Lopez"
    assert decision.subject.purpose == "Dinner"
    # Guest hashes never hit the member store
    mock_uow.guest_credentials.get_by_hash.assert_called_once_with("org-1", GUEST_HASH)


@pytest.mark.asyncio
async def test_guest_credential_not_yet_valid_message(mock_uow):
    """Test NOT_YET_VALID reports when the window starts"""
    setup_guest_lookup(mock_uow, credential=make_guest_credential())

    decision = await validate(mock_uow, GUEST_HASH, now=T - timedelta(hours=1))

    assert decision.reason == DenialReason.NOT_YET_VALID
    assert T.isoformat() in decision.message


@pytest.mark.asyncio
async def test_deactivated_guest_credential(mock_uow):
    """Test a deactivated guest credential is denied INACTIVE inside its window"""
    setup_guest_lookup(mock_uow, credential=make_guest_credential(is_active=False))

    decision = await validate(mock_uow, GUEST_HASH, now=T + timedelta(hours=1))

    assert decision.granted is False
    assert decision.reason == DenialReason.INACTIVE


@pytest.mark.asyncio
async def test_cross_tenant_guest_credential(mock_uow):
    """Test a guest hash owned by another organization is CROSS_TENANT_MISMATCH"""
    setup_guest_lookup(mock_uow, foreign=make_guest_credential(organization_id="org-2"))

    decision = await validate(mock_uow, GUEST_HASH, now=T + timedelta(hours=1))

    assert decision.reason == DenialReason.CROSS_TENANT_MISMATCH
    mock_uow.guests.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_log_write_failure_still_returns_decision(mock_uow):
    """Test a failed access log write does not change the decision"""
    setup_member_lookup(mock_uow, member=make_member())
    mock_uow.access_logs.create = AsyncMock(side_effect=RuntimeError("disk full"))

    decision = await validate(mock_uow, MEMBER_HASH)

    assert decision.granted is True
    assert decision.audit_recorded is False
    mock_uow.access_logs.create.assert_called_once()
    mock_uow.rollback.assert_called_once()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_manual_code_granted(mock_uow):
    """Test a six digit manual code resolves the member in the guard's organization"""
    mock_uow.members.get_by_manual_code = AsyncMock(return_value=make_member())
    mock_uow.access_logs.create = AsyncMock(side_effect=lambda e: e)

    use_case = ValidateCredentialUseCase(mock_uow, clock=lambda: T)
    decision = await use_case.validate_manual_code(
        "123456", guard_organization_id="org-1", guard_id="guard-1", guard_name="Pat"
    )

    assert decision.granted is True
    mock_uow.members.get_by_manual_code.assert_called_once_with("org-1", "123456")
    assert logged_entry(mock_uow).subject_id == "M1"


@pytest.mark.asyncio
async def test_malformed_manual_code_not_found(mock_uow):
    """Test a code that is not six digits is NOT_FOUND without a lookup"""
    mock_uow.members.get_by_manual_code = AsyncMock()
    mock_uow.access_logs.create = AsyncMock(side_effect=lambda e: e)

    use_case = ValidateCredentialUseCase(mock_uow, clock=lambda: T)
    decision = await use_case.validate_manual_code(
        "12ab", guard_organization_id="org-1", guard_id="guard-1", guard_name="Pat"
    )

    assert decision.reason == DenialReason.NOT_FOUND
    mock_uow.members.get_by_manual_code.assert_not_called()
    logged_entry(mock_uow)
