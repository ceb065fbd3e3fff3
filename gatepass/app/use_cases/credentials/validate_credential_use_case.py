"""
Validate Credential Use Case

Decides whether a scanned (or typed) credential opens the gate and records
the attempt in the access log.
"""

import logging
from datetime import datetime
from typing import Callable, Optional, Tuple

from gatepass.app.services.access_logger import AccessLogger
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.base import utc_now
from gatepass.domain.credentials import is_guest_credential, is_manual_code
from gatepass.domain.entities import AccessLogEntry, DenialReason, SubjectType
from gatepass.domain.subject import GuestSubject, MemberSubject, Subject

from .dtos import Decision, SubjectInfo

logger = logging.getLogger(__name__)

# (subject, reason, message); subject is None when nothing matched in the guard's organization
Resolution = Tuple[Optional[Subject], Optional[DenialReason], Optional[str]]

CROSS_TENANT_MESSAGE = "Credential is valid but belongs to a different organization"


class ValidateCredentialUseCase:
    """
    Use case for validating a presented credential at the gate.

    Rules, first match wins:
    1. guest_ prefix -> guest path, otherwise member path
    2. Lookup is scoped to the guard's organization before any other check
    3. A hash known only in another organization -> CROSS_TENANT_MISMATCH (never NOT_FOUND)
    4. Inactive subject -> INACTIVE
    5. now < start -> NOT_YET_VALID, now > end -> EXPIRED (both bounds inclusive)
    6. Otherwise granted

    Denials are returned as Decision values, not errors. Every call appends
    exactly one access log entry, built from the same read as the decision.
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(
        self,
        presented_hash: str,
        guard_organization_id: str,
        guard_id: str,
        guard_name: str,
    ) -> Decision:
        """
        Execute validate credential use case.

        Args:
            presented_hash: Decoded credential string from the scanner
            guard_organization_id: Guard's organization, from the authenticated principal
            guard_id: Guard performing the scan
            guard_name: Guard display name for the log

        Returns:
            Decision (granted, or denied with a reason)
        """
        presented = (presented_hash or "").strip()

        async with self.uow:
            now = self.clock()

            if not presented:
                resolution = (None, DenialReason.NOT_FOUND, "No credential presented")
            elif is_guest_credential(presented):
                resolution = await self._resolve_guest(presented, guard_organization_id)
            else:
                resolution = await self._resolve_member(presented, guard_organization_id)

            return await self._decide_and_record(
                resolution, now, presented, guard_organization_id, guard_id, guard_name
            )

    async def validate_manual_code(
        self,
        code: str,
        guard_organization_id: str,
        guard_id: str,
        guard_name: str,
    ) -> Decision:
        """
        Validate a six digit manual access code typed by the guard.

        Codes are only unique inside one organization, so there is no
        cross-organization lookup: an unknown code is simply NOT_FOUND.
        """
        code = (code or "").strip()

        async with self.uow:
            now = self.clock()

            resolution: Resolution = (
                None,
                DenialReason.NOT_FOUND,
                "Manual code not found. Verify the code is correct.",
            )
            if is_manual_code(code):
                member = await self.uow.members.get_by_manual_code(guard_organization_id, code)
                if member is not None:
                    resolution = (MemberSubject(member), None, None)

            return await self._decide_and_record(
                resolution, now, code, guard_organization_id, guard_id, guard_name
            )

    async def _resolve_member(self, presented: str, organization_id: str) -> Resolution:
        member = await self.uow.members.get_by_credential(organization_id, presented)
        if member is not None:
            return MemberSubject(member), None, None

        foreign = await self.uow.members.find_by_credential_any_organization(presented)
        if foreign is not None:
            logger.warning(
                "CROSS_TENANT_MISMATCH member credential: guard_org=%s owner_org=%s member=%s",
                organization_id,
                foreign.organization_id,
                foreign.id,
            )
            return None, DenialReason.CROSS_TENANT_MISMATCH, CROSS_TENANT_MESSAGE

        return (
            None,
            DenialReason.NOT_FOUND,
            "Credential not found. Verify the code is valid and up to date.",
        )

    async def _resolve_guest(self, presented: str, organization_id: str) -> Resolution:
        credential = await self.uow.guest_credentials.get_by_hash(organization_id, presented)
        if credential is None:
            foreign = await self.uow.guest_credentials.find_by_hash_any_organization(presented)
            if foreign is not None:
                logger.warning(
                    "CROSS_TENANT_MISMATCH guest credential: guard_org=%s owner_org=%s guest=%s",
                    organization_id,
                    foreign.organization_id,
                    foreign.guest_id,
                )
                return None, DenialReason.CROSS_TENANT_MISMATCH, CROSS_TENANT_MESSAGE
            return None, DenialReason.NOT_FOUND, "Guest credential not found"

        guest = await self.uow.guests.get_by_id(credential.guest_id)
        if guest is None:
            logger.error("Guest credential %s has no guest record", credential.id)
            return None, DenialReason.NOT_FOUND, "Guest credential not found"

        host = await self.uow.members.get_by_id(guest.host_member_id)
        return GuestSubject(guest=guest, credential=credential, host=host), None, None

    def _evaluate(self, subject: Subject, now: datetime) -> Tuple[Optional[DenialReason], str]:
        """Shared active/window rules. Returns (None, message) on grant."""
        is_guest = subject.subject_type == SubjectType.guest

        if not subject.is_active:
            if is_guest:
                return DenialReason.INACTIVE, "Guest credential is inactive"
            return (
                DenialReason.INACTIVE,
                f"Member {subject.name} is inactive. Contact the administrator.",
            )

        valid_from = subject.valid_from
        if valid_from is not None and now < valid_from:
            return (
                DenialReason.NOT_YET_VALID,
                f"Guest access has not started. Valid from: {valid_from.isoformat()}",
            )

        valid_until = subject.valid_until
        if valid_until is None or now > valid_until:
            if is_guest:
                return (
                    DenialReason.EXPIRED,
                    f"Guest access has expired. Valid until: {valid_until.isoformat()}",
                )
            return (
                DenialReason.EXPIRED,
                f"Credential expired for {subject.name}. Please request a new code.",
            )

        if is_guest:
            return None, "Access granted for guest"
        return None, "Access granted"

    async def _decide_and_record(
        self,
        resolution: Resolution,
        now: datetime,
        presented: str,
        organization_id: str,
        guard_id: str,
        guard_name: str,
    ) -> Decision:
        subject, reason, message = resolution
        if subject is not None:
            reason, message = self._evaluate(subject, now)

        granted = reason is None

        # Decision and log entry come from this single read; a failed log write
        # rolls the session back, so nothing below may touch loaded entities.
        decision = Decision(
            granted=granted,
            reason=reason,
            message=message,
            subject=SubjectInfo(**subject.payload()) if granted else None,
            checked_at=now,
        )
        entry = AccessLogEntry(
            organization_id=organization_id,
            subject_id=subject.id if subject else None,
            subject_name=subject.name if subject else None,
            subject_type=subject.subject_type if subject else None,
            guard_id=guard_id,
            guard_name=guard_name,
            timestamp=now,
            granted=granted,
            credential_hash=presented[:128],
            denial_reason=reason,
            purpose=subject.purpose if subject else None,
        )
        subject_label = f"{entry.subject_type.value}={entry.subject_id}" if subject else "-"

        decision.audit_recorded = await AccessLogger(self.uow).record(entry)

        if granted:
            logger.info(
                "Access granted: organization=%s %s guard=%s",
                organization_id,
                subject_label,
                guard_id,
            )
        else:
            logger.info(
                "Access denied: organization=%s reason=%s %s guard=%s",
                organization_id,
                reason.value,
                subject_label,
                guard_id,
            )

        return decision
