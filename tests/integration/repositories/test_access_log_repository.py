import pytest
from datetime import datetime

from gatepass.adapter.repositories.access_log_repository import AccessLogRepository
from gatepass.domain.entities import AccessLogEntry, Organization, SubjectType

T = datetime(2024, 6, 1, 12, 0, 0)


@pytest.mark.asyncio
async def test_pagination_keeps_entries_sharing_a_timestamp(db_session):
    """Retried scans logged in the same instant all appear across pages"""
    db_session.add(Organization(id="org-1", name="Sunset Hills"))
    repository = AccessLogRepository(db_session)
    for index in range(5):
        await repository.create(
            AccessLogEntry(
                id=f"entry-{index}",
                organization_id="org-1",
                subject_id="M1",
                subject_type=SubjectType.member,
                guard_id="guard-1",
                guard_name="Pat",
                granted=True,
                credential_hash="a" * 64,
                timestamp=T,
            )
        )
    await db_session.commit()

    seen = []
    cursor = None
    pages = 0
    while True:
        entries, cursor = await repository.get_by_organization_paginated(
            "org-1", limit=2, cursor=cursor
        )
        seen.extend(e.id for e in entries)
        pages += 1
        if cursor is None:
            break

    assert pages == 3
    assert seen == ["entry-4", "entry-3", "entry-2", "entry-1", "entry-0"]
