import pytest
from httpx import AsyncClient


async def scan(client: AsyncClient, headers: dict, credential: str):
    response = await client.post(
        "/credentials/validate", json={"credential": credential}, headers=headers
    )
    assert response.status_code == 200
    return response.json()


@pytest.mark.asyncio
async def test_access_logs_paginate_newest_first(client: AsyncClient, communities):
    credential = (
        await client.post("/credentials/members/M1", headers=communities["member_1"])
    ).json()
    for _ in range(3):
        await scan(client, communities["guard_1"], credential["hash"])
    await scan(client, communities["guard_1"], "0" * 64)

    first_page = await client.get("/access-logs?limit=2", headers=communities["guard_1"])
    assert first_page.status_code == 200
    data = first_page.json()
    assert len(data["entries"]) == 2
    assert data["entries"][0]["denial_reason"] == "NOT_FOUND"
    assert data["entries"][0]["timestamp"] >= data["entries"][1]["timestamp"]
    assert data["next_cursor"] is not None

    second_page = await client.get(
        "/access-logs",
        params={"limit": 2, "cursor": data["next_cursor"]},
        headers=communities["guard_1"],
    )
    assert len(second_page.json()["entries"]) == 2
    assert second_page.json()["next_cursor"] is None


@pytest.mark.asyncio
async def test_access_logs_filter_by_subject_type(client: AsyncClient, communities):
    credential = (
        await client.post("/credentials/members/M1", headers=communities["member_1"])
    ).json()
    await scan(client, communities["guard_1"], credential["hash"])
    await scan(client, communities["guard_1"], "guest_unknown")

    response = await client.get(
        "/access-logs?subject_type=member", headers=communities["guard_1"]
    )

    entries = response.json()["entries"]
    assert len(entries) == 1
    assert entries[0]["subject_type"] == "member"


@pytest.mark.asyncio
async def test_member_reads_own_history(client: AsyncClient, communities):
    credential = (
        await client.post("/credentials/members/M1", headers=communities["member_1"])
    ).json()
    await scan(client, communities["guard_1"], credential["hash"])

    own = await client.get("/access-logs/members/M1", headers=communities["member_1"])
    assert own.status_code == 200
    assert own.json()["member_id"] == "M1"
    assert len(own.json()["entries"]) == 1

    forbidden = await client.get("/access-logs", headers=communities["member_1"])
    assert forbidden.status_code == 403
    assert forbidden.json()["error"]["code"] == "INSUFFICIENT_ROLE"
