import pytest
from httpx import AsyncClient

TRIP = {"title": "Lisbon", "start_date": "2026-05-01", "end_date": "2026-05-07"}
SCHEDULE = {
    "title": "Tram 28",
    "start_date_time": "2026-05-02T09:00:00",
    "end_date_time": "2026-05-02T11:00:00",
    "memo": "Board at Martim Moniz",
}


async def create_trip(client, headers, payload=TRIP):
    response = await client.post("/trips", json=payload, headers=headers)
    assert response.status_code == 201
    return response.json()


async def share_trip(client, headers, trip_id, regenerate=False):
    response = await client.post(
        f"/trips/{trip_id}/share",
        params={"regenerate": str(regenerate).lower()},
        headers=headers,
    )
    return response


@pytest.mark.asyncio
async def test_share_link_grants_public_access(client: AsyncClient, alice_headers):
    trip = await create_trip(client, alice_headers)

    response = await share_trip(client, alice_headers, trip["id"])
    assert response.status_code == 201
    share = response.json()
    token = share["share_token"]
    assert share["share_url"] == f"/public/trips/{token}"

    # No credentials needed, the secret is the capability
    response = await client.get(f"/public/trips/{token}")
    assert response.status_code == 200
    assert response.json()["id"] == trip["id"]

    response = await client.put(
        f"/public/trips/{token}",
        json={**TRIP, "title": "Lisbon with friends"},
    )
    assert response.status_code == 200

    response = await client.get(f"/trips/{trip['id']}", headers=alice_headers)
    assert response.json()["title"] == "Lisbon with friends"

    response = await client.get(f"/trips/{trip['id']}/share", headers=alice_headers)
    assert response.status_code == 200
    info = response.json()
    assert info["trip_id"] == trip["id"]
    assert "share_token" not in info


@pytest.mark.asyncio
async def test_second_share_without_regenerate_conflicts(client: AsyncClient, alice_headers):
    trip = await create_trip(client, alice_headers)
    first = (await share_trip(client, alice_headers, trip["id"])).json()

    response = await share_trip(client, alice_headers, trip["id"])

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "SHARE_LINK_CONFLICT"
    # The live link is untouched
    response = await client.get(f"/public/trips/{first['share_token']}")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_regenerate_invalidates_previous_secret(client: AsyncClient, alice_headers):
    trip = await create_trip(client, alice_headers)
    old_token = (await share_trip(client, alice_headers, trip["id"])).json()["share_token"]

    response = await share_trip(client, alice_headers, trip["id"], regenerate=True)
    assert response.status_code == 201
    new_token = response.json()["share_token"]
    assert new_token != old_token

    old = await client.get(f"/public/trips/{old_token}")
    new = await client.get(f"/public/trips/{new_token}")

    assert old.status_code == 404
    assert old.json()["error"]["code"] == "SHARE_LINK_NOT_FOUND"
    assert new.status_code == 200


@pytest.mark.asyncio
async def test_unknown_secret_and_missing_link(client: AsyncClient, alice_headers):
    trip = await create_trip(client, alice_headers)

    response = await client.get("/public/trips/definitely-not-issued")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "SHARE_LINK_NOT_FOUND"

    response = await client.get(f"/trips/{trip['id']}/share", headers=alice_headers)
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "SHARE_LINK_NOT_FOUND"


@pytest.mark.asyncio
async def test_public_schedule_crud(client: AsyncClient, alice_headers):
    trip = await create_trip(client, alice_headers)
    token = (await share_trip(client, alice_headers, trip["id"])).json()["share_token"]
    base = f"/public/trips/{token}/schedules"

    response = await client.post(base, json=SCHEDULE)
    assert response.status_code == 201
    schedule = response.json()
    assert schedule["trip_id"] == trip["id"]
    assert schedule["memo"] == "Board at Martim Moniz"

    response = await client.patch(f"{base}/{schedule['id']}", json={"memo": "Bring coins"})
    assert response.status_code == 200
    assert response.json()["memo"] == "Bring coins"
    assert response.json()["title"] == "Tram 28"

    response = await client.get(f"/public/trips/{token}/details")
    assert response.status_code == 200
    assert [s["id"] for s in response.json()["schedules"]] == [schedule["id"]]

    # The owner sees the same schedules
    response = await client.get(f"/trips/{trip['id']}/schedules", headers=alice_headers)
    assert [s["memo"] for s in response.json()] == ["Bring coins"]

    response = await client.delete(f"{base}/{schedule['id']}")
    assert response.status_code == 204

    response = await client.get(f"{base}/{schedule['id']}")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "SCHEDULE_NOT_FOUND"


@pytest.mark.asyncio
async def test_secret_only_unlocks_its_own_trip(client: AsyncClient, alice_headers, bob_headers):
    alice_trip = await create_trip(client, alice_headers)
    bob_trip = await create_trip(client, bob_headers, {**TRIP, "title": "Bob in Oslo"})

    response = await client.post(
        f"/trips/{alice_trip['id']}/schedules", json=SCHEDULE, headers=alice_headers
    )
    alice_schedule_id = response.json()["id"]

    bob_token = (await share_trip(client, bob_headers, bob_trip["id"])).json()["share_token"]
    base = f"/public/trips/{bob_token}/schedules/{alice_schedule_id}"

    got = await client.get(base)
    patched = await client.patch(base, json={"memo": "hijacked"})
    deleted = await client.delete(base)

    for response in (got, patched, deleted):
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "SCHEDULE_NOT_FOUND"

    response = await client.get(
        f"/trips/{alice_trip['id']}/schedules/{alice_schedule_id}", headers=alice_headers
    )
    assert response.status_code == 200
    assert response.json()["memo"] == SCHEDULE["memo"]


@pytest.mark.asyncio
async def test_deleting_trip_revokes_share_link(client: AsyncClient, alice_headers):
    trip = await create_trip(client, alice_headers)
    token = (await share_trip(client, alice_headers, trip["id"])).json()["share_token"]
    await client.post(f"/trips/{trip['id']}/schedules", json=SCHEDULE, headers=alice_headers)

    response = await client.delete(f"/trips/{trip['id']}", headers=alice_headers)
    assert response.status_code == 204

    response = await client.get(f"/public/trips/{token}")
    assert response.status_code == 404
