import pytest
from httpx import AsyncClient

TRIP = {"title": "Alps", "start_date": "2026-07-01", "end_date": "2026-07-10"}


async def create_trip(client, headers):
    response = await client.post("/trips", json=TRIP, headers=headers)
    assert response.status_code == 201
    return response.json()


async def add_schedule(client, headers, trip_id, title, start, end):
    return await client.post(
        f"/trips/{trip_id}/schedules",
        json={"title": title, "start_date_time": start, "end_date_time": end},
        headers=headers,
    )


@pytest.mark.asyncio
async def test_schedule_crud(client: AsyncClient, alice_headers):
    trip = await create_trip(client, alice_headers)

    response = await add_schedule(
        client, alice_headers, trip["id"], "Hike", "2026-07-02T08:00:00", "2026-07-02T16:00:00"
    )
    assert response.status_code == 201
    schedule = response.json()
    assert schedule["memo"] == ""
    path = f"/trips/{trip['id']}/schedules/{schedule['id']}"

    response = await client.get(path, headers=alice_headers)
    assert response.status_code == 200
    assert response.json()["title"] == "Hike"

    response = await client.patch(
        path, json={"end_date_time": "2026-07-02T18:00:00"}, headers=alice_headers
    )
    assert response.status_code == 200
    assert response.json()["end_date_time"] == "2026-07-02T18:00:00"

    response = await client.delete(path, headers=alice_headers)
    assert response.status_code == 204

    response = await client.get(f"/trips/{trip['id']}/schedules", headers=alice_headers)
    assert response.json() == []


@pytest.mark.asyncio
async def test_schedule_times_normalized_to_utc(client: AsyncClient, alice_headers):
    trip = await create_trip(client, alice_headers)

    response = await add_schedule(
        client,
        alice_headers,
        trip["id"],
        "Dinner",
        "2026-07-03T20:00:00+02:00",
        "2026-07-03T22:00:00+02:00",
    )

    assert response.status_code == 201
    assert response.json()["start_date_time"] == "2026-07-03T18:00:00"


@pytest.mark.asyncio
async def test_schedule_window_validation(client: AsyncClient, alice_headers):
    trip = await create_trip(client, alice_headers)

    inverted = await add_schedule(
        client, alice_headers, trip["id"], "Oops", "2026-07-02T10:00:00", "2026-07-02T09:00:00"
    )
    assert inverted.status_code == 400
    assert inverted.json()["error"]["code"] == "VALIDATION_ERROR"

    created = await add_schedule(
        client, alice_headers, trip["id"], "Hike", "2026-07-02T08:00:00", "2026-07-02T16:00:00"
    )
    path = f"/trips/{trip['id']}/schedules/{created.json()['id']}"

    response = await client.patch(
        path, json={"start_date_time": "2026-07-02T17:00:00"}, headers=alice_headers
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_schedule_scoped_to_its_trip(client: AsyncClient, alice_headers):
    first = await create_trip(client, alice_headers)
    second = await create_trip(client, alice_headers)

    created = await add_schedule(
        client, alice_headers, first["id"], "Hike", "2026-07-02T08:00:00", "2026-07-02T16:00:00"
    )
    schedule_id = created.json()["id"]

    # Same owner, but the schedule belongs to the other trip
    response = await client.get(
        f"/trips/{second['id']}/schedules/{schedule_id}", headers=alice_headers
    )
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "SCHEDULE_NOT_FOUND"

    response = await client.delete(
        f"/trips/{second['id']}/schedules/{schedule_id}", headers=alice_headers
    )
    assert response.status_code == 404

    response = await client.get(
        f"/trips/{first['id']}/schedules/{schedule_id}", headers=alice_headers
    )
    assert response.status_code == 200
