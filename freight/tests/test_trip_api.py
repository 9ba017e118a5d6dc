"""
Integration tests for the trip lifecycle.

Trips are created and edited through the API; driver, truck and cargo
statuses follow the trip status.
"""

import pytest

DEPARTED = "2024-01-01T08:00:00"
ARRIVED = "2024-01-03T18:00:00"

# Note: Client, database and fleet setup are in conftest.py


def trip_payload(fleet, driver=0, truck=0, cargo=0, departed=None, arrived=None, **extra):
    payload = {
        "driver_id": fleet["drivers"][driver],
        "truck_id": fleet["trucks"][truck],
        "cargo_id": fleet["cargos"][cargo],
        "route_id": fleet["routes"][0],
        "departure_date": "2024-01-01T00:00:00",
        "arrival_date": "2024-01-04T00:00:00",
        "departure_date_actual": departed,
        "arrival_date_actual": arrived,
    }
    payload.update(extra)
    return payload


async def fleet_statuses(client):
    """Current statuses keyed by id, per entity kind."""
    result = {}
    for kind in ("drivers", "trucks", "cargos"):
        response = await client.get(f"/v1/{kind}")
        assert response.status_code == 200
        result[kind] = {item["id"]: item["status"] for item in response.json()}
    return result


@pytest.mark.asyncio
async def test_create_planned_trip(client, fleet):
    response = await client.post("/v1/trips", json=trip_payload(fleet))

    assert response.status_code == 201
    assert response.json()["status"] == "PLANNED"

    statuses = await fleet_statuses(client)
    assert statuses["drivers"][fleet["drivers"][0]] == "FREE"
    assert statuses["trucks"][fleet["trucks"][0]] == "FREE"
    assert statuses["cargos"][fleet["cargos"][0]] == "NOT_DELIVERED"


@pytest.mark.asyncio
async def test_create_departed_trip_cascades(client, fleet):
    response = await client.post("/v1/trips", json=trip_payload(fleet, departed=DEPARTED))

    assert response.status_code == 201
    assert response.json()["status"] == "IN_PROGRESS"

    statuses = await fleet_statuses(client)
    assert statuses["drivers"][fleet["drivers"][0]] == "TRIP"
    assert statuses["trucks"][fleet["trucks"][0]] == "IN_TRIP"
    assert statuses["cargos"][fleet["cargos"][0]] == "IN_TRANSIT"


@pytest.mark.asyncio
async def test_status_in_payload_is_ignored(client, fleet):
    response = await client.post("/v1/trips", json=trip_payload(fleet, status="COMPLETED"))

    assert response.status_code == 201
    assert response.json()["status"] == "PLANNED"


@pytest.mark.asyncio
async def test_busy_driver_is_rejected(client, fleet):
    """Same driver, different truck: one error on driver_id, nothing persisted."""
    first = await client.post("/v1/trips", json=trip_payload(fleet, departed=DEPARTED))
    assert first.status_code == 201

    response = await client.post(
        "/v1/trips",
        json=trip_payload(fleet, truck=1, cargo=1, departed=DEPARTED)
    )

    assert response.status_code == 409
    body = response.json()
    assert body["error_code"] == "ERR_BOOKING_CONFLICT"
    assert [e["field"] for e in body["details"]["errors"]] == ["driver_id"]

    trips = (await client.get("/v1/trips")).json()
    assert trips["total"] == 1

    statuses = await fleet_statuses(client)
    assert statuses["trucks"][fleet["trucks"][1]] == "FREE"
    assert statuses["cargos"][fleet["cargos"][1]] == "NOT_DELIVERED"


@pytest.mark.asyncio
async def test_busy_driver_and_truck_both_reported(client, fleet):
    await client.post("/v1/trips", json=trip_payload(fleet, departed=DEPARTED))

    response = await client.post("/v1/trips", json=trip_payload(fleet, cargo=1, departed=DEPARTED))

    assert response.status_code == 409
    fields = [e["field"] for e in response.json()["details"]["errors"]]
    assert fields == ["driver_id", "truck_id"]


@pytest.mark.asyncio
async def test_planned_trip_for_busy_driver_is_accepted(client, fleet):
    await client.post("/v1/trips", json=trip_payload(fleet, departed=DEPARTED))

    response = await client.post("/v1/trips", json=trip_payload(fleet, cargo=1))

    assert response.status_code == 201
    assert response.json()["status"] == "PLANNED"


@pytest.mark.asyncio
async def test_completing_trip_frees_driver_and_delivers_cargo(client, fleet):
    created = await client.post("/v1/trips", json=trip_payload(fleet, departed=DEPARTED))
    trip_id = created.json()["id"]

    response = await client.put(
        f"/v1/trips/{trip_id}",
        json=trip_payload(fleet, departed=DEPARTED, arrived=ARRIVED)
    )

    assert response.status_code == 200
    assert response.json()["status"] == "COMPLETED"

    statuses = await fleet_statuses(client)
    assert statuses["drivers"][fleet["drivers"][0]] == "FREE"
    assert statuses["trucks"][fleet["trucks"][0]] == "FREE"
    assert statuses["cargos"][fleet["cargos"][0]] == "DELIVERED"


@pytest.mark.asyncio
async def test_editing_in_progress_trip_does_not_conflict_with_itself(client, fleet):
    created = await client.post("/v1/trips", json=trip_payload(fleet, departed=DEPARTED))
    trip_id = created.json()["id"]

    response = await client.put(
        f"/v1/trips/{trip_id}",
        json=trip_payload(fleet, departed=DEPARTED, arrival_date="2024-01-05T00:00:00")
    )

    assert response.status_code == 200
    assert response.json()["status"] == "IN_PROGRESS"


@pytest.mark.asyncio
async def test_rejected_edit_leaves_trip_unchanged(client, fleet):
    await client.post("/v1/trips", json=trip_payload(fleet, departed=DEPARTED))
    planned = await client.post("/v1/trips", json=trip_payload(fleet, truck=1, cargo=1))
    trip_id = planned.json()["id"]

    response = await client.put(
        f"/v1/trips/{trip_id}",
        json=trip_payload(fleet, truck=1, cargo=1, departed=DEPARTED)
    )

    assert response.status_code == 409

    stored = (await client.get(f"/v1/trips/{trip_id}")).json()
    assert stored["status"] == "PLANNED"
    assert stored["departure_date_actual"] is None

    statuses = await fleet_statuses(client)
    assert statuses["trucks"][fleet["trucks"][1]] == "FREE"


@pytest.mark.asyncio
async def test_cargo_cannot_be_assigned_twice(client, fleet):
    await client.post("/v1/trips", json=trip_payload(fleet))

    response = await client.post("/v1/trips", json=trip_payload(fleet, driver=1, truck=1))

    assert response.status_code == 409
    assert response.json()["error_code"] == "ERR_CARGO_ASSIGNED"


@pytest.mark.asyncio
async def test_missing_driver_returns_404(client, fleet):
    payload = trip_payload(fleet)
    payload["driver_id"] = 9999

    response = await client.post("/v1/trips", json=payload)

    assert response.status_code == 404
    assert response.json()["details"]["resource"] == "Driver"


@pytest.mark.asyncio
async def test_actual_arrival_requires_actual_departure(client, fleet):
    response = await client.post("/v1/trips", json=trip_payload(fleet, arrived=ARRIVED))

    assert response.status_code == 422
    fields = [e["field"] for e in response.json()["details"]["errors"]]
    assert fields == ["arrival_date_actual"]


@pytest.mark.asyncio
async def test_planned_arrival_before_departure_is_rejected(client, fleet):
    response = await client.post(
        "/v1/trips",
        json=trip_payload(fleet, departure_date="2024-02-01T00:00:00", arrival_date="2024-01-01T00:00:00")
    )

    assert response.status_code == 422
    fields = [e["field"] for e in response.json()["details"]["errors"]]
    assert fields == ["arrival_date"]


@pytest.mark.asyncio
async def test_actual_arrival_before_actual_departure_is_rejected(client, fleet):
    response = await client.post(
        "/v1/trips",
        json=trip_payload(fleet, departed="2024-01-03T08:00:00", arrived="2024-01-02T08:00:00")
    )

    assert response.status_code == 422
    fields = [e["field"] for e in response.json()["details"]["errors"]]
    assert fields == ["arrival_date_actual"]


@pytest.mark.asyncio
async def test_mixed_timezone_dates_are_compared_in_utc(client, fleet):
    response = await client.post(
        "/v1/trips",
        json=trip_payload(fleet, departure_date="2024-01-01T00:00:00Z", arrival_date="2024-01-04T00:00:00")
    )
    assert response.status_code == 201

    # 2024-01-04 03:00+03:00 is midnight UTC, after a 20:00 naive (UTC) arrival on the 3rd
    response = await client.post(
        "/v1/trips",
        json=trip_payload(
            fleet, driver=1, truck=1, cargo=1,
            departure_date="2024-01-04T03:00:00+03:00", arrival_date="2024-01-03T20:00:00"
        )
    )
    assert response.status_code == 422
    fields = [e["field"] for e in response.json()["details"]["errors"]]
    assert fields == ["arrival_date"]

    response = await client.post(
        "/v1/trips",
        json=trip_payload(fleet, driver=1, truck=1, cargo=1, departed="2024-01-01T10:00:00+03:00", arrived="2024-01-01T08:00:00")
    )
    assert response.status_code == 201
    assert response.json()["status"] == "COMPLETED"


@pytest.mark.asyncio
async def test_editing_planned_trip_keeps_its_own_cargo(client, fleet):
    created = await client.post("/v1/trips", json=trip_payload(fleet))
    await client.post("/v1/trips", json=trip_payload(fleet, driver=1, truck=1, cargo=1))
    trip_id = created.json()["id"]

    response = await client.put(f"/v1/trips/{trip_id}", json=trip_payload(fleet, driver=1))
    assert response.status_code == 200
    assert response.json()["cargo_id"] == fleet["cargos"][0]
    assert response.json()["driver_id"] == fleet["drivers"][1]

    response = await client.put(f"/v1/trips/{trip_id}", json=trip_payload(fleet, cargo=1))
    assert response.status_code == 409
    assert response.json()["error_code"] == "ERR_CARGO_ASSIGNED"


@pytest.mark.asyncio
async def test_delete_trip(client, fleet):
    created = await client.post("/v1/trips", json=trip_payload(fleet))
    trip_id = created.json()["id"]

    response = await client.delete(f"/v1/trips/{trip_id}")
    assert response.status_code == 204

    response = await client.get(f"/v1/trips/{trip_id}")
    assert response.status_code == 404
