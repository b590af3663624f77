from __future__ import annotations

from datetime import datetime, timedelta, timezone

from shelter.infrastructure.seed.sample_data import seed_sample_data


async def test_visit_workflow_over_http(app, client):
    await seed_sample_data(app.state.stores)
    planned = datetime.now(timezone.utc) + timedelta(days=4)

    created = await client.post(
        "/api/v1/visits/",
        json={
            "animal_id": 8,
            "customer_id": 5,
            "planned_date": planned.isoformat(),
            "visit_type": "Viewing",
        },
    )
    assert created.status_code == 201
    visit = created.json()
    assert visit["id"] == 6
    assert visit["status"] == "Scheduled"
    assert visit["planned_duration"] == 30

    confirm = await client.post(f"/api/v1/visits/{visit['id']}/confirm")
    assert confirm.json()["status"] == "Confirmed"

    waitlist = await client.post(f"/api/v1/visits/{visit['id']}/waitlist")
    assert waitlist.status_code == 409
    assert waitlist.json()["code"] == "invalid_state_transition"

    held = datetime.now(timezone.utc) - timedelta(minutes=10)
    done = await client.post(
        f"/api/v1/visits/{visit['id']}/complete",
        json={"actual_date": held.isoformat(), "actual_duration": 35},
    )
    assert done.status_code == 200
    assert done.json()["status"] == "Completed"

    listed = await client.get("/api/v1/visits/", params={"animal_id": 8})
    assert [item["id"] for item in listed.json()] == [6]

    assert (await client.delete(f"/api/v1/visits/{visit['id']}")).status_code == 204
    assert (await client.get(f"/api/v1/visits/{visit['id']}")).status_code == 404


async def test_visit_errors_are_typed(app, client):
    await seed_sample_data(app.state.stores)

    missing_animal = await client.post(
        "/api/v1/visits/",
        json={
            "animal_id": 99,
            "planned_date": datetime.now(timezone.utc).isoformat(),
            "visit_type": "Viewing",
        },
    )
    assert missing_animal.status_code == 404

    future = (datetime.now(timezone.utc) + timedelta(days=1)).isoformat()
    early = await client.post(
        "/api/v1/visits/1/complete", json={"actual_date": future, "actual_duration": 20}
    )
    assert early.status_code == 422
    assert early.json()["code"] == "validation_error"

    cancel_completed = await client.post("/api/v1/visits/2/cancel")
    assert cancel_completed.status_code == 409


async def test_health_records_over_http(app, client):
    await seed_sample_data(app.state.stores)

    history = await client.get("/api/v1/health-records/animal/1")
    assert [item["id"] for item in history.json()] == [1, 3]

    added = await client.post(
        "/api/v1/health-records/animal/8",
        json={
            "diagnosis": "Matted fur",
            "treatment": "Grooming",
            "veterinarian_name": "Dr. Nielsen",
        },
    )
    assert added.status_code == 201
    assert added.json()["animal_id"] == 8

    vaccinated = await client.post(
        "/api/v1/health-records/animal/8/vaccinations",
        json={"vaccination_date": datetime.now(timezone.utc).isoformat()},
    )
    assert vaccinated.status_code == 201
    assert vaccinated.json()["diagnosis"] == "Vaccination"

    due = await client.get("/api/v1/health-records/needing-vaccination")
    assert {item["name"] for item in due.json()} == {"Cooper", "Daisy"}

    summary = await client.get("/api/v1/health-records/animal/7/summary")
    assert summary.status_code == 200
    body = summary.json()
    assert body["health_status"] == "Healthy"
    assert body["latest_record"]["id"] == 7
    assert [visit["id"] for visit in body["upcoming_visits"]] == [5]
    assert "1 upcoming veterinary visit(s) planned." in body["alerts"]

    missing = await client.get("/api/v1/health-records/animal/99/summary")
    assert missing.status_code == 404
