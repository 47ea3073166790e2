"""
Assignment endpoint tests using pytest-asyncio and httpx.AsyncClient.
"""

from datetime import date

import pytest

from resource_manager.services.assignment_service import ASSIGNMENT_CONFLICT_MESSAGE


@pytest.mark.asyncio
async def test_create_and_list_assignments(test_client, factory):
    employee = await factory.employee(name="Grace")
    project = await factory.project(name="Cobol")

    response = await test_client.post("/api/v1/assignments", json={
        "employee_id": employee.id,
        "project_id": project.id,
        "start_date": "2024-01-15T00:00:00.000Z",
        "end_date": "2024-02-15",
        "utilisation": 75,
    })

    assert response.status_code == 201
    data = response.json()
    assert data["start_date"] == "2024-01-15"
    assert data["end_date"] == "2024-02-15"
    assert data["employee"]["name"] == "Grace"
    assert data["project"]["name"] == "Cobol"

    response = await test_client.get("/api/v1/assignments")
    assert response.status_code == 200
    assert [a["id"] for a in response.json()] == [data["id"]]


@pytest.mark.asyncio
async def test_duplicate_assignment_returns_conflict(test_client, factory):
    employee = await factory.employee()
    project = await factory.project()
    payload = {
        "employee_id": employee.id,
        "project_id": project.id,
        "start_date": "2024-01-01",
        "end_date": "2024-01-31",
        "utilisation": 50,
    }

    assert (await test_client.post("/api/v1/assignments", json=payload)).status_code == 201
    response = await test_client.post("/api/v1/assignments", json=payload)

    assert response.status_code == 409
    assert response.json()["error"]["message"] == ASSIGNMENT_CONFLICT_MESSAGE


@pytest.mark.asyncio
async def test_end_before_start_is_bad_request(test_client, factory):
    employee = await factory.employee()
    project = await factory.project()

    response = await test_client.post("/api/v1/assignments", json={
        "employee_id": employee.id,
        "project_id": project.id,
        "start_date": "2024-02-01",
        "end_date": "2024-01-01",
        "utilisation": 50,
    })

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Validation error"


@pytest.mark.asyncio
async def test_unknown_project_is_not_found(test_client, factory):
    employee = await factory.employee()

    response = await test_client.post("/api/v1/assignments", json={
        "employee_id": employee.id,
        "project_id": 404,
        "start_date": "2024-01-01",
        "end_date": "2024-01-02",
        "utilisation": 50,
    })

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Project not found"


@pytest.mark.asyncio
async def test_update_assignment(test_client, factory):
    employee = await factory.employee()
    project = await factory.project()
    assignment = await factory.assignment(employee, project, date(2024, 1, 1), date(2024, 1, 31))

    response = await test_client.put(f"/api/v1/assignments/{assignment.id}", json={
        "employee_id": employee.id,
        "project_id": project.id,
        "start_date": "2024-01-01",
        "end_date": "2024-03-31",
        "utilisation": 120,
    })

    assert response.status_code == 200
    assert response.json()["end_date"] == "2024-03-31"
    assert response.json()["utilisation"] == 120


@pytest.mark.asyncio
async def test_update_missing_assignment(test_client, factory):
    employee = await factory.employee()
    project = await factory.project()

    response = await test_client.put("/api/v1/assignments/999", json={
        "employee_id": employee.id,
        "project_id": project.id,
        "start_date": "2024-01-01",
        "end_date": "2024-03-31",
        "utilisation": 10,
    })

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_assignment_returns_deleted_row(test_client, factory):
    employee = await factory.employee()
    project = await factory.project()
    assignment = await factory.assignment(employee, project, date(2024, 1, 1), date(2024, 1, 31))

    response = await test_client.delete(f"/api/v1/assignments/{assignment.id}")

    assert response.status_code == 200
    assert response.json()["id"] == assignment.id
    assert (await test_client.get("/api/v1/assignments")).json() == []
    assert (await test_client.delete(f"/api/v1/assignments/{assignment.id}")).status_code == 404


@pytest.mark.asyncio
async def test_delete_week_splits_assignment(test_client, factory):
    employee = await factory.employee()
    project = await factory.project()
    assignment = await factory.assignment(employee, project, date(2023, 1, 1), date(2023, 1, 31), utilisation=60)

    response = await test_client.request(
        "DELETE",
        f"/api/v1/assignments/{assignment.id}/week",
        json={"week_start": "2023-01-15"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["kind"] == "split"
    assert data["updated_assignment"]["end_date"] == "2023-01-14"
    assert data["new_assignment"]["start_date"] == "2023-01-22"
    assert data["new_assignment"]["end_date"] == "2023-01-31"
    assert data["new_assignment"]["utilisation"] == 60

    listing = (await test_client.get("/api/v1/assignments")).json()
    assert [(a["start_date"], a["end_date"]) for a in listing] == [
        ("2023-01-22", "2023-01-31"),
        ("2023-01-01", "2023-01-14"),
    ]


@pytest.mark.asyncio
async def test_delete_week_split_conflict_returns_409(test_client, factory):
    employee = await factory.employee()
    project = await factory.project()
    assignment = await factory.assignment(employee, project, date(2024, 1, 1), date(2024, 1, 31), utilisation=60)
    await factory.assignment(employee, project, date(2024, 1, 22), date(2024, 1, 31), utilisation=60)

    response = await test_client.request(
        "DELETE",
        f"/api/v1/assignments/{assignment.id}/week",
        json={"week_start": "2024-01-15"},
    )

    assert response.status_code == 409
    original = (await test_client.get(f"/api/v1/assignments/{assignment.id}")).json()
    assert (original["start_date"], original["end_date"]) == ("2024-01-01", "2024-01-31")
    assert len((await test_client.get("/api/v1/assignments")).json()) == 2


@pytest.mark.asyncio
async def test_update_onto_existing_assignment_returns_409(test_client, factory):
    employee = await factory.employee()
    project = await factory.project()
    await factory.assignment(employee, project, date(2024, 1, 1), date(2024, 1, 31), utilisation=60)
    other = await factory.assignment(employee, project, date(2024, 2, 1), date(2024, 2, 29), utilisation=40)

    response = await test_client.put(
        f"/api/v1/assignments/{other.id}",
        json={
            "employee_id": employee.id,
            "project_id": project.id,
            "start_date": "2024-01-01",
            "end_date": "2024-01-31",
            "utilisation": 80,
        },
    )

    assert response.status_code == 409
    unchanged = (await test_client.get(f"/api/v1/assignments/{other.id}")).json()
    assert (unchanged["start_date"], unchanged["end_date"], unchanged["utilisation"]) == (
        "2024-02-01",
        "2024-02-29",
        40,
    )


@pytest.mark.asyncio
async def test_delete_week_without_week_start(test_client, factory):
    employee = await factory.employee()
    project = await factory.project()
    assignment = await factory.assignment(employee, project, date(2023, 1, 1), date(2023, 1, 31))

    response = await test_client.request("DELETE", f"/api/v1/assignments/{assignment.id}/week", json={})

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Week start date is required"


@pytest.mark.asyncio
async def test_weekly_breakdown(test_client):
    response = await test_client.post("/api/v1/assignments/weekly-breakdown", json={
        "employee_id": 1,
        "project_id": 1,
        "start_date": "2024-03-06",
        "end_date": "2024-03-19",
        "utilisation": 30,
    })

    assert response.status_code == 200
    weeks = response.json()
    assert [(w["start_date"], w["end_date"]) for w in weeks] == [
        ("2024-03-06", "2024-03-09"),
        ("2024-03-10", "2024-03-16"),
        ("2024-03-17", "2024-03-19"),
    ]
    assert (await test_client.get("/api/v1/assignments")).json() == []


@pytest.mark.asyncio
async def test_bulk_assign(test_client, factory):
    first = await factory.employee(name="First")
    second = await factory.employee(name="Second")
    project = await factory.project()

    response = await test_client.post("/api/v1/assign", json={
        "employee_ids": [first.id, second.id],
        "project_id": project.id,
        "start_date": "2024-05-01",
        "end_date": "2024-05-31",
        "utilisation": 50,
    })

    assert response.status_code == 201
    assert [a["employee"]["name"] for a in response.json()] == ["First", "Second"]


@pytest.mark.asyncio
async def test_bulk_assign_conflict_persists_nothing(test_client, factory):
    first = await factory.employee(name="First")
    second = await factory.employee(name="Second")
    third = await factory.employee(name="Third")
    project = await factory.project()
    await factory.assignment(second, project, date(2024, 5, 1), date(2024, 5, 31))

    response = await test_client.post("/api/v1/assign", json={
        "employee_ids": [first.id, second.id, third.id],
        "project_id": project.id,
        "start_date": "2024-05-01",
        "end_date": "2024-05-31",
        "utilisation": 50,
    })

    assert response.status_code == 409
    listing = (await test_client.get("/api/v1/assignments")).json()
    assert [a["employee_id"] for a in listing] == [second.id]


@pytest.mark.asyncio
async def test_bulk_assign_requires_employee_ids(test_client, factory):
    project = await factory.project()

    response = await test_client.post("/api/v1/assign", json={
        "employee_ids": [],
        "project_id": project.id,
        "start_date": "2024-05-01",
        "end_date": "2024-05-31",
        "utilisation": 50,
    })

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "employee_ids must be a non-empty array"
