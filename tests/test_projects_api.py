"""
Project endpoint tests: CRUD, search and requirement coverage.
"""

from datetime import date

import pytest

from resource_manager.models.employee import Seniority


@pytest.mark.asyncio
async def test_create_project_with_requirements(test_client, factory):
    role = await factory.role("Developer")

    response = await test_client.post("/api/v1/projects", json={
        "name": "Legacy Migration",
        "start_date": "2020-01-01",
        "end_date": "2020-06-30",
        "requirements": [
            {
                "role_id": role.id,
                "seniority": "SENIOR",
                "start_date": "2020-01-01",
                "end_date": "2020-03-31",
                "quantity": 2,
            }
        ],
    })

    assert response.status_code == 201
    project = response.json()
    assert project["status"] == "COMPLETED"
    assert project["tools"] == ["None"]
    assert project["client_satisfaction"] == "IDK"
    [requirement] = project["requirements"]
    assert requirement["role_name"] == "Developer"
    assert requirement["quantity"] == 2


@pytest.mark.asyncio
async def test_open_ended_and_future_projects(test_client):
    future = await test_client.post("/api/v1/projects", json={"name": "Moonbase", "start_date": "2099-01-01"})
    ongoing = await test_client.post("/api/v1/projects", json={"name": "Support", "start_date": "2020-01-01"})

    assert future.json()["status"] == "UPCOMING"
    assert ongoing.json()["status"] == "CURRENT"
    assert ongoing.json()["end_date"] is None


@pytest.mark.asyncio
async def test_create_project_with_unknown_role(test_client):
    response = await test_client.post("/api/v1/projects", json={
        "name": "Ghost",
        "start_date": "2024-01-01",
        "requirements": [
            {"role_id": 99, "seniority": "JUNIOR", "start_date": "2024-01-01", "end_date": "2024-01-31"}
        ],
    })

    assert response.status_code == 404
    assert (await test_client.get("/api/v1/projects")).json()["total"] == 0


@pytest.mark.asyncio
async def test_requirement_quantity_must_be_positive(test_client, factory):
    role = await factory.role("Developer")

    response = await test_client.post("/api/v1/projects", json={
        "name": "Zero",
        "start_date": "2024-01-01",
        "requirements": [
            {"role_id": role.id, "seniority": "JUNIOR", "start_date": "2024-01-01", "end_date": "2024-01-31", "quantity": 0}
        ],
    })

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_project_replaces_requirements(test_client, factory):
    developer = await factory.role("Developer")
    designer = await factory.role("Designer")
    created = (await test_client.post("/api/v1/projects", json={
        "name": "Apollo",
        "start_date": "2099-01-01",
        "requirements": [
            {"role_id": developer.id, "seniority": "SENIOR", "start_date": "2099-01-01", "end_date": "2099-02-01"}
        ],
    })).json()

    response = await test_client.put(f"/api/v1/projects/{created['id']}", json={
        "name": "Apollo 2",
        "start_date": "2020-01-01",
        "tools": ["Jira"],
        "requirements": [
            {"role_id": designer.id, "seniority": "JUNIOR", "start_date": "2020-01-01", "end_date": "2020-02-01"}
        ],
    })

    assert response.status_code == 200
    project = response.json()
    assert project["name"] == "Apollo 2"
    assert project["status"] == "CURRENT"
    assert project["tools"] == ["Jira"]
    assert [r["role_name"] for r in project["requirements"]] == ["Designer"]


@pytest.mark.asyncio
async def test_update_without_requirements_keeps_them(test_client, factory):
    developer = await factory.role("Developer")
    created = (await test_client.post("/api/v1/projects", json={
        "name": "Apollo",
        "start_date": "2024-01-01",
        "requirements": [
            {"role_id": developer.id, "seniority": "SENIOR", "start_date": "2024-01-01", "end_date": "2024-02-01"}
        ],
    })).json()

    response = await test_client.put(f"/api/v1/projects/{created['id']}", json={
        "name": "Apollo",
        "start_date": "2024-01-01",
    })

    assert len(response.json()["requirements"]) == 1


@pytest.mark.asyncio
async def test_search_projects(test_client):
    await test_client.post("/api/v1/projects", json={"name": "Apollo", "start_date": "2020-01-01", "end_date": "2020-02-01"})
    await test_client.post("/api/v1/projects", json={"name": "Gemini", "start_date": "2099-01-01"})

    names = lambda r: [p["name"] for p in r.json()["items"]]  # noqa: E731

    assert names(await test_client.get("/api/v1/projects/search", params={"q": "apo"})) == ["Apollo"]
    assert names(await test_client.get("/api/v1/projects/search", params={"status": "UPCOMING"})) == ["Gemini"]
    assert names(await test_client.get("/api/v1/projects/search", params={"status": "ALL"})) == ["Apollo", "Gemini"]
    assert (await test_client.get("/api/v1/projects/search", params={"status": "PAUSED"})).status_code == 400


@pytest.mark.asyncio
async def test_delete_project_removes_assignments(test_client, factory):
    employee = await factory.employee()
    project = await factory.project()
    await factory.assignment(employee, project, date(2024, 1, 1), date(2024, 1, 31))

    response = await test_client.delete(f"/api/v1/projects/{project.id}")

    assert response.status_code == 204
    assert (await test_client.get(f"/api/v1/projects/{project.id}")).status_code == 404
    assert (await test_client.get("/api/v1/assignments")).json() == []


@pytest.mark.asyncio
async def test_requirement_status(test_client, factory):
    role = await factory.role("Developer")
    senior = await factory.employee(name="Senior Dev", seniority=Seniority.SENIOR, roles=["Developer"])
    junior = await factory.employee(name="Junior Dev", seniority=Seniority.JUNIOR, roles=["Developer"])
    project = (await test_client.post("/api/v1/projects", json={
        "name": "Apollo",
        "start_date": "2024-01-01",
        "requirements": [
            {"role_id": role.id, "seniority": "SENIOR", "start_date": "2024-01-01", "end_date": "2024-06-30", "quantity": 2}
        ],
    })).json()

    for employee in (senior, junior):
        await test_client.post("/api/v1/assignments", json={
            "employee_id": employee.id,
            "project_id": project["id"],
            "start_date": "2024-01-01",
            "end_date": "2024-06-30",
            "utilisation": 100,
        })

    response = await test_client.get(f"/api/v1/projects/{project['id']}/requirement-status")

    assert response.status_code == 200
    assert response.json() == {"project_id": project["id"], "status": "partial", "coverage": 50.0}


@pytest.mark.asyncio
async def test_requirement_status_without_requirements(test_client, factory):
    project = await factory.project()

    response = await test_client.get(f"/api/v1/projects/{project.id}/requirement-status")

    assert response.json()["status"] == "fulfilled"
    assert response.json()["coverage"] == 100.0
