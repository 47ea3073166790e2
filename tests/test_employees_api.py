"""
Employee endpoint tests, including the availability search.
"""

from datetime import date

import pytest

from resource_manager.models.employee import Seniority


@pytest.mark.asyncio
async def test_employee_crud(test_client):
    response = await test_client.post("/api/v1/employees", json={
        "name": "Ada Lovelace",
        "seniority": "SENIOR",
        "skills": ["Python"],
        "roles": ["Developer"],
    })
    assert response.status_code == 201
    employee = response.json()
    assert employee["assignments"] == []

    response = await test_client.get(f"/api/v1/employees/{employee['id']}")
    assert response.status_code == 200
    assert response.json()["skills"] == ["Python"]

    response = await test_client.put(f"/api/v1/employees/{employee['id']}", json={"skills": None, "name": "Ada"})
    assert response.status_code == 200
    assert response.json()["name"] == "Ada"
    assert response.json()["skills"] == []
    assert response.json()["roles"] == ["Developer"]

    listing = (await test_client.get("/api/v1/employees")).json()
    assert listing["total"] == 1

    response = await test_client.delete(f"/api/v1/employees/{employee['id']}")
    assert response.status_code == 200
    assert (await test_client.get(f"/api/v1/employees/{employee['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_invalid_seniority_is_bad_request(test_client):
    response = await test_client.post("/api/v1/employees", json={"name": "Ada", "seniority": "CEO"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_delete_employee_removes_assignments(test_client, factory):
    employee = await factory.employee()
    project = await factory.project()
    await factory.assignment(employee, project, date(2024, 1, 1), date(2024, 1, 31))

    response = await test_client.delete(f"/api/v1/employees/{employee.id}")

    assert response.status_code == 200
    assert len(response.json()["assignments"]) == 1
    assert (await test_client.get("/api/v1/assignments")).json() == []


@pytest.mark.asyncio
async def test_search_employees(test_client, factory):
    await factory.employee(name="Ada Lovelace", seniority=Seniority.SENIOR, skills=["Python"])
    await factory.employee(name="Alan Turing", seniority=Seniority.JUNIOR, skills=["Maths"])

    names = lambda r: [e["name"] for e in r.json()["items"]]  # noqa: E731

    assert names(await test_client.get("/api/v1/employees/search", params={"q": "ada"})) == ["Ada Lovelace"]
    assert names(await test_client.get("/api/v1/employees/search", params={"q": "Maths"})) == ["Alan Turing"]
    assert names(await test_client.get("/api/v1/employees/search", params={"q": "math"})) == []
    assert names(await test_client.get(
        "/api/v1/employees/search", params={"q": "", "seniority": "JUNIOR"}
    )) == ["Alan Turing"]
    assert len(names(await test_client.get("/api/v1/employees/search", params={"seniority": "ALL"}))) == 2

    response = await test_client.get("/api/v1/employees/search", params={"seniority": "CEO"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_employees_with_assignments(test_client, factory):
    employee = await factory.employee()
    project = await factory.project(name="Apollo")
    await factory.assignment(employee, project, date(2024, 1, 1), date(2024, 1, 31))

    response = await test_client.get("/api/v1/employees/with-assignments")

    assert response.status_code == 200
    [item] = response.json()
    assert item["assignments"][0]["project"]["name"] == "Apollo"


@pytest.mark.asyncio
async def test_available_employees(test_client, factory):
    booked = await factory.employee(name="Booked")
    half = await factory.employee(name="Half")
    await factory.employee(name="Free")
    project = await factory.project()
    await factory.assignment(booked, project, date(2024, 1, 1), date(2024, 1, 31), utilisation=100)
    await factory.assignment(half, project, date(2024, 1, 1), date(2024, 1, 31), utilisation=50)
    # Outside the window, must not count
    await factory.assignment(half, project, date(2024, 3, 1), date(2024, 3, 31), utilisation=100)

    response = await test_client.get("/api/v1/employees/available", params={
        "start_date": "2024-01-01",
        "end_date": "2024-01-31",
    })

    assert response.status_code == 200
    assert [(e["name"], e["available_utilization"]) for e in response.json()] == [("Free", 100.0), ("Half", 50.0)]

    response = await test_client.get("/api/v1/employees/available", params={
        "start_date": "2024-01-01",
        "end_date": "2024-01-31",
        "availability_threshold": 40,
    })

    assert [(e["name"], e["current_utilization"]) for e in response.json()] == [("Free", 0.0)]


@pytest.mark.asyncio
async def test_available_employees_requires_window(test_client):
    response = await test_client.get("/api/v1/employees/available", params={"start_date": "2024-01-01"})

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Start date and end date are required"


@pytest.mark.asyncio
async def test_available_employees_rejects_bad_date(test_client):
    response = await test_client.get("/api/v1/employees/available", params={
        "start_date": "not-a-date",
        "end_date": "2024-01-31",
    })

    assert response.status_code == 400
