"""
Pytest configuration and fixtures.
Provides test app client, an in-memory database and small data factories.
"""

import os

# The shared limiter would otherwise trip across tests
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from datetime import date
from typing import List, Optional

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

import resource_manager.models  # noqa: F401  registers tables on Base
from resource_manager.main import app
from resource_manager.db.base import Base
from resource_manager.db.session import enable_sqlite_foreign_keys, get_db
from resource_manager.models.assignment import Assignment
from resource_manager.models.employee import Employee, Seniority
from resource_manager.models.project import Project, ProjectStatus, Satisfaction
from resource_manager.models.role import ProjectType, Role, Skill


# Test database URL (in-memory SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def test_engine():
    """
    Create a test database engine.
    Uses in-memory SQLite for fast tests.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture(scope="function")
def test_session_maker(test_engine):
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture(scope="function")
async def test_db_session(test_session_maker):
    """Create a test database session."""
    async with test_session_maker() as session:
        yield session


@pytest.fixture(scope="function")
async def test_client(test_session_maker):
    """
    Create a test HTTP client.
    Every request gets its own session from the in-memory database.
    """

    async def override_get_db():
        async with test_session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


class Factory:
    """Inserts rows directly, bypassing services."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def employee(
        self,
        name: str = "Ada Lovelace",
        seniority: Seniority = Seniority.SENIOR,
        skills: Optional[List[str]] = None,
        roles: Optional[List[str]] = None,
    ) -> Employee:
        employee = Employee(name=name, seniority=seniority, skills=skills or [], roles=roles or [])
        self.session.add(employee)
        await self.session.commit()
        return employee

    async def project(
        self,
        name: str = "Apollo",
        start_date: date = date(2024, 1, 1),
        end_date: Optional[date] = date(2024, 12, 31),
        status: ProjectStatus = ProjectStatus.CURRENT,
    ) -> Project:
        project = Project(
            name=name,
            status=status,
            start_date=start_date,
            end_date=end_date,
            tools=["None"],
            client_satisfaction=Satisfaction.IDK,
        )
        self.session.add(project)
        await self.session.commit()
        return project

    async def assignment(
        self,
        employee: Employee,
        project: Project,
        start_date: date,
        end_date: date,
        utilisation: int = 100,
    ) -> Assignment:
        assignment = Assignment(
            employee_id=employee.id,
            project_id=project.id,
            start_date=start_date,
            end_date=end_date,
            utilisation=utilisation,
        )
        self.session.add(assignment)
        await self.session.commit()
        return assignment

    async def role(self, name: str) -> Role:
        role = Role(name=name)
        self.session.add(role)
        await self.session.commit()
        return role

    async def skill(self, name: str) -> Skill:
        skill = Skill(name=name)
        self.session.add(skill)
        await self.session.commit()
        return skill

    async def project_type(self, name: str) -> ProjectType:
        project_type = ProjectType(name=name)
        self.session.add(project_type)
        await self.session.commit()
        return project_type


@pytest.fixture(scope="function")
def factory(test_db_session):
    return Factory(test_db_session)
