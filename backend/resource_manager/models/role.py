"""
Lookup models for roles, skills and project types.
"""

from sqlalchemy import Column, Integer, String

from resource_manager.db.base import Base


class Role(Base):
    """Job role label, referenced by id from project requirements."""

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(100), nullable=False, unique=True, index=True)


class Skill(Base):
    """Skill label."""

    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(100), nullable=False, unique=True, index=True)


class ProjectType(Base):
    """Project type label."""

    __tablename__ = "project_types"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(100), nullable=False, unique=True, index=True)
