"""
Employee model for resource planning.
"""

from sqlalchemy import Column, Integer, String, JSON, Enum as SQLEnum
from sqlalchemy.orm import relationship
import enum

from resource_manager.db.base import Base


class Seniority(str, enum.Enum):
    """Seniority level enumeration."""
    INTERN = "INTERN"
    JUNIOR = "JUNIOR"
    SENIOR = "SENIOR"


class Employee(Base):
    """Employee model. Skills and roles are stored as label lists, not foreign keys."""

    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    seniority = Column(SQLEnum(Seniority), nullable=False, default=Seniority.JUNIOR)
    skills = Column(JSON, nullable=False, default=list)
    roles = Column(JSON, nullable=False, default=list)

    # Relationships
    assignments = relationship("Assignment", back_populates="employee", passive_deletes=True)
