"""
Project and project requirement models.
"""

from sqlalchemy import Column, Integer, String, Date, JSON, ForeignKey, CheckConstraint, Enum as SQLEnum
from sqlalchemy.orm import relationship
import enum

from resource_manager.db.base import Base
from resource_manager.models.employee import Seniority


class ProjectStatus(str, enum.Enum):
    """Project status enumeration, derived from the project dates on write."""
    UPCOMING = "UPCOMING"
    CURRENT = "CURRENT"
    COMPLETED = "COMPLETED"


class Satisfaction(str, enum.Enum):
    """Client satisfaction scale."""
    VERY_SATISFIED = "VERY_SATISFIED"
    SATISFIED = "SATISFIED"
    NEUTRAL = "NEUTRAL"
    DISSATISFIED = "DISSATISFIED"
    VERY_DISSATISFIED = "VERY_DISSATISFIED"
    IDK = "IDK"


class Project(Base):
    """Project model."""

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    status = Column(SQLEnum(ProjectStatus), nullable=False, default=ProjectStatus.UPCOMING, index=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)  # None means ongoing
    type = Column(String(100), nullable=True)
    tools = Column(JSON, nullable=False, default=list)
    client_satisfaction = Column(SQLEnum(Satisfaction), nullable=False, default=Satisfaction.IDK)

    # Relationships
    assignments = relationship("Assignment", back_populates="project", passive_deletes=True)
    requirements = relationship(
        "ProjectRequirement",
        back_populates="project",
        passive_deletes=True,
        order_by="ProjectRequirement.id",
    )


class ProjectRequirement(Base):
    """Staffing need for a project. Reporting only, never enforced on assignment."""

    __tablename__ = "project_requirements"
    __table_args__ = (
        CheckConstraint("quantity >= 1", name="quantity_positive"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=False)
    seniority = Column(SQLEnum(Seniority), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    # Relationships
    project = relationship("Project", back_populates="requirements")
    role = relationship("Role")
