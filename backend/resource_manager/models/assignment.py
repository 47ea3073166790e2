"""
Assignment model: a dated, percentage-weighted commitment of an employee to a project.
"""

from sqlalchemy import Column, Integer, Date, ForeignKey, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import relationship

from resource_manager.db.base import Base


class Assignment(Base):
    """Assignment model. Both dates are inclusive."""

    __tablename__ = "assignments"
    __table_args__ = (
        UniqueConstraint(
            "employee_id",
            "project_id",
            "start_date",
            "end_date",
            name="uq_assignments_employee_project_dates",
        ),
        CheckConstraint("start_date <= end_date", name="dates_ordered"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False)
    utilisation = Column(Integer, nullable=False)  # percent, deliberately unclamped

    # Relationships
    employee = relationship("Employee", back_populates="assignments")
    project = relationship("Project", back_populates="assignments")
