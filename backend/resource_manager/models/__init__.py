"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from resource_manager.models.employee import Employee, Seniority
from resource_manager.models.project import Project, ProjectRequirement, ProjectStatus, Satisfaction
from resource_manager.models.assignment import Assignment
from resource_manager.models.role import Role, Skill, ProjectType

__all__ = [
    "Employee",
    "Seniority",
    "Project",
    "ProjectRequirement",
    "ProjectStatus",
    "Satisfaction",
    "Assignment",
    "Role",
    "Skill",
    "ProjectType",
]
