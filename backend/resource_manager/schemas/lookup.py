"""
Lookup schemas for roles, skills and project types.
"""

from pydantic import BaseModel


class LookupResponse(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
