"""
Lookup API endpoints for roles, skills and project types.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from resource_manager.db.session import get_db
from resource_manager.controllers.lookup_controller import LookupController
from resource_manager.schemas.lookup import LookupResponse

router = APIRouter()


@router.get("/roles", response_model=List[LookupResponse])
async def list_roles(db: AsyncSession = Depends(get_db)) -> List[LookupResponse]:
    return await LookupController(db).list_roles()


@router.get("/skills", response_model=List[LookupResponse])
async def list_skills(db: AsyncSession = Depends(get_db)) -> List[LookupResponse]:
    return await LookupController(db).list_skills()


@router.get("/types", response_model=List[LookupResponse])
async def list_types(db: AsyncSession = Depends(get_db)) -> List[LookupResponse]:
    return await LookupController(db).list_types()
