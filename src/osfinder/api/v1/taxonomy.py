"""Read-only label lists for the submission form pickers."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from osfinder.db.session import get_db
from osfinder.repositories.taxonomy import (
    CategoryRepository,
    ProprietaryRepository,
    TechStackRepository,
)
from osfinder.schemas.taxonomy import CategoryResponse, ProprietaryResponse, TechStackResponse

router = APIRouter(tags=["taxonomy"])


@router.get("/categories", response_model=list[CategoryResponse])
async def list_categories(db: AsyncSession = Depends(get_db)):
    return await CategoryRepository(db).list_ordered()


@router.get("/proprietary", response_model=list[ProprietaryResponse])
async def list_proprietary(db: AsyncSession = Depends(get_db)):
    return await ProprietaryRepository(db).list_ordered()


@router.get("/tech-stacks", response_model=list[TechStackResponse])
async def list_tech_stacks(db: AsyncSession = Depends(get_db)):
    return await TechStackRepository(db).list_ordered()
