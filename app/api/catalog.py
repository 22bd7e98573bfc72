"""카탈로그 라우터 — 이해관계자/프로세스/데이터 유형/품질 기준 조회 API.

Catalog Router — Read-only catalog endpoints, including the flat user list.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.catalog import (
    DataTypeResponse,
    DepartmentStakeholders,
    ProcessResponse,
    QualityCriteriaResponse,
    UserResponse,
)
from app.services.catalog_service import catalog_service

router: APIRouter = APIRouter()


@router.get("/stakeholders", response_model=list[DepartmentStakeholders])
async def list_stakeholders(db: Annotated[AsyncSession, Depends(get_db)]) -> list[dict]:
    """부서별 이해관계자 목록."""
    return await catalog_service.list_stakeholders(db)


@router.get("/users", response_model=list[UserResponse])
async def list_users(db: Annotated[AsyncSession, Depends(get_db)]) -> list[dict]:
    """전체 사용자 목록 (부서 소속 여부와 무관)."""
    return await catalog_service.list_users(db)


@router.get("/processes", response_model=list[ProcessResponse])
async def list_processes(db: Annotated[AsyncSession, Depends(get_db)]) -> list[dict]:
    return await catalog_service.list_processes(db)


@router.get("/data-types", response_model=list[DataTypeResponse])
async def list_data_types(db: Annotated[AsyncSession, Depends(get_db)]) -> list[dict]:
    return await catalog_service.list_data_types(db)


@router.get("/quality-criteria", response_model=list[QualityCriteriaResponse])
async def list_quality_criteria(db: Annotated[AsyncSession, Depends(get_db)]) -> list[dict]:
    return await catalog_service.list_quality_criteria(db)
