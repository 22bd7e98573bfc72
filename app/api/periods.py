"""평가 기간 라우터 — 기간 관리 및 이해관계자 배정 API.

Evaluation Period Router — Period administration and stakeholder assignment.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.common import MessageResponse
from app.schemas.evaluation import (
    EvaluationPeriodCreate,
    EvaluationPeriodResponse,
    StakeholderAssign,
)
from app.services.evaluation_service import evaluation_service
from app.services.period_service import period_service

router: APIRouter = APIRouter()


@router.post("", response_model=EvaluationPeriodResponse, status_code=201)
async def create_period(
    data: EvaluationPeriodCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """새 평가 기간을 생성합니다 (기본값: 현재 기간으로 지정)."""
    period = await period_service.create_period(db, name=data.name, activate=data.activate)
    await db.commit()
    return period_service.build_period_response(period)


@router.get("/current", response_model=EvaluationPeriodResponse)
async def get_current_period(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    period = await period_service.get_current_period(db)
    return period_service.build_period_response(period)


@router.post("/{period_id}/activate", response_model=EvaluationPeriodResponse)
async def activate_period(
    period_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """기간을 현재 기간으로 지정합니다."""
    period = await period_service.activate_period(db, period_id)
    await db.commit()
    return period_service.build_period_response(period)


@router.get("/{period_id}/stakeholders", response_model=list[int])
async def list_stakeholders(
    period_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[int]:
    """기간 내 평가를 가진 사용자 ID 목록."""
    return await evaluation_service.list_stakeholders(db, period_id)


@router.post("/{period_id}/stakeholders", response_model=MessageResponse, status_code=201)
async def assign_stakeholders(
    period_id: int,
    data: StakeholderAssign,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """기간에 이해관계자를 배정합니다 — 사용자마다 평가 1건 생성."""
    evaluations = await evaluation_service.assign_stakeholders(db, period_id, data.users)
    await db.commit()
    return {"message": f"{len(evaluations)}건의 평가가 생성되었습니다 ({len(evaluations)} evaluations created)"}
