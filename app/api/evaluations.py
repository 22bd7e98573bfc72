"""평가 라우터 — 평가 세션, 범위 지정, 점수 제출, 기간 요약 API.

Evaluation Router — API endpoints for evaluation sessions, scope assignment,
score submission, and period summaries.

Each route delegates to one service call; write routes commit on success.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.common import MessageResponse
from app.schemas.evaluation import (
    DataTypeAssign,
    EvaluationCreated,
    EvaluationDataTypeResponse,
    EvaluationPeriodRef,
    EvaluationProcessResponse,
    ParticipantResponse,
    ProcessAssign,
    ScoreMatrix,
    ScoreSubmit,
    SummaryEntry,
    TopScopedDataType,
    TotalEvaluationsResponse,
)
from app.services.evaluation_service import evaluation_service
from app.services.period_service import period_service
from app.services.score_matrix import scatter_matrix
from app.services.score_service import score_service
from app.services.summary_service import summary_service

router: APIRouter = APIRouter()


# === 평가 세션 ===

@router.post("", response_model=EvaluationCreated, status_code=201)
async def create_evaluation(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """현재 기간에 익명 참여자의 평가를 생성합니다."""
    evaluation = await evaluation_service.create_evaluation(db)
    await db.commit()
    return {"id": evaluation.id}


@router.get("/{evaluation_id}/period", response_model=EvaluationPeriodRef)
async def get_evaluation_period(
    evaluation_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """평가가 속한 기간 ID를 조회합니다."""
    period_id = await period_service.get_evaluation_period_id(db, evaluation_id)
    return {"evaluation_period_id": period_id}


@router.get("/{evaluation_id}/participant", response_model=ParticipantResponse)
async def get_participant(
    evaluation_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """평가에 연결된 익명 참여자를 조회합니다."""
    user = await evaluation_service.get_participant(db, evaluation_id)
    return evaluation_service.build_participant_response(user)


# === 범위 지정 ===

@router.get("/{evaluation_id}/processes", response_model=list[EvaluationProcessResponse])
async def list_processes(
    evaluation_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[dict]:
    return await evaluation_service.list_processes(db, evaluation_id)


@router.post("/{evaluation_id}/processes", response_model=list[EvaluationProcessResponse], status_code=201)
async def assign_processes(
    evaluation_id: int,
    data: ProcessAssign,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[dict]:
    """평가 범위에 프로세스를 추가합니다 (새 프로세스 인라인 생성 포함)."""
    processes = await evaluation_service.assign_processes(
        db,
        evaluation_id,
        process_ids=data.processes,
        new_process_names=[p.name for p in data.new_processes],
    )
    await db.commit()
    return processes


@router.get("/{evaluation_id}/data-types", response_model=list[EvaluationDataTypeResponse])
async def list_data_types(
    evaluation_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[dict]:
    return await evaluation_service.list_data_types(db, evaluation_id)


@router.post("/{evaluation_id}/data-types", response_model=list[EvaluationDataTypeResponse], status_code=201)
async def assign_data_types(
    evaluation_id: int,
    data: DataTypeAssign,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[dict]:
    """평가 프로세스별 데이터 유형을 범위에 추가합니다."""
    data_types = await evaluation_service.assign_data_types(db, evaluation_id, data.data)
    await db.commit()
    return data_types


# === 점수 ===

@router.get("/{evaluation_id}/scores", response_model=ScoreMatrix)
async def get_scores(
    evaluation_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ScoreMatrix:
    """평가 하나의 제출 점수 행렬을 조회합니다."""
    return await score_service.get_submitted_matrix(db, evaluation_id)


@router.post("/{evaluation_id}/scores", response_model=MessageResponse)
async def submit_scores(
    evaluation_id: int,
    data: ScoreSubmit,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """점수 행렬을 제출하고 평가를 완료 처리합니다."""
    await score_service.submit_scores(db, evaluation_id, scatter_matrix(data.scores))
    await db.commit()
    return {"message": "점수가 제출되었습니다 (Scores submitted)"}


@router.get("/{evaluation_id}/results", response_model=ScoreMatrix)
async def get_period_results(
    evaluation_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ScoreMatrix:
    """기간 전체 점수 합계 행렬을 조회합니다."""
    return await summary_service.get_period_results(db, evaluation_id)


@router.get("/{evaluation_id}/total-evaluations", response_model=TotalEvaluationsResponse)
async def get_total_evaluations(
    evaluation_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """같은 기간의 완료된 평가 수를 조회합니다 (최소 1)."""
    total = await score_service.count_completed_for_evaluation(db, evaluation_id)
    return {"total": total}


# === 기간 요약 ===

@router.get("/{evaluation_id}/summary/data-types", response_model=list[SummaryEntry])
async def get_summary_by_data_type(
    evaluation_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[dict]:
    return await summary_service.aggregate_by_data_type(db, evaluation_id)


@router.get("/{evaluation_id}/summary/quality-criteria", response_model=list[SummaryEntry])
async def get_summary_by_criteria(
    evaluation_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[dict]:
    return await summary_service.aggregate_by_criteria(db, evaluation_id)


@router.get("/{evaluation_id}/top-data-types", response_model=list[TopScopedDataType])
async def get_top_scoped_data_types(
    evaluation_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    limit: Annotated[int | None, Query(ge=1, le=100)] = None,
) -> list[dict]:
    """기간 내 범위 지정 빈도 상위 데이터 유형을 조회합니다."""
    return await summary_service.top_scoped_data_types(db, evaluation_id, limit)
