"""평가 Pydantic 스키마 — Evaluation request/response schemas.

Evaluation Pydantic schema definitions.
Includes schemas for periods, evaluation scoping, score facts,
score matrices, and period summaries.
"""

from datetime import datetime
from pydantic import BaseModel, Field


# 점수 행렬 — criteria_id → data_type_id → value
ScoreMatrix = dict[int, dict[int, int]]


# === 평가 기간 (Evaluation Period) 스키마 ===

class EvaluationPeriodCreate(BaseModel):
    """평가 기간 생성 스키마."""
    name: str | None = None
    activate: bool = True  # 생성과 동시에 현재 기간으로 지정


class EvaluationPeriodResponse(BaseModel):
    """평가 기간 응답 스키마."""
    id: int
    name: str | None = None
    is_active: bool
    created_at: datetime


class EvaluationPeriodRef(BaseModel):
    """평가가 속한 기간 ID 응답."""
    evaluation_period_id: int


# === 평가 (Evaluation) 스키마 ===

class EvaluationCreated(BaseModel):
    """평가 생성 응답 스키마."""
    id: int


class ParticipantResponse(BaseModel):
    """익명 참여자 응답 스키마."""
    id: int
    email: str | None = None
    first_name: str
    last_name: str


class StakeholderAssign(BaseModel):
    """기간에 이해관계자 배정 — 사용자마다 평가 1건 생성."""
    users: list[int] = Field(default_factory=list)


class NewProcess(BaseModel):
    """인라인 생성 프로세스."""
    name: str = Field(min_length=1, max_length=255)


class ProcessAssign(BaseModel):
    """평가 범위에 프로세스 배정 스키마."""
    processes: list[int] = Field(default_factory=list)
    new_processes: list[NewProcess] = Field(default_factory=list)


class EvaluationProcessResponse(BaseModel):
    """범위 내 프로세스 응답 스키마."""
    id: int
    name: str
    evaluation_process_id: int


class DataTypeAssignItem(BaseModel):
    """프로세스별 데이터 유형 배정 항목."""
    evaluation_process_id: int
    data_type_id: int


class DataTypeAssign(BaseModel):
    """평가 범위에 데이터 유형 배정 스키마."""
    data: list[DataTypeAssignItem] = Field(default_factory=list)


class EvaluationDataTypeResponse(BaseModel):
    """범위 내 (프로세스, 데이터 유형) 쌍 응답."""
    process_id: int
    data_type_id: int


# === 점수 (Score) 스키마 ===

class ScoreFact(BaseModel):
    """점수 사실 — (data type, criterion, value) 하나."""
    data_type_id: int
    criteria_id: int
    value: int


class ScoreSubmit(BaseModel):
    """점수 제출 스키마 — 점수 행렬 (criteria_id → data_type_id → value)."""
    scores: ScoreMatrix


class TotalEvaluationsResponse(BaseModel):
    """기간 내 완료된 평가 수 (최소 1)."""
    total: int


class SummaryEntry(BaseModel):
    """기간 요약 항목 — 데이터 유형 또는 품질 기준 하나.

    average_score는 priority가 0이면 None (no data).
    """
    id: int
    name: str
    priority: int
    total_score: int
    average_score: float | None = None


class TopScopedDataType(BaseModel):
    """범위 지정 빈도 상위 데이터 유형."""
    id: int
    name: str
    description: str | None = None
    count: int
