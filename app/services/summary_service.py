"""기간 요약 서비스 — 데이터 유형/품질 기준별 우선순위 집계.

Period Summary Service — Folds every completed evaluation of a period into
per-data-type and per-criterion rankings.

Metrics per entity:
    priority: 기여한 점수 행 수 (number of contributing score rows, not participants)
    total_score: 점수 합계 (sum of score values over the same rows)
    average_score: total_score / priority, None when priority is 0

Ranking: priority descending, then id ascending as the explicit tie-break.
"""

from typing import Any, Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.repositories.catalog_repository import data_type_repository
from app.repositories.score_repository import score_repository
from app.schemas.evaluation import ScoreMatrix
from app.services.period_service import period_service
from app.services.score_matrix import build_matrix


def average_score(total_score: int, priority: int) -> float | None:
    """평균 점수 — priority가 0이면 None (no data, never a division fault)."""
    if priority == 0:
        return None
    return total_score / priority


def rank_summaries(rows: Iterable[Any]) -> list[dict]:
    """집계 행을 요약 항목으로 변환하고 우선순위 순으로 정렬.

    Args:
        rows: ``id``, ``name``, ``priority``, ``total_score`` 속성을 가진 행

    Returns:
        list[dict]: priority 내림차순, id 오름차순 정렬된 요약 목록
    """
    entries = []
    for row in rows:
        priority = int(row.priority or 0)
        total_score = int(row.total_score or 0)
        entries.append({
            "id": row.id,
            "name": row.name,
            "priority": priority,
            "total_score": total_score,
            "average_score": average_score(total_score, priority),
        })
    entries.sort(key=lambda entry: (-entry["priority"], entry["id"]))
    return entries


class SummaryService:
    """기간 요약 서비스.

    Every aggregation resolves the reference evaluation's period first, so an
    unknown evaluation fails with NotFoundError instead of an empty table.
    """

    async def aggregate_by_data_type(self, db: AsyncSession, evaluation_id: int) -> list[dict]:
        period_id = await period_service.get_evaluation_period_id(db, evaluation_id)
        rows = await score_repository.get_summary_by_data_type(db, period_id)
        return rank_summaries(rows)

    async def aggregate_by_criteria(self, db: AsyncSession, evaluation_id: int) -> list[dict]:
        period_id = await period_service.get_evaluation_period_id(db, evaluation_id)
        rows = await score_repository.get_summary_by_criteria(db, period_id)
        return rank_summaries(rows)

    async def get_period_results(self, db: AsyncSession, evaluation_id: int) -> ScoreMatrix:
        """기간 전체 점수 합계 행렬 (criteria → data type → sum)."""
        period_id = await period_service.get_evaluation_period_id(db, evaluation_id)
        rows = await score_repository.get_period_sums(db, period_id)
        return build_matrix(rows)

    async def top_scoped_data_types(
        self,
        db: AsyncSession,
        evaluation_id: int,
        limit: int | None = None,
    ) -> list[dict]:
        period_id = await period_service.get_evaluation_period_id(db, evaluation_id)
        rows = await data_type_repository.get_top_scoped(
            db, period_id, limit or settings.TOP_SCOPED_DATA_TYPES_LIMIT
        )
        return [
            {"id": row.id, "name": row.name, "description": row.description, "count": row.scope_count}
            for row in rows
        ]


# 싱글턴 인스턴스
summary_service: SummaryService = SummaryService()
