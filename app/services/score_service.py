"""점수 서비스 — 점수 제출, 완료 처리, 진행 현황.

Score Service — Score submission and completion tracking.
A submission stores the whole score set and flips the evaluation to completed
as one unit: on any failure the session is rolled back, leaving neither
score rows nor a completed flag behind.

Resubmitting for an already completed evaluation is not blocked as such;
it is rejected because its triples collide with the stored ones.
"""

from typing import Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.repositories.catalog_repository import quality_criteria_repository
from app.repositories.evaluation_repository import (
    evaluation_process_data_type_repository,
    evaluation_repository,
)
from app.repositories.score_repository import score_repository
from app.schemas.evaluation import ScoreFact, ScoreMatrix
from app.services.period_service import period_service
from app.services.score_matrix import build_matrix
from app.utils.exceptions import (
    BadRequestError,
    DuplicateError,
    ScopeViolationError,
    StoreUnavailableError,
)

# 진행 현황 최소값 — "0 of 0" 표시 방지 (progress never reports below 1)
MIN_COMPLETED_COUNT: int = 1


class ScoreService:
    """점수 서비스.

    Score submission, completed-evaluation counting, and read-back of a
    single evaluation's submitted matrix.
    """

    async def _validate_scores(
        self,
        db: AsyncSession,
        evaluation_id: int,
        scores: Sequence[ScoreFact],
    ) -> None:
        """중복/범위 검증 — Duplicate and scope checks before any write."""
        keys: set[tuple[int, int]] = set()
        for score in scores:
            key = (score.data_type_id, score.criteria_id)
            if key in keys:
                raise DuplicateError(
                    f"동일한 점수가 중복 제출되었습니다 (Duplicate score for data type {key[0]}, criteria {key[1]})"
                )
            keys.add(key)

        scoped_data_types = await evaluation_process_data_type_repository.get_scoped_data_type_ids(db, evaluation_id)
        out_of_scope = sorted({data_type_id for data_type_id, _ in keys} - scoped_data_types)
        if out_of_scope:
            raise ScopeViolationError(
                f"평가 범위 밖의 데이터 유형입니다 (Data types not in scope: {out_of_scope})"
            )

        criteria_ids = {criteria_id for _, criteria_id in keys}
        unknown_criteria = sorted(criteria_ids - await quality_criteria_repository.get_ids(db, criteria_ids))
        if unknown_criteria:
            raise ScopeViolationError(
                f"존재하지 않는 품질 기준입니다 (Unknown quality criteria: {unknown_criteria})"
            )

        if keys & await score_repository.get_keys_by_evaluation(db, evaluation_id):
            raise DuplicateError("이미 제출된 점수가 있습니다 (Scores already recorded for this evaluation)")

    async def submit_scores(
        self,
        db: AsyncSession,
        evaluation_id: int,
        scores: Sequence[ScoreFact],
    ) -> None:
        """점수 일괄 저장 후 평가를 완료 처리합니다.

        Persist every score fact as one batch, then mark the evaluation completed.
        Both writes share the session transaction; the caller commits.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            evaluation_id: 평가 ID (Evaluation identifier)
            scores: 제출 점수 목록 (Score facts to persist)

        Raises:
            NotFoundError: 평가가 존재하지 않음
            BadRequestError: 빈 점수 목록
            DuplicateError: 중복 (evaluation, data type, criteria) 조합
            ScopeViolationError: 범위 밖 데이터 유형 또는 알 수 없는 품질 기준
            StoreUnavailableError: 저장소 오류 — 세션 롤백 후 발생
        """
        await period_service.get_evaluation_period_id(db, evaluation_id)
        if not scores:
            raise BadRequestError("제출할 점수가 없습니다 (No scores submitted)")
        await self._validate_scores(db, evaluation_id, scores)

        try:
            await score_repository.create_many(db, [
                {
                    "fk_evaluation": evaluation_id,
                    "fk_data_type": score.data_type_id,
                    "fk_criteria": score.criteria_id,
                    "score": score.value,
                }
                for score in scores
            ])
            await evaluation_repository.mark_completed(db, evaluation_id)
        except IntegrityError as exc:
            await db.rollback()
            raise DuplicateError("이미 제출된 점수가 있습니다 (Scores already recorded for this evaluation)") from exc
        except SQLAlchemyError as exc:
            await db.rollback()
            raise StoreUnavailableError("점수를 저장할 수 없습니다 (Scores could not be stored)") from exc

    async def count_completed(self, db: AsyncSession, period_id: int) -> int:
        """기간 내 완료된 평가 수 — never below MIN_COMPLETED_COUNT."""
        await period_service.get_period(db, period_id)
        total = await evaluation_repository.count_completed(db, period_id)
        return max(total, MIN_COMPLETED_COUNT)

    async def count_completed_for_evaluation(self, db: AsyncSession, evaluation_id: int) -> int:
        """기준 평가와 같은 기간의 완료된 평가 수."""
        period_id = await period_service.get_evaluation_period_id(db, evaluation_id)
        total = await evaluation_repository.count_completed(db, period_id)
        return max(total, MIN_COMPLETED_COUNT)

    async def get_submitted_matrix(self, db: AsyncSession, evaluation_id: int) -> ScoreMatrix:
        await period_service.get_evaluation_period_id(db, evaluation_id)
        rows = await score_repository.get_by_evaluation(db, evaluation_id)
        return build_matrix(rows)


# 싱글턴 인스턴스
score_service: ScoreService = ScoreService()
