"""평가 서비스 — 평가 세션 생성 및 범위 지정.

Evaluation Service — Allocates anonymous evaluations against the current period
and records which stakeholders, processes, and data types are in scope.
"""

import random
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.evaluation import Evaluation
from app.models.user import User
from app.repositories.catalog_repository import data_type_repository, process_repository
from app.repositories.evaluation_repository import (
    evaluation_process_data_type_repository,
    evaluation_process_repository,
    evaluation_repository,
)
from app.repositories.user_repository import (
    department_repository,
    user_department_repository,
    user_repository,
)
from app.schemas.evaluation import DataTypeAssignItem
from app.services.period_service import period_service
from app.utils.exceptions import NotFoundError, ScopeViolationError
from app.utils.identity import IdentityGenerator, generate_anonymous_identity


class EvaluationService:
    """평가 세션 서비스.

    Evaluation session service providing anonymous evaluation creation and
    append-only scope assignment.

    Args:
        identity_generator: 익명 참여자 신원 생성기 (Participant identity generator)
        rng: 부서 배정용 난수 생성기 (Random source for department assignment)
    """

    def __init__(
        self,
        identity_generator: IdentityGenerator = generate_anonymous_identity,
        rng: random.Random | None = None,
    ) -> None:
        self._identity_generator = identity_generator
        self._rng = rng or random.Random()

    # === 평가 세션 ===

    async def create_evaluation(self, db: AsyncSession) -> Evaluation:
        """현재 기간에 익명 참여자와 평가를 새로 생성합니다.

        A synthetic participant is created, bound to a pseudo-random department
        (skipped when no department exists), and given a new evaluation in the
        current period.

        Raises:
            NotFoundError: 평가 기간이 하나도 없음 (No evaluation period exists)
        """
        period = await period_service.get_current_period(db)

        identity = self._identity_generator()
        user = await user_repository.create(db, {
            "email": identity.email,
            "first_name": identity.first_name,
            "last_name": identity.last_name,
        })

        department_ids = await department_repository.list_ids(db)
        if department_ids:
            await user_department_repository.create(db, {
                "fk_user": user.id,
                "fk_department": self._rng.choice(department_ids),
            })

        return await evaluation_repository.create(db, {
            "fk_period": period.id,
            "fk_user": user.id,
            "completed": False,
        })

    async def get_participant(self, db: AsyncSession, evaluation_id: int) -> User:
        user = await user_repository.get_by_evaluation(db, evaluation_id)
        if user is None:
            raise NotFoundError("평가를 찾을 수 없습니다 (Evaluation not found)")
        return user

    def build_participant_response(self, user: User) -> dict:
        return {
            "id": user.id,
            "email": user.email,
            "first_name": user.first_name,
            "last_name": user.last_name,
        }

    # === 이해관계자 범위 ===

    async def assign_stakeholders(
        self,
        db: AsyncSession,
        period_id: int,
        user_ids: Sequence[int],
    ) -> list[Evaluation]:
        """기간에 이해관계자를 배정 — 사용자마다 평가 1건 생성."""
        await period_service.get_period(db, period_id)
        missing = sorted(set(user_ids) - await user_repository.get_ids(db, set(user_ids)))
        if missing:
            raise NotFoundError(f"사용자를 찾을 수 없습니다 (Users not found: {missing})")

        return await evaluation_repository.create_many(db, [
            {"fk_period": period_id, "fk_user": user_id, "completed": False}
            for user_id in user_ids
        ])

    async def list_stakeholders(self, db: AsyncSession, period_id: int) -> list[int]:
        await period_service.get_period(db, period_id)
        return await evaluation_repository.get_user_ids_by_period(db, period_id)

    # === 프로세스 범위 ===

    async def assign_processes(
        self,
        db: AsyncSession,
        evaluation_id: int,
        process_ids: Sequence[int],
        new_process_names: Sequence[str] = (),
    ) -> list[dict]:
        """평가 범위에 기존 프로세스와 새 프로세스를 추가합니다."""
        await period_service.get_evaluation_period_id(db, evaluation_id)
        missing = sorted(set(process_ids) - await process_repository.get_ids(db, set(process_ids)))
        if missing:
            raise NotFoundError(f"프로세스를 찾을 수 없습니다 (Processes not found: {missing})")

        # 인라인 생성 프로세스 — Processes created on the fly
        created = await process_repository.create_many(db, [{"name": name} for name in new_process_names])
        all_process_ids = [*process_ids, *(process.id for process in created)]

        await evaluation_process_repository.create_many(db, [
            {"fk_evaluation": evaluation_id, "fk_process": process_id}
            for process_id in all_process_ids
        ])
        return await self.list_processes(db, evaluation_id)

    async def list_processes(self, db: AsyncSession, evaluation_id: int) -> list[dict]:
        await period_service.get_evaluation_period_id(db, evaluation_id)
        rows = await evaluation_process_repository.get_with_process(db, evaluation_id)
        return [
            {"id": row.id, "name": row.name, "evaluation_process_id": row.evaluation_process_id}
            for row in rows
        ]

    # === 데이터 유형 범위 ===

    async def assign_data_types(
        self,
        db: AsyncSession,
        evaluation_id: int,
        items: Sequence[DataTypeAssignItem],
    ) -> list[dict]:
        """평가 프로세스별로 데이터 유형을 범위에 추가합니다.

        Raises:
            ScopeViolationError: 다른 평가의 evaluation_process 참조
            NotFoundError: 존재하지 않는 데이터 유형
        """
        await period_service.get_evaluation_period_id(db, evaluation_id)

        own_process_ids = await evaluation_process_repository.get_ids_by_evaluation(db, evaluation_id)
        foreign = sorted({item.evaluation_process_id for item in items} - own_process_ids)
        if foreign:
            raise ScopeViolationError(
                f"평가에 속하지 않은 프로세스입니다 (Evaluation processes not in this evaluation: {foreign})"
            )

        data_type_ids = {item.data_type_id for item in items}
        missing = sorted(data_type_ids - await data_type_repository.get_ids(db, data_type_ids))
        if missing:
            raise NotFoundError(f"데이터 유형을 찾을 수 없습니다 (Data types not found: {missing})")

        await evaluation_process_data_type_repository.create_many(db, [
            {"fk_evaluation_process": item.evaluation_process_id, "fk_data_type": item.data_type_id}
            for item in items
        ])
        return await self.list_data_types(db, evaluation_id)

    async def list_data_types(self, db: AsyncSession, evaluation_id: int) -> list[dict]:
        await period_service.get_evaluation_period_id(db, evaluation_id)
        rows = await evaluation_process_data_type_repository.get_by_evaluation(db, evaluation_id)
        return [{"process_id": row.process_id, "data_type_id": row.data_type_id} for row in rows]


# 싱글턴 인스턴스
evaluation_service: EvaluationService = EvaluationService()
