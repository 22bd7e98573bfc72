"""이해관계자 레포지토리 — 사용자 및 부서 소속 쿼리.

Stakeholder Repository — Queries for users and department membership.
"""

from typing import Sequence

from sqlalchemy import Row, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.evaluation import Evaluation
from app.models.user import Department, User, UserDepartment
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """사용자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the user table.
    """

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_evaluation(self, db: AsyncSession, evaluation_id: int) -> User | None:
        """평가에 연결된 참여자를 조회합니다.

        Retrieve the participant bound to an evaluation.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            evaluation_id: 평가 ID (Evaluation identifier)

        Returns:
            User | None: 참여자 또는 None (Participant or None)
        """
        result = await db.execute(
            select(User)
            .join(Evaluation, Evaluation.fk_user == User.id)
            .where(Evaluation.id == evaluation_id)
        )
        return result.scalar_one_or_none()

    async def get_by_department(self, db: AsyncSession) -> Sequence[Row]:
        """부서별 소속 사용자 행 목록 (department id/name + user columns)."""
        result = await db.execute(
            select(
                Department.id.label("department_id"),
                Department.name.label("department_name"),
                User.id.label("user_id"),
                User.first_name,
                User.last_name,
            )
            .join(UserDepartment, UserDepartment.fk_department == Department.id)
            .join(User, User.id == UserDepartment.fk_user)
            .order_by(Department.id, User.id)
        )
        return result.all()


class DepartmentRepository(BaseRepository[Department]):

    def __init__(self) -> None:
        super().__init__(Department)

    async def list_ids(self, db: AsyncSession) -> list[int]:
        result = await db.execute(select(Department.id).order_by(Department.id))
        return list(result.scalars().all())


class UserDepartmentRepository(BaseRepository[UserDepartment]):

    def __init__(self) -> None:
        super().__init__(UserDepartment)


user_repository: UserRepository = UserRepository()
department_repository: DepartmentRepository = DepartmentRepository()
user_department_repository: UserDepartmentRepository = UserDepartmentRepository()
