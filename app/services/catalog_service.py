"""카탈로그 서비스 — 이해관계자, 프로세스, 데이터 유형, 품질 기준 조회.

Catalog Service — Read access to the catalogs participants choose from.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.repositories.catalog_repository import (
    data_type_repository,
    process_repository,
    quality_criteria_repository,
)
from app.repositories.user_repository import user_repository


class CatalogService:

    async def list_stakeholders(self, db: AsyncSession) -> list[dict]:
        """부서별로 묶은 이해관계자 목록 (departments without members are omitted)."""
        departments: dict[int, dict] = {}
        for row in await user_repository.get_by_department(db):
            department = departments.setdefault(row.department_id, {
                "id": row.department_id,
                "name": row.department_name,
                "users": [],
            })
            department["users"].append({
                "id": row.user_id,
                "first_name": row.first_name,
                "last_name": row.last_name,
            })
        return list(departments.values())

    async def list_users(self, db: AsyncSession) -> list[dict]:
        """전체 사용자 목록 — includes users without a department."""
        users = await user_repository.get_all(db)
        return [{"id": u.id, "first_name": u.first_name, "last_name": u.last_name} for u in users]

    async def list_processes(self, db: AsyncSession) -> list[dict]:
        processes = await process_repository.get_all(db)
        return [{"id": p.id, "name": p.name} for p in processes]

    async def list_data_types(self, db: AsyncSession) -> list[dict]:
        data_types = await data_type_repository.get_all(db)
        return [{"id": d.id, "name": d.name, "description": d.description} for d in data_types]

    async def list_quality_criteria(self, db: AsyncSession) -> list[dict]:
        criteria = await quality_criteria_repository.get_all(db)
        return [
            {"id": c.id, "name": c.name, "description": c.description, "guidelines": c.guidelines}
            for c in criteria
        ]


# 싱글턴 인스턴스
catalog_service: CatalogService = CatalogService()
