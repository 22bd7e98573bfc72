"""카탈로그 Pydantic 스키마 — Catalog response schemas.

Schemas for stakeholders grouped by department, processes,
data types, and quality criteria.
"""

from pydantic import BaseModel


class UserResponse(BaseModel):
    """사용자 응답 스키마 (부서 소속과 무관)."""
    id: int
    first_name: str
    last_name: str


class StakeholderUser(BaseModel):
    """부서 소속 사용자."""
    id: int
    first_name: str
    last_name: str


class DepartmentStakeholders(BaseModel):
    """부서별 이해관계자 목록."""
    id: int
    name: str
    users: list[StakeholderUser] = []


class ProcessResponse(BaseModel):
    id: int
    name: str


class DataTypeResponse(BaseModel):
    id: int
    name: str
    description: str | None = None


class QualityCriteriaResponse(BaseModel):
    """품질 기준 응답 스키마."""
    id: int
    name: str
    description: str | None = None
    guidelines: str | None = None
