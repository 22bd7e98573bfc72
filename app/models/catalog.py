"""평가 카탈로그 SQLAlchemy ORM 모델 정의.

Evaluation catalog SQLAlchemy ORM model definitions.
Processes and data types are placed in scope per evaluation;
quality criteria form a global catalog shared by every period.

Tables:
    - process: 업무 프로세스 (Business processes)
    - data_type: 데이터 유형 (Data types)
    - quality_criteria: 품질 기준 (Quality criteria)
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Process(Base):
    """업무 프로세스 모델 — 평가 범위 지정 시 인라인 생성 가능.

    Process model — May be created inline while scoping an evaluation.
    """

    __tablename__ = "process"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)


class DataType(Base):
    """데이터 유형 모델.

    Data type model — Rated against every quality criterion.

    Attributes:
        id: 고유 식별자
        name: 이름
        description: 설명
    """

    __tablename__ = "data_type"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class QualityCriteria(Base):
    """품질 기준 모델.

    Quality criterion model — Global catalog, not period-scoped.

    Attributes:
        id: 고유 식별자
        name: 이름
        description: 설명
        guidelines: 평가 가이드라인 (Scoring guidelines shown to participants)
    """

    __tablename__ = "quality_criteria"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    guidelines: Mapped[str | None] = mapped_column(Text, nullable=True)
