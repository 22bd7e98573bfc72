"""이해관계자(사용자) 및 부서 SQLAlchemy ORM 모델 정의.

Stakeholder (user) and department SQLAlchemy ORM model definitions.
Participants are anonymous synthetic users; department membership is
recorded purely as reporting metadata.

Tables:
    - user: 이해관계자 계정 (Stakeholder identities)
    - department: 부서 (Departments)
    - user_department: 사용자-부서 매핑 (User ↔ department membership)
"""

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class User(Base):
    """이해관계자 모델 — 평가 참여자 또는 사전 등록된 사용자.

    Stakeholder model — Either a pre-seeded user or a synthetic participant
    created together with an evaluation.

    Attributes:
        id: 고유 식별자
        email: 이메일 (unique)
        first_name: 이름
        last_name: 성
    """

    __tablename__ = "user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)

    departments = relationship("UserDepartment", back_populates="user", cascade="all, delete-orphan")


class Department(Base):
    """부서 모델."""

    __tablename__ = "department"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    members = relationship("UserDepartment", back_populates="department", cascade="all, delete-orphan")


class UserDepartment(Base):
    """사용자-부서 매핑 모델.

    Constraints:
        uq_user_department: (fk_user, fk_department) — 중복 소속 방지
    """

    __tablename__ = "user_department"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fk_user: Mapped[int] = mapped_column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    fk_department: Mapped[int] = mapped_column(Integer, ForeignKey("department.id", ondelete="CASCADE"), nullable=False)

    __table_args__ = (
        UniqueConstraint("fk_user", "fk_department", name="uq_user_department"),
    )

    user = relationship("User", back_populates="departments")
    department = relationship("Department", back_populates="members")
