"""평가 기간 SQLAlchemy ORM 모델 정의.

Evaluation period SQLAlchemy ORM model definition.
A period is one evaluation campaign; every evaluation belongs to exactly one.

Tables:
    - evaluation_period: 평가 기간 (Evaluation campaigns)
"""

from datetime import datetime, timezone
from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class EvaluationPeriod(Base):
    """평가 기간 모델 — 참여자별 평가를 모으는 캠페인 단위.

    Evaluation period model — A bounded campaign collecting one evaluation per participant.
    The current period is the one flagged ``is_active``; when no period is flagged,
    the most recently created (highest id) period is used instead.

    Attributes:
        id: 고유 식별자 (Store-generated integer identifier)
        name: 기간 이름 (Optional display name)
        is_active: 현재 기간 여부 (Administrative "current period" marker)
        created_at: 생성 일시 UTC

    Relationships:
        evaluations: 기간 내 평가 목록
    """

    __tablename__ = "evaluation_period"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    evaluations = relationship("Evaluation", back_populates="period")
