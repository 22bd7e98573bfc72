"""create_evaluation_schema

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 09:00:00.000000

평가 스키마 생성: 기간, 이해관계자, 카탈로그, 평가 범위, 점수.
Create the evaluation schema: periods, stakeholders, catalogs, scoping joins, scores.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1b2c3d4e5f6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # evaluation_period — 평가 기간 (is_active = 현재 기간 표시)
    op.create_table(
        'evaluation_period',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=True),
        sa.Column('is_active', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # user / department / user_department — 이해관계자 및 부서 소속
    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(255), nullable=True, unique=True),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
    )
    op.create_table(
        'department',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
    )
    op.create_table(
        'user_department',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('fk_user', sa.Integer(), sa.ForeignKey('user.id', ondelete='CASCADE'), nullable=False),
        sa.Column('fk_department', sa.Integer(), sa.ForeignKey('department.id', ondelete='CASCADE'), nullable=False),
        sa.UniqueConstraint('fk_user', 'fk_department', name='uq_user_department'),
    )

    # process / data_type / quality_criteria — 카탈로그
    op.create_table(
        'process',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
    )
    op.create_table(
        'data_type',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
    )
    op.create_table(
        'quality_criteria',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('guidelines', sa.Text(), nullable=True),
    )

    # evaluation — 참여자별 평가 (completed: false → true 한 번만)
    op.create_table(
        'evaluation',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('fk_period', sa.Integer(), sa.ForeignKey('evaluation_period.id', ondelete='CASCADE'), nullable=False),
        sa.Column('fk_user', sa.Integer(), sa.ForeignKey('user.id', ondelete='CASCADE'), nullable=False),
        sa.Column('completed', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_evaluation_fk_period', 'evaluation', ['fk_period'])

    # 범위 조인 — Scoping joins
    op.create_table(
        'evaluation_process',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('fk_evaluation', sa.Integer(), sa.ForeignKey('evaluation.id', ondelete='CASCADE'), nullable=False),
        sa.Column('fk_process', sa.Integer(), sa.ForeignKey('process.id', ondelete='CASCADE'), nullable=False),
    )
    op.create_index('ix_evaluation_process_fk_evaluation', 'evaluation_process', ['fk_evaluation'])
    op.create_table(
        'evaluation_process_data_type',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('fk_evaluation_process', sa.Integer(), sa.ForeignKey('evaluation_process.id', ondelete='CASCADE'), nullable=False),
        sa.Column('fk_data_type', sa.Integer(), sa.ForeignKey('data_type.id', ondelete='CASCADE'), nullable=False),
    )
    op.create_index(
        'ix_evaluation_process_data_type_fk_evaluation_process',
        'evaluation_process_data_type',
        ['fk_evaluation_process'],
    )

    # 점수 — (evaluation, data_type, criteria) 당 하나
    op.create_table(
        'evaluation_data_type_criteria_score',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('fk_evaluation', sa.Integer(), sa.ForeignKey('evaluation.id', ondelete='CASCADE'), nullable=False),
        sa.Column('fk_data_type', sa.Integer(), sa.ForeignKey('data_type.id', ondelete='CASCADE'), nullable=False),
        sa.Column('fk_criteria', sa.Integer(), sa.ForeignKey('quality_criteria.id', ondelete='CASCADE'), nullable=False),
        sa.Column('score', sa.Integer(), nullable=False),
        sa.UniqueConstraint('fk_evaluation', 'fk_data_type', 'fk_criteria', name='uq_score_eval_data_type_criteria'),
    )
    op.create_index(
        'ix_evaluation_data_type_criteria_score_fk_evaluation',
        'evaluation_data_type_criteria_score',
        ['fk_evaluation'],
    )


def downgrade() -> None:
    op.drop_table('evaluation_data_type_criteria_score')
    op.drop_table('evaluation_process_data_type')
    op.drop_table('evaluation_process')
    op.drop_table('evaluation')
    op.drop_table('quality_criteria')
    op.drop_table('data_type')
    op.drop_table('process')
    op.drop_table('user_department')
    op.drop_table('department')
    op.drop_table('user')
    op.drop_table('evaluation_period')
