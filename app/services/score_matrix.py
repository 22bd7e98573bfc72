"""점수 행렬 빌더 — 평면 점수 목록 ↔ 2단계 매핑 변환.

Score Matrix Builder — Pivots flat score facts into a two-level mapping
(criteria_id → data_type_id → value) and scatters a matrix back into facts.

The same builder serves a single evaluation's own submission and the
period-wide sums, where each value is a pre-computed sum rather than a raw score.

Overwrite policy:
    When two facts share (criteria_id, data_type_id), the last one processed wins.
    Collisions are neither detected nor rejected here; the score table's
    uniqueness constraint keeps stored data free of them.
"""

from typing import Any, Iterable

from app.schemas.evaluation import ScoreFact, ScoreMatrix


def build_matrix(facts: Iterable[Any]) -> ScoreMatrix:
    """점수 사실 목록을 criteria → data type → value 매핑으로 변환.

    Args:
        facts: ``data_type_id``, ``criteria_id``, ``value`` 속성을 가진 객체들
               (ScoreFact models or result rows with those attributes)

    Returns:
        ScoreMatrix: 외부 키 = criteria_id, 내부 키 = data_type_id
    """
    matrix: ScoreMatrix = {}
    for fact in facts:
        matrix.setdefault(fact.criteria_id, {})[fact.data_type_id] = fact.value
    return matrix


def scatter_matrix(matrix: ScoreMatrix) -> list[ScoreFact]:
    """점수 행렬을 점수 사실 목록으로 펼침 (build_matrix의 역변환)."""
    return [
        ScoreFact(data_type_id=data_type_id, criteria_id=criteria_id, value=value)
        for criteria_id, data_type_scores in matrix.items()
        for data_type_id, value in data_type_scores.items()
    ]
