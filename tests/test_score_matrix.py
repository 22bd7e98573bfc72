"""점수 행렬 빌더 테스트.

Score matrix builder tests — Pivoting flat score facts into
criteria → data type → value and scattering a matrix back into facts.
"""

from app.schemas.evaluation import ScoreFact
from app.services.score_matrix import build_matrix, scatter_matrix


def _facts(*triples: tuple[int, int, int]) -> list[ScoreFact]:
    return [ScoreFact(data_type_id=d, criteria_id=c, value=v) for d, c, v in triples]


class TestBuildMatrix:
    """build_matrix 테스트."""

    def test_groups_by_criteria(self):
        """같은 기준의 데이터 유형이 한 내부 매핑으로 묶임."""
        matrix = build_matrix(_facts((1, 10, 5), (2, 10, 3)))
        assert matrix == {10: {1: 5, 2: 3}}

    def test_key_sets_follow_input(self):
        """외부 키 = 기준 집합, 내부 키 = 기준별 데이터 유형 집합."""
        facts = _facts((1, 10, 5), (2, 10, 3), (1, 20, 4), (3, 30, 1), (2, 30, 2))
        matrix = build_matrix(facts)

        assert set(matrix) == {f.criteria_id for f in facts}
        for criteria_id, inner in matrix.items():
            assert set(inner) == {f.data_type_id for f in facts if f.criteria_id == criteria_id}

    def test_last_fact_wins_on_collision(self):
        """같은 (기준, 데이터 유형) 조합은 마지막 값이 남음."""
        matrix = build_matrix(_facts((1, 10, 5), (1, 10, 2)))
        assert matrix == {10: {1: 2}}

    def test_repeated_build_is_equal(self):
        """같은 입력으로 두 번 빌드하면 같은 결과."""
        facts = _facts((1, 10, 5), (2, 20, 3))
        assert build_matrix(facts) == build_matrix(facts)

    def test_empty_input(self):
        assert build_matrix([]) == {}


class TestScatterMatrix:
    """scatter_matrix 테스트."""

    def test_scatter_yields_one_fact_per_cell(self):
        """행렬 셀마다 점수 사실 하나."""
        facts = scatter_matrix({10: {1: 5, 2: 3}, 20: {1: 4}})
        assert sorted((f.criteria_id, f.data_type_id, f.value) for f in facts) == [
            (10, 1, 5),
            (10, 2, 3),
            (20, 1, 4),
        ]

    def test_scatter_then_build_restores_matrix(self):
        matrix = {10: {1: 5, 2: 3}, 20: {3: 1}}
        assert build_matrix(scatter_matrix(matrix)) == matrix
