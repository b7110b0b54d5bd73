"""Tests for the top-N rescoring transform and the mock ranking."""

from __future__ import annotations

from coderank.core.ranking import mock_leaderboard, score_for_rank, top_n


class TestTopN:
    def test_fifteen_entries_top_ten(self, synthetic_entries) -> None:
        result = top_n(synthetic_entries, 10)
        assert len(result) == 10
        assert [m.rank for m in result] == list(range(1, 11))
        assert [m.score for m in result] == [1500, 1490, 1480, 1470, 1460, 1450, 1440, 1430, 1420, 1410]
        assert [m.name for m in result] == [f"model-{r}" for r in range(1, 11)]

    def test_fewer_entries_than_n(self, synthetic_entries) -> None:
        result = top_n(synthetic_entries[:4], 10)
        assert len(result) == 4
        assert [m.rank for m in result] == [1, 2, 3, 4]

    def test_gaps_renumber_ranks_but_keep_score_gaps(self, entry_factory) -> None:
        entries = [entry_factory("c", 9), entry_factory("a", 2), entry_factory("b", 5)]
        result = top_n(entries, 3)
        assert [(m.name, m.rank, m.score) for m in result] == [("a", 1, 1490), ("b", 2, 1460), ("c", 3, 1420)]

    def test_scores_non_increasing(self, entry_factory) -> None:
        entries = [entry_factory(f"m{i}", r) for i, r in enumerate([3, 3, 1, 40, 7])]
        scores = [m.score for m in top_n(entries, 5)]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_document_order(self, entry_factory) -> None:
        entries = [entry_factory("first", 2), entry_factory("second", 2)]
        assert [m.name for m in top_n(entries, 2)] == ["first", "second"]

    def test_zero_or_negative_n(self, synthetic_entries) -> None:
        assert top_n(synthetic_entries, 0) == []
        assert top_n(synthetic_entries, -1) == []

    def test_license_follows_organization(self, entry_factory) -> None:
        result = top_n([entry_factory("DeepSeek-V3", 1, "DeepSeek"), entry_factory("GPT-4o", 2)], 2)
        assert [m.license for m in result] == ["MIT", "Proprietary"]
        assert all(m.votes == 0 for m in result)


class TestScoreForRank:
    def test_linear_transform(self) -> None:
        assert score_for_rank(1) == 1500
        assert score_for_rank(2) == 1490
        assert score_for_rank(51) == 1000


class TestMockLeaderboard:
    def test_ten_contiguous_models(self) -> None:
        models = mock_leaderboard()
        assert [m.rank for m in models] == list(range(1, 11))
        assert models[0].score == 1500
        assert models[-1].score == 1410

    def test_major_providers_present(self) -> None:
        organizations = {m.organization for m in mock_leaderboard()}
        assert {"OpenAI", "Anthropic", "Google"} <= organizations
