"""Tests for leaderboard table extraction."""

from __future__ import annotations

from coderank.fetch.extract import extract_entries


def _table(header: list[str], rows: list[list[str]], tbody: bool = True) -> str:
    head = "<tr>" + "".join(f"<th>{h}</th>" for h in header) + "</tr>"
    body = "".join("<tr>" + "".join(f"<td>{c}</td>" for c in row) + "</tr>" for row in rows)
    if tbody:
        return f"<table><thead>{head}</thead><tbody>{body}</tbody></table>"
    return f"<table>{head}{body}</table>"


class TestColumnSelection:
    def test_reads_rank_from_coding_column(self) -> None:
        html = _table(["Model", "Overall", "Expert", "Coding", "Math"], [["DeepSeek-V3", "12", "8", "1", "4"]])
        entries = extract_entries(html)
        assert len(entries) == 1
        assert entries[0].raw_label == "DeepSeek-V3"
        assert entries[0].column_rank == 1
        assert entries[0].name == "DeepSeek-V3"
        assert entries[0].organization == "DeepSeek"

    def test_first_table_with_column_wins(self, leaderboard_html: str) -> None:
        labels = [e.raw_label for e in extract_entries(leaderboard_html)]
        assert "later-model" not in labels
        assert "ignored-model" not in labels

    def test_header_match_is_trimmed_and_case_insensitive(self) -> None:
        html = _table(["Model", "  CODING  "], [["gpt-4o", "2"]])
        assert [e.column_rank for e in extract_entries(html)] == [2]

    def test_custom_column(self) -> None:
        html = _table(["Model", "Coding", "Math"], [["gpt-4o", "2", "7"]])
        assert [e.column_rank for e in extract_entries(html, column="Math")] == [7]

    def test_table_without_tbody(self) -> None:
        html = _table(["Model", "Coding"], [["gpt-4o", "3"], ["o1-mini", "1"]], tbody=False)
        assert [(e.name, e.column_rank) for e in extract_entries(html)] == [("GPT-4o", 3), ("o1-mini", 1)]

    def test_missing_column_returns_empty(self, no_coding_html: str) -> None:
        assert extract_entries(no_coding_html) == []

    def test_empty_document(self) -> None:
        assert extract_entries("") == []


class TestRowFiltering:
    def test_document_order_and_skipped_rows(self, leaderboard_html: str) -> None:
        entries = extract_entries(leaderboard_html)
        assert [(e.name, e.organization, e.column_rank) for e in entries] == [
            ("Claude Opus 4.5", "Anthropic", 1),
            ("Gemini 3 Pro", "Google", 4),
            ("Claude Opus 4.5 (Thinking)", "Anthropic", 2),
            ("GPT-5.2 High", "OpenAI", 3),
        ]

    def test_rank_with_trailing_text_is_parsed(self, leaderboard_html: str) -> None:
        entries = {e.raw_label: e for e in extract_entries(leaderboard_html)}
        assert entries["gpt-5.2-high"].column_rank == 3

    def test_non_positive_and_unparsable_ranks_are_skipped(self) -> None:
        html = _table(["Model", "Coding"], [["a-model", "0"], ["b-model", "-3"], ["c-model", "#2"], ["d-model", "4"]])
        assert [e.raw_label for e in extract_entries(html)] == ["d-model"]


class TestDeduplication:
    def test_same_identity_keeps_first_occurrence(self) -> None:
        html = _table(
            ["Model", "Coding"],
            [["claude-opus-4-5-20251101", "5"], ["anthropic/claude-opus-4.5", "2"]],
        )
        entries = extract_entries(html)
        assert len(entries) == 1
        assert entries[0].raw_label == "claude-opus-4-5-20251101"
        assert entries[0].column_rank == 5

    def test_thinking_variant_is_a_distinct_model(self) -> None:
        html = _table(
            ["Model", "Coding"],
            [["claude-opus-4-5-20251101", "1"], ["claude-opus-4-5-20251101-thinking-32k", "2"]],
        )
        assert len(extract_entries(html)) == 2
