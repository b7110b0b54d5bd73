"""Tests for bundle persistence and data-age helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
import json
from pathlib import Path

import pytest

from coderank.core.ranking import mock_leaderboard
from coderank.refresh import enrich_models
from coderank.storage import describe_age, is_data_stale, iso_timestamp, load_bundle, save_bundle

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def enriched():
    return enrich_models(mock_leaderboard(), now=NOW)


class TestSaveAndLoad:
    def test_missing_file_is_absent(self, data_path: Path) -> None:
        assert load_bundle(data_path) is None

    def test_round_trip(self, data_path: Path, enriched) -> None:
        saved = save_bundle(enriched, path=data_path, source="https://leaderboard.test", now=NOW)
        loaded = load_bundle(data_path)
        assert loaded == saved
        assert loaded.version == "1.0.0"
        assert loaded.fetched_at == "2026-01-15T12:00:00Z"

    def test_file_uses_camel_case_keys(self, data_path: Path, enriched) -> None:
        save_bundle(enriched, path=data_path, now=NOW)
        raw = json.loads(data_path.read_text(encoding="utf-8"))
        assert set(raw) == {"models", "fetchedAt", "source", "version"}
        first = raw["models"][0]
        assert first["displayName"] == "Claude Opus 4.5"
        assert first["pricing"]["inputPricePerMillion"] == 15.0

    def test_no_temp_files_left_behind(self, data_path: Path, enriched) -> None:
        save_bundle(enriched, path=data_path, now=NOW)
        save_bundle(enriched[:3], path=data_path, now=NOW)
        assert [p.name for p in data_path.parent.iterdir()] == ["models.json"]
        assert len(load_bundle(data_path).models) == 3

    @pytest.mark.parametrize(
        "content",
        ["{not json", "[]", json.dumps({"models": "nope"}), json.dumps({"fetchedAt": "x"})],
    )
    def test_corrupt_file_is_absent(self, data_path: Path, content: str) -> None:
        data_path.parent.mkdir(parents=True)
        data_path.write_text(content, encoding="utf-8")
        assert load_bundle(data_path) is None

    def test_undecodable_file_is_absent(self, data_path: Path) -> None:
        data_path.parent.mkdir(parents=True)
        data_path.write_bytes(b"\xff\xfe garbage")
        assert load_bundle(data_path) is None
        assert is_data_stale(data_path, now=NOW) is True

    def test_unparseable_timestamp_is_absent(self, data_path: Path, enriched) -> None:
        save_bundle(enriched, path=data_path, now=NOW)
        raw = json.loads(data_path.read_text(encoding="utf-8"))
        raw["fetchedAt"] = "yesterday"
        data_path.write_text(json.dumps(raw), encoding="utf-8")
        assert load_bundle(data_path) is None

    def test_unparseable_last_updated_is_absent(self, data_path: Path, enriched) -> None:
        save_bundle(enriched, path=data_path, now=NOW)
        raw = json.loads(data_path.read_text(encoding="utf-8"))
        raw["models"][0]["lastUpdated"] = "last week"
        data_path.write_text(json.dumps(raw), encoding="utf-8")
        assert load_bundle(data_path) is None


class TestStaleness:
    def test_no_data_is_stale(self, data_path: Path) -> None:
        assert is_data_stale(data_path, now=NOW) is True

    def test_fresh_and_old_data(self, data_path: Path, enriched) -> None:
        save_bundle(enriched, path=data_path, now=NOW)
        assert is_data_stale(data_path, now=NOW + timedelta(hours=2)) is False
        assert is_data_stale(data_path, now=NOW + timedelta(hours=24)) is True
        assert is_data_stale(data_path, max_age_hours=1, now=NOW + timedelta(hours=2)) is True


class TestDescribeAge:
    def test_minutes(self) -> None:
        assert describe_age(iso_timestamp(NOW - timedelta(minutes=5)), now=NOW) == "5 minutes ago"

    def test_hours(self) -> None:
        assert describe_age(iso_timestamp(NOW - timedelta(hours=3)), now=NOW) == "3 hours ago"

    def test_singular(self) -> None:
        assert describe_age(iso_timestamp(NOW - timedelta(hours=1)), now=NOW) == "1 hour ago"

    def test_days_after_24_hours(self) -> None:
        assert describe_age(iso_timestamp(NOW - timedelta(hours=25)), now=NOW) == "1 day ago"
        assert describe_age(iso_timestamp(NOW - timedelta(days=2)), now=NOW) == "2 days ago"
