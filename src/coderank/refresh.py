"""One refresh pass: fetch, extract, rank, price, persist.

Any failure before the save leaves the stored bundle untouched; the next
scheduled run simply tries again. Running twice against the same page
produces the same models.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence

import structlog

from .config import DEFAULT_DATA_PATH, TARGET_COLUMN, TOP_N
from .core.display import to_display_label
from .core.models import EnrichedModel, ResolvedModel, StoredBundle
from .core.ranking import mock_leaderboard, top_n
from .exceptions import ExtractionEmptyError, PersistenceError
from .fetch.arena import LeaderboardSource
from .fetch.extract import extract_entries
from .pricing.matcher import PricingMatcher, default_matcher
from .storage import iso_timestamp, load_bundle, save_bundle

logger = structlog.get_logger(__name__)

MOCK_SOURCE = "mock"


def enrich_models(
    models: Sequence[ResolvedModel],
    matcher: Optional[PricingMatcher] = None,
    now: Optional[datetime] = None,
) -> List[EnrichedModel]:
    """Attach pricing and subscription data; misses degrade to unknown/None."""
    matcher = matcher or default_matcher()
    stamp = iso_timestamp(now)
    return [
        EnrichedModel(
            **m.model_dump(),
            display_name=to_display_label(m.name),
            pricing=matcher.find_pricing(m.name),
            subscription=matcher.find_subscription(m.organization),
            last_updated=stamp,
        )
        for m in models
    ]


def pricing_coverage(models: Sequence[EnrichedModel]) -> int:
    return sum(1 for m in models if m.pricing.source != "unknown")


def collect_ranking(source: LeaderboardSource, top: int = TOP_N, column: str = TARGET_COLUMN) -> List[ResolvedModel]:
    html = source.fetch_html()
    entries = extract_entries(html, column=column)
    if not entries:
        raise ExtractionEmptyError(source.url, column)
    return top_n(entries, top)


def run_refresh(
    source: Optional[LeaderboardSource],
    path: Path = DEFAULT_DATA_PATH,
    top: int = TOP_N,
    use_mock: bool = False,
    matcher: Optional[PricingMatcher] = None,
) -> StoredBundle:
    """Replace the stored bundle with a fresh ranking.

    Raises:
        SourceUnavailableError: Fetch failed or the ranking table was missing.
        PersistenceError: The saved file did not read back.
    """
    log = logger.bind(mode="mock" if use_mock else "live", path=str(path))
    log.info("refresh_started")

    if use_mock:
        ranking = mock_leaderboard()[:top]
        label = MOCK_SOURCE
    else:
        if source is None:
            raise ValueError("a leaderboard source is required unless use_mock is set")
        ranking = collect_ranking(source, top=top)
        label = source.url
    log.info("ranking_collected", models=len(ranking))

    enriched = enrich_models(ranking, matcher=matcher)
    log.info("pricing_enriched", priced=pricing_coverage(enriched), total=len(enriched))

    bundle = save_bundle(enriched, path=path, source=label)
    saved = load_bundle(path)
    if saved is None or len(saved.models) != len(enriched):
        raise PersistenceError(f"verification of {path} failed after save")

    log.info("refresh_complete", models=len(bundle.models))
    return bundle
