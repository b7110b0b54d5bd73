"""JSON envelopes handed to the dashboard.

The HTTP layer itself lives elsewhere; these functions build the payloads
for the models, health and config endpoints.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import structlog

from .config import DATA_VERSION, DEFAULT_DATA_PATH, Settings
from .core.models import ApiResponse, ChartPoint, StoredBundle
from .core.ranking import mock_leaderboard
from .refresh import MOCK_SOURCE, enrich_models
from .storage import iso_timestamp, load_bundle

logger = structlog.get_logger(__name__)


def mock_bundle(now: Optional[datetime] = None) -> StoredBundle:
    models = [
        m.model_copy(update={"display_name": m.name})
        for m in enrich_models(mock_leaderboard(), now=now)
    ]
    return StoredBundle(models=models, fetched_at=iso_timestamp(now), source=MOCK_SOURCE, version=DATA_VERSION)


def current_bundle(path: Path = DEFAULT_DATA_PATH) -> StoredBundle:
    bundle = load_bundle(path)
    if bundle is None or not bundle.models:
        logger.info("serving_mock_data", path=str(path))
        return mock_bundle()
    return bundle


def chart_points(bundle: StoredBundle) -> List[ChartPoint]:
    return [
        ChartPoint(
            name=m.name,
            display_name=m.display_name,
            input_price=m.pricing.input_price_per_million,
            output_price=m.pricing.output_price_per_million,
            score=m.score,
            rank=m.rank,
        )
        for m in bundle.models
    ]


def models_response(path: Path = DEFAULT_DATA_PATH) -> ApiResponse:
    try:
        bundle = current_bundle(path)
        data = {
            "models": [m.to_json_dict() for m in bundle.models],
            "chartData": [p.to_json_dict() for p in chart_points(bundle)],
            "fetchedAt": bundle.fetched_at,
            "source": bundle.source,
        }
    except Exception:
        logger.exception("models_response_failed", path=str(path))
        return ApiResponse(success=False, error="Failed to load model data", timestamp=iso_timestamp())
    return ApiResponse(success=True, data=data, timestamp=iso_timestamp())


def health_response(path: Path = DEFAULT_DATA_PATH) -> Dict[str, Any]:
    bundle = load_bundle(path)
    return {
        "status": "healthy",
        "timestamp": iso_timestamp(),
        "dataAvailable": bundle is not None,
        "dataAge": bundle.fetched_at if bundle else None,
    }


def config_response(settings: Settings) -> Dict[str, Any]:
    return {"theme": settings.theme, "timestamp": iso_timestamp()}
