"""JSON file persistence for the enriched model bundle.

A single JSON document holds the latest refresh. Writes go to a temporary
file in the same directory and are moved over the target with
``os.replace`` so readers see either the previous bundle or the new one,
never a partial file.
"""

from __future__ import annotations

from datetime import datetime, timezone
import json
import os
from pathlib import Path
import tempfile
from typing import Optional, Sequence

from pydantic import ValidationError
import structlog

from .config import DATA_VERSION, DEFAULT_DATA_PATH, LEADERBOARD_URL, MAX_DATA_AGE_HOURS
from .core.models import EnrichedModel, StoredBundle

logger = structlog.get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    return (moment or utc_now()).isoformat().replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def save_bundle(
    models: Sequence[EnrichedModel],
    path: Path = DEFAULT_DATA_PATH,
    source: str = LEADERBOARD_URL,
    now: Optional[datetime] = None,
) -> StoredBundle:
    """Atomically replace the stored bundle with ``models``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    bundle = StoredBundle(
        models=list(models),
        fetched_at=iso_timestamp(now),
        source=source,
        version=DATA_VERSION,
    )
    payload = json.dumps(bundle.to_json_dict(), indent=2, ensure_ascii=False)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(payload)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.info("bundle_saved", path=str(path), models=len(bundle.models))
    return bundle


def load_bundle(path: Path = DEFAULT_DATA_PATH) -> Optional[StoredBundle]:
    """Return the stored bundle, or None when absent or unreadable."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as e:
        logger.warning("bundle_unreadable", path=str(path), error=str(e))
        return None
    except UnicodeDecodeError as e:
        logger.warning("bundle_invalid", path=str(path), error=str(e))
        return None

    try:
        return StoredBundle.model_validate_json(raw)
    except ValidationError as e:
        logger.warning("bundle_invalid", path=str(path), errors=e.error_count())
        return None


def is_data_stale(
    path: Path = DEFAULT_DATA_PATH,
    max_age_hours: float = MAX_DATA_AGE_HOURS,
    now: Optional[datetime] = None,
) -> bool:
    bundle = load_bundle(path)
    if bundle is None:
        return True
    try:
        fetched_at = parse_timestamp(bundle.fetched_at)
    except ValueError:
        return True
    age_hours = ((now or utc_now()) - fetched_at).total_seconds() / 3600
    return age_hours >= max_age_hours


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''} ago"


def describe_age(fetched_at: str, now: Optional[datetime] = None) -> str:
    """Human-readable age of a timestamp: "5 minutes ago", "1 hour ago", "2 days ago"."""
    elapsed = ((now or utc_now()) - parse_timestamp(fetched_at)).total_seconds()
    hours = int(elapsed // 3600)
    minutes = int((elapsed % 3600) // 60)
    if hours > 24:
        return _plural(hours // 24, "day")
    if hours > 0:
        return _plural(hours, "hour")
    return _plural(minutes, "minute")
