from __future__ import annotations

import re
from typing import List, Optional, Set, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag
import structlog

from ..config import TARGET_COLUMN
from ..core.display import resolve_label
from ..core.models import RawLeaderboardEntry

logger = structlog.get_logger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _parse_rank(text: str) -> Optional[int]:
    # Leading integer only: "12 ±3" -> 12, "#3" -> None
    m = _LEADING_INT.match(text)
    if not m:
        return None
    value = int(m.group(1))
    return value if value > 0 else None


def find_column_table(soup: BeautifulSoup, column: str) -> Optional[Tuple[Tag, int]]:
    """Return the first table with a header cell equal to ``column`` and that cell's index."""
    wanted = column.strip().lower()
    for table in soup.find_all("table"):
        headers = [th.get_text(" ", strip=True) for th in table.find_all("th")]
        for i, h in enumerate(headers):
            if h.lower() == wanted:
                return table, i
    return None


def extract_entries(html: str, column: str = TARGET_COLUMN) -> List[RawLeaderboardEntry]:
    """Extract per-model ranks for ``column`` in document order.

    The first table carrying the column wins; later tables are ignored. Rows
    whose label resolves to an already seen (name, organization) pair are
    dropped, keeping the first occurrence.
    """
    soup = BeautifulSoup(html or "", "html.parser")
    found = find_column_table(soup, column)
    if found is None:
        logger.warning("leaderboard_column_missing", column=column)
        return []
    table, col_idx = found

    rows = table.find("tbody") or table
    entries: List[RawLeaderboardEntry] = []
    seen: Set[str] = set()
    for tr in rows.find_all("tr"):
        cells = tr.find_all(["td", "th"])
        if len(cells) <= col_idx:
            continue
        label = cells[0].get_text(" ", strip=True)
        rank = _parse_rank(cells[col_idx].get_text(" ", strip=True))
        if not label or rank is None:
            continue
        resolved = resolve_label(label)
        key = f"{resolved.name.lower()}-{resolved.organization.lower()}"
        if key in seen:
            continue
        seen.add(key)
        entries.append(
            RawLeaderboardEntry(
                raw_label=label,
                column_rank=rank,
                name=resolved.name,
                organization=resolved.organization,
            )
        )
    logger.debug("leaderboard_rows_extracted", column=column, count=len(entries))
    return entries
