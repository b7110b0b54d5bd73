from typing import Iterable, List
from .models import RawLeaderboardEntry, ResolvedModel
from .vendors import license_for


BASE_SCORE = 1500
SCORE_STEP = 10


def score_for_rank(column_rank: int) -> int:
    # ELO-flavoured display number, not a rating
    return round(BASE_SCORE - (column_rank - 1) * SCORE_STEP)


def top_n(entries: Iterable[RawLeaderboardEntry], n: int) -> List[ResolvedModel]:
    """
    Keep the n best entries by extracted column rank and renumber them 1..k.

    The score is derived from the original column rank, so gaps in the source
    ranking show up as score gaps while output ranks stay contiguous.
    Tie-breaks: none (sort stability keeps document order).
    """
    ordered = sorted(entries, key=lambda e: e.column_rank)[: max(n, 0)]
    return [
        ResolvedModel(
            rank=i,
            name=e.name,
            score=score_for_rank(e.column_rank),
            organization=e.organization,
            license=license_for(e.organization),
        )
        for i, e in enumerate(ordered, start=1)
    ]


_MOCK_LEADERBOARD = [
    ("Claude Opus 4.5", "Anthropic"),
    ("Claude Sonnet 4.5", "Anthropic"),
    ("Claude Opus 4.5 (Thinking)", "Anthropic"),
    ("Gemini 3 Pro", "Google"),
    ("Claude Opus 4.1", "Anthropic"),
    ("Grok 4.1 Thinking", "xAI"),
    ("Claude Sonnet 4.5 (Thinking)", "Anthropic"),
    ("Claude Opus 4.1 (Thinking)", "Anthropic"),
    ("Gemini 3 Flash", "Google"),
    ("GPT-5.2 High", "OpenAI"),
]


def mock_leaderboard() -> List[ResolvedModel]:
    """Static fallback ranking served while no fetched data exists."""
    return [
        ResolvedModel(
            rank=i,
            name=name,
            score=score_for_rank(i),
            organization=organization,
            license=license_for(organization),
        )
        for i, (name, organization) in enumerate(_MOCK_LEADERBOARD, start=1)
    ]
