"""Pytest configuration and shared test fixtures.

HTML fixtures mirror the leaderboard overview table:
Model | Overall | Expert | Hard Prompts | Coding | Math | ...
"""

from __future__ import annotations

from pathlib import Path

import pytest

from coderank.core.models import RawLeaderboardEntry


@pytest.fixture
def leaderboard_html() -> str:
    """Overview table with a Coding column at index 4, plus a later table with its own Coding column."""
    return """
    <html>
    <body>
      <table id="summary">
        <thead><tr><th>Rank</th><th>Model</th><th>Votes</th></tr></thead>
        <tbody><tr><td>1</td><td>ignored-model</td><td>100</td></tr></tbody>
      </table>
      <table id="overview">
        <thead>
          <tr><th>Model</th><th>Overall</th><th>Expert</th><th>Hard Prompts</th><th> Coding </th><th>Math</th></tr>
        </thead>
        <tbody>
          <tr><td>claude-opus-4-5-20251101</td><td>1</td><td>1</td><td>1</td><td>1</td><td>2</td></tr>
          <tr><td>gemini-3-pro</td><td>2</td><td>2</td><td>3</td><td>4</td><td>1</td></tr>
          <tr><td>claude-opus-4-5-20251101-thinking-32k</td><td>3</td><td>3</td><td>2</td><td>2</td><td>3</td></tr>
          <tr><td>gpt-5.2-high</td><td>4</td><td>5</td><td>4</td><td>3 ±2</td><td>4</td></tr>
          <tr><td>anthropic/claude-opus-4.5</td><td>5</td><td>5</td><td>5</td><td>9</td><td>5</td></tr>
          <tr><td>deepseek-v3</td><td>6</td><td>6</td><td>6</td><td>n/a</td><td>6</td></tr>
          <tr><td></td><td>7</td><td>7</td><td>7</td><td>5</td><td>7</td></tr>
          <tr><td>short-row</td><td>8</td></tr>
          <tr><td>grok-4.1-thinking</td><td>9</td><td>9</td><td>9</td><td>0</td><td>9</td></tr>
        </tbody>
      </table>
      <table id="later">
        <thead><tr><th>Model</th><th>Coding</th></tr></thead>
        <tbody><tr><td>later-model</td><td>1</td></tr></tbody>
      </table>
    </body>
    </html>
    """


@pytest.fixture
def no_coding_html() -> str:
    return """
    <html><body>
      <table><tr><th>Model</th><th>Overall</th></tr><tr><td>gpt-4o</td><td>1</td></tr></table>
    </body></html>
    """


@pytest.fixture
def data_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "models.json"


def make_entry(name: str, rank: int, organization: str = "OpenAI") -> RawLeaderboardEntry:
    return RawLeaderboardEntry(raw_label=name, column_rank=rank, name=name, organization=organization)


@pytest.fixture
def synthetic_entries() -> list[RawLeaderboardEntry]:
    """Fifteen entries in scrambled order with ranks 1..15."""
    order = [7, 3, 15, 1, 12, 9, 2, 14, 5, 11, 4, 13, 8, 6, 10]
    return [make_entry(f"model-{r}", r) for r in order]


@pytest.fixture
def entry_factory():
    return make_entry
