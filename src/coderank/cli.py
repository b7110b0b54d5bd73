from __future__ import annotations

import json
import logging
from pathlib import Path
import sys
from typing import Optional

import structlog
import typer

from .api import config_response, current_bundle, health_response, models_response
from .config import load_settings
from .exceptions import CodeRankError
from .fetch.arena import FetcherConfig, HttpLeaderboardSource
from .refresh import run_refresh
from .storage import describe_age, is_data_stale


app = typer.Typer(add_completion=False, help="Top coding models from the public leaderboard, with pricing")


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, stream=sys.stderr, format="%(message)s")
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        # Route through stdlib so tenacity's retry warnings share the same sink
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def _echo_json(payload) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="debug logging")):
    configure_logging(verbose)


@app.command("refresh")
def refresh(
    top: Optional[int] = typer.Option(None, "--top", min=1, help="number of models to keep"),
    mock: bool = typer.Option(False, "--mock", help="store the static mock ranking instead of fetching"),
    data_path: Optional[Path] = typer.Option(None, "--data-path", help="stored bundle location"),
    url: Optional[str] = typer.Option(None, "--url", help="leaderboard page URL"),
    stale_only: bool = typer.Option(False, "--stale-only", help="skip when stored data is fresh"),
    max_age_hours: float = typer.Option(24.0, "--max-age-hours", min=0, help="freshness window for --stale-only"),
):
    """Fetch the leaderboard, attach pricing and replace the stored bundle."""
    settings = load_settings()
    path = data_path or settings.data_path
    if stale_only and not is_data_stale(path, max_age_hours=max_age_hours):
        typer.echo(f"Stored data is fresh ({path}), skipping refresh")
        return

    source = HttpLeaderboardSource(FetcherConfig(url=url or settings.leaderboard_url))
    try:
        bundle = run_refresh(
            source,
            path=path,
            top=top or settings.top_n,
            use_mock=mock or settings.use_mock_data,
        )
    except CodeRankError as e:
        structlog.get_logger(__name__).error("refresh_failed", error=str(e))
        typer.echo(f"Refresh failed, keeping existing data: {e}", err=True)
        raise typer.Exit(1)

    for m in bundle.models:
        price = (
            f"${m.pricing.input_price_per_million}/${m.pricing.output_price_per_million}"
            if m.pricing.source != "unknown"
            else "N/A"
        )
        typer.echo(f"{m.rank}. {m.display_name} ({m.organization}) - Score: {m.score} - Price: {price}")


@app.command("top")
def top(
    k: int = typer.Option(10, "--k", min=1, help="number of models to show"),
    out: str = typer.Option("txt", "--out", help="txt|md"),
    data_path: Optional[Path] = typer.Option(None, "--data-path", help="stored bundle location"),
):
    """Show the stored ranking (mock ranking when nothing is stored)."""
    out = out.lower().strip()
    if out not in {"txt", "md"}:
        typer.echo("--out must be 'txt' or 'md'", err=True)
        raise typer.Exit(2)

    bundle = current_bundle(data_path or load_settings().data_path)
    models = bundle.models[:k]
    if out == "md":
        typer.echo("| Rank | Model | Organization | Score | Input $/1M | Output $/1M |")
        typer.echo("| --- | --- | --- | --- | --- | --- |")
        for m in models:
            p = m.pricing
            prices = ("N/A", "N/A") if p.source == "unknown" else (
                f"{p.input_price_per_million:.2f}",
                f"{p.output_price_per_million:.2f}",
            )
            typer.echo(f"| {m.rank} | {m.name} | {m.organization} | {m.score} | {prices[0]} | {prices[1]} |")
    else:
        for m in models:
            typer.echo(f"{m.rank}. {m.name} ({m.organization})")
    if bundle.source != "mock":
        typer.echo(f"Updated {describe_age(bundle.fetched_at)}", err=True)


@app.command("models")
def models(data_path: Optional[Path] = typer.Option(None, "--data-path", help="stored bundle location")):
    """Print the models API envelope."""
    response = models_response(data_path or load_settings().data_path)
    _echo_json(response.to_json_dict())
    if not response.success:
        raise typer.Exit(1)


@app.command("health")
def health(data_path: Optional[Path] = typer.Option(None, "--data-path", help="stored bundle location")):
    """Print the health check payload."""
    _echo_json(health_response(data_path or load_settings().data_path))


@app.command("config")
def config():
    """Print the runtime config payload."""
    _echo_json(config_response(load_settings()))


if __name__ == "__main__":
    app()
