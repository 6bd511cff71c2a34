"""Summary Tester CLI: entry-point for all operations.

Usage:
    python cli/main.py --help

Commands:
    fetch      → fetch one article and print its cleaned text
    clean      → apply the text cleanup rules to a file or stdin
    feed       → list current articles from the news sitemap
    summarize  → fetch an article and summarize it with a stored prompt
    worker     → run the relay worker
    serve      → run the HTTP API
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that
# `from summary_tester.xxx import ...` works when the CLI is invoked as
# `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Optional

import typer

from summary_tester.config import settings
from summary_tester.logging import configure_logging
from summary_tester.scraper import (
    ExtractionFailure,
    FetchError,
    FetchFailure,
    Success,
    clean_text,
    extract_article,
)
from summary_tester.scraper.sitemap import fetch_feed

app = typer.Typer(
    name="summary-tester",
    help="Summary Tester CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level."),
) -> None:
    configure_logging(log_level)


def _article_or_exit(url: str):
    """Run the pipeline for *url*; print the failure and exit 1 if it fails."""
    outcome = extract_article(url)
    if isinstance(outcome, FetchFailure):
        typer.echo(f"[fetch] HTTP {outcome.status}: {outcome.message}", err=True)
        raise typer.Exit(code=1)
    if isinstance(outcome, ExtractionFailure):
        typer.echo(f"[fetch] {outcome.message}", err=True)
        raise typer.Exit(code=1)
    assert isinstance(outcome, Success)
    return outcome.article


# ---------------------------------------------------------------------------
# Article commands
# ---------------------------------------------------------------------------
@app.command("fetch")
def fetch(
    url: str = typer.Option(..., help="Article URL."),
    as_json: bool = typer.Option(False, "--json", help="Print the article as JSON."),
) -> None:
    """Fetch an article and print its cleaned text to stdout."""
    article = _article_or_exit(url)
    if as_json:
        typer.echo(json.dumps(article.to_dict(), ensure_ascii=False, indent=2))
        return

    typer.echo(f"[fetch] Title  : {article.title or '(none)'}")
    typer.echo(f"[fetch] Length : {article.length}")
    typer.echo("")
    typer.echo(article.text)


@app.command("clean")
def clean(
    file: Optional[Path] = typer.Option(
        None, "--file", exists=True, dir_okay=False, help="Text file (default: stdin)."
    ),
) -> None:
    """Apply the text cleanup rules to already-extracted article text."""
    raw = file.read_text(encoding="utf-8") if file else sys.stdin.read()
    typer.echo(clean_text(raw))


@app.command("feed")
def feed(
    limit: int = typer.Option(settings.feed_max_articles, help="Maximum number of articles."),
) -> None:
    """List current articles from the news sitemap."""
    try:
        items = fetch_feed(limit=limit)
    except FetchError as exc:
        typer.echo(f"[feed] HTTP {exc.status}: {exc.message}", err=True)
        raise typer.Exit(code=1)

    if not items:
        typer.echo("[feed] No articles found.")
        return
    for item in items:
        typer.echo(f"  {item.date or '-':25}  {item.title}")
        typer.echo(f"  {'':25}  {item.url}")


# ---------------------------------------------------------------------------
# Summarization
# ---------------------------------------------------------------------------
@app.command("summarize")
def summarize_cmd(
    url: str = typer.Option(..., help="Article URL."),
    prompt: str = typer.Option("default.json", help="Prompt file name in the prompts directory."),
    model: Optional[str] = typer.Option(None, help="Override the prompt's model."),
) -> None:
    """Fetch an article and summarize it with a stored prompt."""
    from summary_tester.llm.summarizer import summarize
    from summary_tester.store.prompts import list_prompts

    prompts = {p["filename"]: p for p in list_prompts()}
    if prompt not in prompts:
        typer.echo(f"[summarize] Unknown prompt {prompt!r}. Available: {', '.join(prompts) or '-'}", err=True)
        raise typer.Exit(code=1)
    config = prompts[prompt]

    article = _article_or_exit(url)
    typer.echo(f"[summarize] {article.title or url} ({article.length} chars)")
    try:
        result = summarize(
            article.text,
            config["system_prompt"],
            model=model or config.get("model"),
            max_tokens=config.get("max_tokens"),
            temperature=config.get("temperature"),
        )
    except Exception as e:
        typer.echo(f"[summarize] Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"[summarize] Model  : {result.model}")
    typer.echo(f"[summarize] Tokens : {result.usage.get('input_tokens', 0)} in / "
               f"{result.usage.get('output_tokens', 0)} out")
    typer.echo("")
    typer.echo(result.summary)


# ---------------------------------------------------------------------------
# Long-running processes
# ---------------------------------------------------------------------------
@app.command("worker")
def worker(
    interval: float = typer.Option(settings.worker_poll_interval, help="Polling interval in seconds."),
) -> None:
    """Poll the relay server for summarization jobs and process them."""
    from summary_tester.worker import run_worker

    typer.echo(f"[worker] Polling {settings.relay_url} every {interval:g}s")
    run_worker(interval=interval)


@app.command("serve")
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind address."),
    port: int = typer.Option(settings.port, help="Port."),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run("summary_tester.api.app:app", host=host, port=port)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
