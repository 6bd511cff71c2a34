"""Tests for the summary-tester CLI."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from cli.main import app
from summary_tester.llm.summarizer import Summary
from summary_tester.scraper.errors import FetchError
from summary_tester.scraper.models import (
    ExtractedArticle,
    ExtractionFailure,
    FetchFailure,
    Success,
)
from summary_tester.scraper.sitemap import FeedItem
from summary_tester.store.prompts import save_prompt

runner = CliRunner()

_ARTICLE = ExtractedArticle(
    title="Senat beschliesst Haushalt",
    text="Berlin (dpa) – Der Senat hat den Haushalt beschlossen.",
    excerpt="",
    length=54,
)


# ---------------------------------------------------------------------------
# fetch
# ---------------------------------------------------------------------------

def test_fetch_prints_text():
    with patch("cli.main.extract_article", return_value=Success(_ARTICLE)):
        result = runner.invoke(app, ["fetch", "--url", "https://example.com/a"])

    assert result.exit_code == 0
    assert "Senat beschliesst Haushalt" in result.output
    assert "Der Senat hat den Haushalt beschlossen." in result.output


def test_fetch_json():
    with patch("cli.main.extract_article", return_value=Success(_ARTICLE)):
        result = runner.invoke(app, ["fetch", "--url", "https://example.com/a", "--json"])

    assert result.exit_code == 0
    assert json.loads(result.output) == _ARTICLE.to_dict()


def test_fetch_http_failure_exits_1():
    with patch("cli.main.extract_article", return_value=FetchFailure(status=404, message="Not Found")):
        result = runner.invoke(app, ["fetch", "--url", "https://example.com/x"])

    assert result.exit_code == 1
    assert "HTTP 404" in result.output


def test_fetch_extraction_failure_exits_1():
    with patch("cli.main.extract_article", return_value=ExtractionFailure("kein Artikel")):
        result = runner.invoke(app, ["fetch", "--url", "https://example.com/x"])

    assert result.exit_code == 1
    assert "kein Artikel" in result.output


# ---------------------------------------------------------------------------
# clean
# ---------------------------------------------------------------------------

def test_clean_stdin():
    result = runner.invoke(app, ["clean"], input="Text.\nFoto: dpa\nArtikel weiterlesen\n")

    assert result.exit_code == 0
    assert result.output.strip() == "Text."


def test_clean_file(tmp_path):
    path = tmp_path / "artikel.txt"
    path.write_text("Oben.\n\n\n\n\nTeilen\nUnten.", encoding="utf-8")

    result = runner.invoke(app, ["clean", "--file", str(path)])

    assert result.exit_code == 0
    assert "Teilen" not in result.output
    assert "Oben." in result.output and "Unten." in result.output


# ---------------------------------------------------------------------------
# feed
# ---------------------------------------------------------------------------

def test_feed_lists_items():
    items = [FeedItem(url="https://example.com/a", title="Eine Meldung", date="2024-03-15")]
    with patch("cli.main.fetch_feed", return_value=items) as fake:
        result = runner.invoke(app, ["feed", "--limit", "5"])

    fake.assert_called_once_with(limit=5)
    assert result.exit_code == 0
    assert "Eine Meldung" in result.output
    assert "https://example.com/a" in result.output


def test_feed_empty():
    with patch("cli.main.fetch_feed", return_value=[]):
        result = runner.invoke(app, ["feed"])

    assert result.exit_code == 0
    assert "No articles found" in result.output


def test_feed_unreachable():
    with patch("cli.main.fetch_feed", side_effect=FetchError(503, "Service Unavailable")):
        result = runner.invoke(app, ["feed"])

    assert result.exit_code == 1


# ---------------------------------------------------------------------------
# summarize
# ---------------------------------------------------------------------------

@pytest.fixture
def prompts_dir(tmp_path, monkeypatch):
    monkeypatch.setattr("summary_tester.config.settings.prompts_dir", tmp_path)
    save_prompt("Kurz", "Sei kurz.", model="claude-sonnet-4", max_tokens=200, temperature=0.1)
    return tmp_path


def test_summarize_with_stored_prompt(prompts_dir):
    summary = Summary(summary="Drei Punkte.", model="claude-sonnet-4", usage={"input_tokens": 10, "output_tokens": 3})
    with patch("cli.main.extract_article", return_value=Success(_ARTICLE)), patch(
        "summary_tester.llm.summarizer.summarize", return_value=summary
    ) as fake:
        result = runner.invoke(app, ["summarize", "--url", "https://example.com/a", "--prompt", "kurz.json"])

    assert result.exit_code == 0, result.output
    fake.assert_called_once_with(
        _ARTICLE.text, "Sei kurz.", model="claude-sonnet-4", max_tokens=200, temperature=0.1
    )
    assert "Drei Punkte." in result.output
    assert "10 in / 3 out" in result.output


def test_summarize_unknown_prompt(prompts_dir):
    result = runner.invoke(app, ["summarize", "--url", "https://example.com/a", "--prompt", "fehlt.json"])

    assert result.exit_code == 1
    assert "kurz.json" in result.output
