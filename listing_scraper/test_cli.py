"""
Tests for the command-line entry point.
"""
import json

from listing_scraper import cli
from listing_scraper.errors import NavigationFailed
from listing_scraper.models import ExtractedListing

URL = "https://suchen.mobile.de/fahrzeuge/details.html?id=123"


def test_parse_args_defaults():
    """Defaults match the service's timeouts."""
    args = cli.parse_args([URL])
    assert args.url == URL
    assert args.nav_timeout == 60_000
    assert args.settle_timeout == 3_500
    assert not args.show_browser


def test_prints_listing_block(monkeypatch, capsys):
    """The serialized block is printed and options reach the settings."""
    seen = {}

    async def fake_extract(url, settings):
        seen["settings"] = settings
        return ExtractedListing(title="Audi A4 Avant", price="18.900 €", url=url)

    monkeypatch.setattr(cli, "extract_listing", fake_extract)

    assert cli.main([URL, "--no-file-log", "--nav-timeout", "10000"]) == 0
    out = capsys.readouterr().out
    assert "Titel: Audi A4 Avant" in out
    assert seen["settings"].navigation_timeout_ms == 10_000
    assert seen["settings"].headless is True


def test_json_output(monkeypatch, capsys):
    """--json prints the fields as JSON."""
    async def fake_extract(url, settings):
        return ExtractedListing(title="Audi A4 Avant", url=url)

    monkeypatch.setattr(cli, "extract_listing", fake_extract)

    assert cli.main([URL, "--json", "--no-file-log"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["title"] == "Audi A4 Avant"
    assert data["price"] == ""


def test_extraction_error_exit_code(monkeypatch):
    """An extraction error exits with status 1."""
    async def fake_extract(url, settings):
        raise NavigationFailed(url, "timeout after 60000 ms")

    monkeypatch.setattr(cli, "extract_listing", fake_extract)
    assert cli.main([URL, "--no-file-log"]) == 1
