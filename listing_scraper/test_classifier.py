"""
Tests for input classification.
"""
import pytest

from listing_scraper.classifier import classify, is_listing_link
from listing_scraper.models import (
    AnalysisRequest,
    ImagePlaceholder,
    LinkExtraction,
    PassThrough,
    Rejected,
)


@pytest.mark.parametrize("text", [
    "https://suchen.mobile.de/fahrzeuge/details.html?id=123",
    "https://mobile.de/listing/123",
    "mobile.de",
    "Hab das Auto auf mobile.de gesehen, BMW 320d",
])
def test_domain_marker_selects_link_extraction(text):
    """Anything containing the marker goes to extraction, URL or not."""
    assert classify(AnalysisRequest(text=text)) == LinkExtraction(url=text)


def test_marker_match_is_case_sensitive():
    """The domain marker is matched case-sensitively."""
    text = "Angebot von MOBILE.DE"
    assert classify(AnalysisRequest(text=text)) == PassThrough(text=text)


def test_description_passes_through_unchanged():
    """Descriptions keep their exact text, whitespace included."""
    text = "  2018 Diesel Kombi, 120.000 km\n"
    choice = classify(AnalysisRequest(text=text))
    assert isinstance(choice, PassThrough)
    assert choice.text == text


def test_text_wins_over_image():
    """Text takes priority over an image."""
    choice = classify(AnalysisRequest(text="Opel Astra 2012", image="data:image/png;base64,AAA"))
    assert choice == PassThrough(text="Opel Astra 2012")


def test_image_only_selects_placeholder():
    """An image alone selects the placeholder."""
    assert classify(AnalysisRequest(image="data:image/png;base64,AAA")) == ImagePlaceholder()


def test_blank_text_with_image_selects_placeholder():
    """Whitespace-only text counts as absent."""
    assert classify(AnalysisRequest(text="   ", image="data:image/png;base64,AAA")) == ImagePlaceholder()


@pytest.mark.parametrize("request_", [
    AnalysisRequest(),
    AnalysisRequest(text=""),
    AnalysisRequest(text=" \n\t"),
    AnalysisRequest(text="", image=""),
    AnalysisRequest(question="Lohnt sich das?"),
])
def test_no_input_is_rejected(request_):
    """Requests without text or image are rejected."""
    assert isinstance(classify(request_), Rejected)


def test_is_listing_link():
    """Only the supported domain counts as a listing link."""
    assert is_listing_link("https://www.mobile.de/")
    assert not is_listing_link("https://www.autoscout24.de/angebote/123")
