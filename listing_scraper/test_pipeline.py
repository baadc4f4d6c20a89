"""
Tests for composing the vehicle text from a classified request.
"""
import asyncio

import pytest

from listing_scraper.classifier import classify
from listing_scraper.errors import InvalidInput, LaunchFailed, NavigationFailed
from listing_scraper.models import (
    EMPTY_MARKER,
    AnalysisRequest,
    ExtractedListing,
    ImagePlaceholder,
    PassThrough,
    Rejected,
)
from listing_scraper.pipeline import (
    EXTRACTION_FAILED_MARKER,
    IMAGE_PLACEHOLDER_TEXT,
    resolve_vehicle_text,
)


class StubExtractor:
    def __init__(self, listing=None, error=None):
        self.listing = listing
        self.error = error
        self.calls = []

    async def __call__(self, url):
        self.calls.append(url)
        if self.error:
            raise self.error
        return self.listing


def resolve(request, extractor):
    return asyncio.run(resolve_vehicle_text(classify(request), extractor))


def test_scenario_a_description_is_identity():
    """A description becomes the vehicle text unchanged."""
    extractor = StubExtractor()
    text = "2018 Diesel Kombi, 120.000 km"
    vehicle = resolve(AnalysisRequest(text=text), extractor)

    assert vehicle.text == text
    assert vehicle.source == "description"
    assert not vehicle.degraded
    assert extractor.calls == []


def test_scenario_b_listing_is_serialized():
    """An extracted listing becomes its serialized block."""
    url = "https://mobile.de/listing/123"
    extractor = StubExtractor(ExtractedListing(title="VW Golf", price="12.000€", facts="", description=""))
    vehicle = resolve(AnalysisRequest(text=url), extractor)

    assert extractor.calls == [url]
    assert vehicle.source == "listing"
    assert vehicle.text == extractor.listing.to_text()
    assert "Titel: VW Golf" in vehicle.text
    assert "Preis: 12.000€" in vehicle.text
    assert f"Fahrzeugdaten: {EMPTY_MARKER}" in vehicle.text
    assert f"Beschreibung: {EMPTY_MARKER}" in vehicle.text


@pytest.mark.parametrize("error", [
    NavigationFailed("https://mobile.de/listing/404", "HTTP 404"),
    LaunchFailed(cause="Executable doesn't exist"),
])
def test_scenario_c_extraction_failure_falls_back(error):
    """Extraction errors become the degraded fallback text."""
    url = "https://mobile.de/listing/404"
    vehicle = resolve(AnalysisRequest(text=url), StubExtractor(error=error))

    assert vehicle.text.startswith(EXTRACTION_FAILED_MARKER)
    assert url in vehicle.text
    assert vehicle.source == "fallback"
    assert vehicle.degraded


def test_fallback_keeps_plain_text_mention_verbatim():
    """The fallback embeds the original input verbatim."""
    text = "Habe auf mobile.de einen Passat B8 gefunden"
    vehicle = resolve(AnalysisRequest(text=text), StubExtractor(error=NavigationFailed(text, "invalid URL")))
    assert vehicle.text.endswith(text)


def test_empty_listing_is_still_emitted():
    """A listing with no fields is still emitted with empty markers."""
    vehicle = resolve(AnalysisRequest(text="https://mobile.de/x"), StubExtractor(ExtractedListing()))
    assert vehicle.text.count(EMPTY_MARKER) == 4
    assert not vehicle.degraded


def test_image_placeholder():
    """The image choice yields the fixed placeholder."""
    vehicle = asyncio.run(resolve_vehicle_text(ImagePlaceholder(), StubExtractor()))
    assert vehicle.text == IMAGE_PLACEHOLDER_TEXT
    assert vehicle.source == "image"


def test_rejected_raises_invalid_input():
    """A rejected request cannot produce a vehicle text."""
    with pytest.raises(InvalidInput):
        asyncio.run(resolve_vehicle_text(Rejected(), StubExtractor()))


def test_unexpected_extractor_error_propagates():
    """Errors outside the extraction hierarchy are not swallowed."""
    with pytest.raises(KeyError):
        resolve(AnalysisRequest(text="https://mobile.de/x"), StubExtractor(error=KeyError("boom")))


def test_pass_through_never_calls_extractor():
    """Descriptions never start a browser."""
    extractor = StubExtractor()
    asyncio.run(resolve_vehicle_text(PassThrough("Skoda Octavia"), extractor))
    assert extractor.calls == []
