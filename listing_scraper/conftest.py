"""
Shared fixtures for the listing_scraper tests.
"""
import pytest

from listing_scraper.test_support import FakePage


@pytest.fixture
def listing_page():
    """A fully rendered listing page."""
    return FakePage({
        "h1[data-testid='ad-title']": ["  VW Golf 1.6 TDI  Comfortline "],
        "[data-testid='prime-price']": ["12.000\xa0€"],
        "[data-testid='vip-key-features-list']": ["120.000 km\n\nDiesel\n 05/2018 "],
        "[data-testid='vip-vehicle-description-text']": ["Scheckheftgepflegt.\nNichtraucherfahrzeug."],
    })
