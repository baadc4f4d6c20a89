"""
Playwright-based extraction of mobile.de listing pages.
"""
import logging
from typing import Callable, Optional, Sequence

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeout

from .core import BrowserSettings, browser_session
from .errors import ContentReadFailed, ExtractionError, NavigationFailed
from .models import ExtractedListing
from .utils import clean_block, clean_text, truncate

logger = logging.getLogger(__name__)


# Selectors, most specific first. The site changes its markup without notice,
# so every field falls back to looser matches before giving up.
TITLE_SELECTORS = [
    "h1[data-testid='ad-title']",
    "#ad-title",
    "h2[data-testid='vip-ad-title']",
    "h1",
]
PRICE_SELECTORS = [
    "[data-testid='prime-price']",
    "[data-testid='vip-price-label']",
    "[data-testid='price-label']",
    ".rbt-prime-price",
]
FACTS_SELECTORS = [
    "[data-testid='vip-key-features-list']",
    "[data-testid='vip-technical-data-box']",
    "#rbt-td-box",
    ".key-feature",
]
DESCRIPTION_SELECTORS = [
    "[data-testid='vip-vehicle-description-text']",
    "[data-testid='vip-vehicle-description-content']",
    ".description-text",
    "#rbt-ad-description",
]

CONSENT_SELECTORS = [
    "button.mde-consent-accept-btn",
    "button:has-text('Einverstanden')",
    "button:has-text('Alle akzeptieren')",
    "button:has-text('Accept all')",
]

# Attached once client-side rendering of the detail widgets has caught up
READY_SELECTOR = ", ".join(PRICE_SELECTORS + TITLE_SELECTORS[:2])


async def open_listing_page(page, url: str, timeout_ms: int) -> None:
    """Navigate to ``url``, waiting for DOMContentLoaded only."""
    try:
        response = await page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)
    except PlaywrightTimeout as e:
        raise NavigationFailed(url, f"timeout after {timeout_ms} ms") from e
    except PlaywrightError as e:
        raise NavigationFailed(url, str(e)) from e

    if response is not None and response.status >= 400:
        raise NavigationFailed(url, f"HTTP {response.status}")


async def dismiss_consent_banner(page) -> bool:
    """Close the cookie/consent dialog if one is showing."""
    for sel in CONSENT_SELECTORS:
        try:
            btn = page.locator(sel).first
            if await btn.is_visible():
                await btn.click(timeout=2000)
                logger.debug(f">>> Consent dialog closed via {sel}")
                return True
        except PlaywrightError:
            continue
    return False


async def wait_for_listing_content(page, timeout_ms: int) -> bool:
    """
    Wait until the price or title widget is attached, at most ``timeout_ms``.

    Returns False when the ceiling is reached or the wait is interrupted
    (e.g. the page navigated after the consent click); that is not an error,
    the fields are then read from whatever has rendered so far.
    """
    try:
        await page.wait_for_selector(READY_SELECTOR, timeout=timeout_ms, state="attached")
        return True
    except PlaywrightTimeout:
        logger.info(f">>> Listing widgets not seen within {timeout_ms} ms; reading page as is")
        return False
    except PlaywrightError as e:
        logger.info(f">>> Settle wait interrupted ({e}); reading page as is")
        return False


async def read_field(
    page,
    selectors: Sequence[str],
    normalize: Callable[[Optional[str]], str] = clean_text,
    timeout_ms: int = 2000,
) -> str:
    """
    Return the text of the first selector that matches with non-empty content.

    A selector that is missing or errors out is skipped; if none yields
    anything the result is an empty string.
    """
    for sel in selectors:
        try:
            loc = page.locator(sel)
            if await loc.count() == 0:
                continue
            raw = await loc.first.inner_text(timeout=timeout_ms)
        except PlaywrightError as e:
            logger.debug(f">>> Selector {sel!r} failed: {e}")
            continue
        text = normalize(raw)
        if text:
            return text
    return ""


async def read_listing_fields(page, url: str, settings: BrowserSettings) -> ExtractedListing:
    """Read all listing fields independently of each other."""
    timeout_ms = settings.read_timeout_ms
    title = await read_field(page, TITLE_SELECTORS, timeout_ms=timeout_ms)
    price = await read_field(page, PRICE_SELECTORS, timeout_ms=timeout_ms)
    facts = await read_field(page, FACTS_SELECTORS, normalize=clean_block, timeout_ms=timeout_ms)
    description = await read_field(page, DESCRIPTION_SELECTORS, normalize=clean_block, timeout_ms=timeout_ms)

    return ExtractedListing(
        title=title,
        price=price,
        facts=facts,
        description=truncate(description, settings.description_max_chars),
        url=url,
    )


async def extract_listing(
    url: str,
    settings: Optional[BrowserSettings] = None,
    session_factory=None,
) -> ExtractedListing:
    """
    Load ``url`` in a fresh headless browser and read the listing fields.

    One attempt only. Raises ``LaunchFailed``, ``NavigationFailed`` or
    ``ContentReadFailed``; the browser session is released in every case.
    ``session_factory`` takes the settings and returns an async context
    manager yielding a page (defaults to ``browser_session``).
    """
    settings = settings or BrowserSettings()
    session_factory = session_factory or browser_session

    logger.info(f">>> Extracting listing: {url}")
    async with session_factory(settings) as page:
        await open_listing_page(page, url, settings.navigation_timeout_ms)
        try:
            await dismiss_consent_banner(page)
            await wait_for_listing_content(page, settings.settle_timeout_ms)
            listing = await read_listing_fields(page, url, settings)
        except ExtractionError:
            raise
        except Exception as e:
            raise ContentReadFailed(url, str(e)) from e

    if listing.is_empty():
        logger.warning(f">>> No listing fields found on {url}; selectors may be outdated")
    else:
        logger.info(f">>> Extracted: {listing.title or '?'} | {listing.price or '?'}")
    return listing
