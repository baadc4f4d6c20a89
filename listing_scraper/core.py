"""
Browser settings and scoped browser session management.
"""
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator

from playwright.async_api import async_playwright

from .errors import LaunchFailed

logger = logging.getLogger(__name__)


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0.0.0 Safari/537.36"
)


@dataclass
class BrowserSettings:
    """Knobs for one extraction run."""

    headless: bool = True
    sandbox: bool = False
    user_agent: str = DEFAULT_USER_AGENT
    locale: str = "de-DE"
    navigation_timeout_ms: int = 60_000
    settle_timeout_ms: int = 3_500
    read_timeout_ms: int = 2_000
    description_max_chars: int = 3_000


async def _close(resource, name: str) -> None:
    try:
        await resource.close()
    except Exception as e:
        logger.warning(f">>> Failed to close {name}: {e}")


@asynccontextmanager
async def browser_session(settings: BrowserSettings) -> AsyncIterator:
    """
    Launch a fresh Chromium instance and yield a single page.

    The browser runs with an ephemeral context (no profile on disk) and is
    closed on every exit path, including cancellation of the awaiting task.
    Any failure before the page is handed out raises ``LaunchFailed``.
    """
    launch_args = ["--disable-blink-features=AutomationControlled"]
    if settings.headless:
        launch_args += ["--disable-dev-shm-usage", "--disable-gpu"]

    try:
        pw = await async_playwright().start()
    except Exception as e:
        raise LaunchFailed(cause=f"playwright start: {e}") from e

    browser = None
    context = None
    try:
        try:
            browser = await pw.chromium.launch(
                headless=settings.headless,
                chromium_sandbox=settings.sandbox,
                args=launch_args,
            )
            context = await browser.new_context(
                viewport={"width": 1280, "height": 900},
                user_agent=settings.user_agent,
                locale=settings.locale,
            )
            context.set_default_timeout(settings.read_timeout_ms)
            context.set_default_navigation_timeout(settings.navigation_timeout_ms)
            page = await context.new_page()
        except Exception as e:
            raise LaunchFailed(cause=str(e)) from e

        logger.info(f">>> Browser launched (headless={settings.headless})")
        yield page
    finally:
        if context is not None:
            await _close(context, "browser context")
        if browser is not None:
            await _close(browser, "browser")
        try:
            await pw.stop()
        except Exception as e:
            logger.warning(f">>> Failed to stop playwright: {e}")
        logger.info(">>> Browser closed")
