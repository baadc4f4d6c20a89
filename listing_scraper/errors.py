"""
Exceptions raised by the extraction pipeline.
"""
from typing import Optional


class InvalidInput(ValueError):
    """Request carries neither usable text nor an image."""


class ExtractionError(Exception):
    """Base class for failures while extracting a listing page."""

    stage = "extraction"

    def __init__(self, url: str = "", cause: Optional[str] = None):
        self.url = url
        self.cause = cause or ""
        message = f"{self.stage} failed"
        if url:
            message += f" for {url}"
        if cause:
            message += f": {cause}"
        super().__init__(message)


class LaunchFailed(ExtractionError):
    """The headless browser could not be started."""

    stage = "browser launch"


class NavigationFailed(ExtractionError):
    """The listing page did not load (timeout, network error, HTTP error status)."""

    stage = "navigation"


class ContentReadFailed(ExtractionError):
    """Unexpected error while waiting for or reading the rendered page."""

    stage = "content read"
