"""
mobile.de listing extraction and vehicle input pipeline
"""
from .classifier import classify, is_listing_link
from .core import BrowserSettings, browser_session
from .errors import (
    ContentReadFailed,
    ExtractionError,
    InvalidInput,
    LaunchFailed,
    NavigationFailed,
)
from .models import (
    AnalysisRequest,
    ExtractedListing,
    ImagePlaceholder,
    LinkExtraction,
    PassThrough,
    Rejected,
    VehicleText,
)
from .pipeline import resolve_vehicle_text
from .scraper import extract_listing
from .utils import init_logger

__version__ = "1.0.0"

__all__ = [
    "AnalysisRequest",
    "BrowserSettings",
    "ContentReadFailed",
    "ExtractedListing",
    "ExtractionError",
    "ImagePlaceholder",
    "InvalidInput",
    "LaunchFailed",
    "LinkExtraction",
    "NavigationFailed",
    "PassThrough",
    "Rejected",
    "VehicleText",
    "browser_session",
    "classify",
    "extract_listing",
    "init_logger",
    "is_listing_link",
    "resolve_vehicle_text",
]
