"""
Decides how a request's input reaches the LLM.
"""
from .models import (
    AnalysisRequest,
    ImagePlaceholder,
    LinkExtraction,
    PassThrough,
    PipelineChoice,
    Rejected,
)


# Supported classified-ad site
LISTING_DOMAIN_MARKER = "mobile.de"


def is_listing_link(text: str) -> bool:
    """
    Return True if ``text`` should be treated as a listing link.

    Plain case-sensitive substring match: a description that merely mentions
    the domain is routed to extraction as well.
    """
    return LISTING_DOMAIN_MARKER in text


def classify(request: AnalysisRequest) -> PipelineChoice:
    """Pick the pipeline for ``request``. Has no side effects."""
    text = request.text if request.text and request.text.strip() else None

    if text is None and not request.image:
        return Rejected()
    if text is not None and is_listing_link(text):
        return LinkExtraction(url=text)
    if text is not None:
        return PassThrough(text=text)
    return ImagePlaceholder()
