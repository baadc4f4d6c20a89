"""
Turns a classified request into the text the LLM receives.
"""
import logging
from typing import Awaitable, Callable

from .errors import ExtractionError, InvalidInput
from .models import (
    ExtractedListing,
    ImagePlaceholder,
    LinkExtraction,
    PassThrough,
    PipelineChoice,
    Rejected,
    VehicleText,
)

logger = logging.getLogger(__name__)

Extractor = Callable[[str], Awaitable[ExtractedListing]]

EXTRACTION_FAILED_MARKER = "[EXTRAKTION FEHLGESCHLAGEN]"

IMAGE_PLACEHOLDER_TEXT = (
    "Der Nutzer hat ein Fahrzeugbild übermittelt. "
    "Eine Bildauswertung ist nicht verfügbar; beurteile das Fahrzeug allgemein "
    "und weise darauf hin, welche Angaben für eine genauere Analyse fehlen."
)


def fallback_text(original: str) -> str:
    """Prompt text used when the listing page could not be read."""
    return (
        f"{EXTRACTION_FAILED_MARKER} Die Inseratsseite konnte nicht ausgelesen werden.\n"
        "\n"
        "Der Link verweist auf ein Fahrzeugangebot.\n"
        "Leite das Fahrzeug nur aus dem Link ab und nutze dein Fachwissen zu:\n"
        "- typischen Motorisierungen\n"
        "- bekannten Schwachstellen\n"
        "- realistischem Unterhalt\n"
        "- Zuverlässigkeit über 100.000 km\n"
        "\n"
        "Link:\n"
        f"{original}"
    )


async def resolve_vehicle_text(choice: PipelineChoice, extractor: Extractor) -> VehicleText:
    """
    Produce the ``VehicleText`` for ``choice``.

    Extraction errors are recovered into a degraded fallback text and never
    propagate. ``Rejected`` raises ``InvalidInput``; callers check for it
    before getting here.
    """
    if isinstance(choice, Rejected):
        raise InvalidInput(choice.reason)

    if isinstance(choice, PassThrough):
        return VehicleText(text=choice.text, source="description")

    if isinstance(choice, ImagePlaceholder):
        return VehicleText(text=IMAGE_PLACEHOLDER_TEXT, source="image")

    if isinstance(choice, LinkExtraction):
        try:
            listing = await extractor(choice.url)
        except ExtractionError as e:
            logger.warning(f">>> Extraction failed, using link-only fallback: {e}")
            return VehicleText(text=fallback_text(choice.url), source="fallback", degraded=True)
        return VehicleText(text=listing.to_text(), source="listing")

    raise TypeError(f"Unknown pipeline choice: {choice!r}")
