"""
Data models for the vehicle input pipeline.
"""
from dataclasses import dataclass
from typing import Optional, Union


# Rendered in place of a field the listing page did not provide
EMPTY_MARKER = "nicht angegeben"

# (attribute, label) in the order the prompt expects them
LISTING_LABELS = (
    ("title", "Titel"),
    ("price", "Preis"),
    ("facts", "Fahrzeugdaten"),
    ("description", "Beschreibung"),
)


@dataclass
class AnalysisRequest:
    """Raw user input as received by the service."""

    text: Optional[str] = None
    image: Optional[str] = None
    question: Optional[str] = None


@dataclass
class ExtractedListing:
    """Fields read from a classified-ad page. Missing fields are empty strings."""

    title: str = ""
    price: str = ""
    facts: str = ""
    description: str = ""
    url: str = ""

    def is_empty(self) -> bool:
        return not any(getattr(self, attr) for attr, _ in LISTING_LABELS)

    def to_text(self) -> str:
        """Serialize to the fixed four-line block used in the prompt."""
        lines = []
        for attr, label in LISTING_LABELS:
            value = getattr(self, attr) or EMPTY_MARKER
            lines.append(f"{label}: {value}")
        return "\n".join(lines)


@dataclass(frozen=True)
class VehicleText:
    """The single text handed to the LLM for one request."""

    text: str
    source: str = "description"
    degraded: bool = False


# Classifier outcomes

@dataclass(frozen=True)
class LinkExtraction:
    url: str


@dataclass(frozen=True)
class PassThrough:
    text: str


@dataclass(frozen=True)
class ImagePlaceholder:
    pass


@dataclass(frozen=True)
class Rejected:
    reason: str = "Kein Input erhalten"


PipelineChoice = Union[LinkExtraction, PassThrough, ImagePlaceholder, Rejected]
