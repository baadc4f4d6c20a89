"""
Pydantic models for API request/response serialization.
"""
from typing import Optional

from pydantic import BaseModel

from listing_scraper.models import AnalysisRequest


class AnalyzeRequest(BaseModel):
    """Body of ``POST /api/analyze``."""
    text: Optional[str] = None
    image: Optional[str] = None
    question: Optional[str] = None

    def to_analysis_request(self) -> AnalysisRequest:
        return AnalysisRequest(text=self.text, image=self.image, question=self.question)


class AnalyzeResponse(BaseModel):
    answer: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class HealthOut(BaseModel):
    status: str
    version: str
    llm_configured: bool
