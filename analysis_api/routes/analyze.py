"""
Vehicle analysis route handler.
"""
import logging
from functools import partial

from fastapi import APIRouter, Depends

from listing_scraper import classify, extract_listing, resolve_vehicle_text
from listing_scraper.models import Rejected
from listing_scraper.pipeline import Extractor

from ..config import Config, get_config
from ..errors import AnalysisError, InvalidRequest, MissingCredential, UnhandledInternal
from ..llm import LLMClient
from ..models import AnalyzeRequest, AnalyzeResponse, ErrorResponse
from ..prompts import DEFAULT_INSTRUCTION

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["analysis"])


def get_extractor(cfg: Config = Depends(get_config)) -> Extractor:
    """Dependency providing the listing extractor configured for this process."""
    return partial(extract_listing, settings=cfg.browser_settings())


def get_llm_client(cfg: Config = Depends(get_config)) -> LLMClient:
    return LLMClient(cfg)


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze(
    payload: AnalyzeRequest,
    cfg: Config = Depends(get_config),
    extractor: Extractor = Depends(get_extractor),
    llm: LLMClient = Depends(get_llm_client),
):
    """Assess a vehicle from a description or a mobile.de link."""
    if not cfg.has_credentials():
        logger.error("OPENROUTER_API_KEY is not configured")
        raise MissingCredential()

    choice = classify(payload.to_analysis_request())
    if isinstance(choice, Rejected):
        raise InvalidRequest(choice.reason)

    try:
        vehicle_text = await resolve_vehicle_text(choice, extractor)
        logger.info(f"Vehicle text resolved: source={vehicle_text.source}, degraded={vehicle_text.degraded}")
        answer = await llm.ask(vehicle_text.text, payload.question or DEFAULT_INSTRUCTION)
    except AnalysisError:
        raise
    except Exception as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)
        raise UnhandledInternal(details=str(e)) from e

    return AnalyzeResponse(answer=answer.text)
