"""
Liveness routes.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ..config import Config, get_config
from ..models import HealthOut

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def root():
    return "Backend läuft ✅"


@router.get("/health", response_model=HealthOut)
async def health_check(cfg: Config = Depends(get_config)):
    """Health check endpoint."""
    return HealthOut(status="healthy", version=cfg.API_VERSION, llm_configured=cfg.has_credentials())
