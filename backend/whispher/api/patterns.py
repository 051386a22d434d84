"""Pattern and emotion catalog API routers."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from whispher.models.emotion import EmotionInfo
from whispher.models.pattern import PatternRequest, PatternResponse
from whispher.services.palettes import list_emotions
from whispher.services.pattern import PatternService, export_filename

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/patterns", tags=["patterns"])
emotions_router = APIRouter(prefix="/api/emotions", tags=["emotions"])


def get_pattern_service(request: Request) -> PatternService:
    """FastAPI dependency: retrieve PatternService from app.state.

    Returns HTTP 503 if the service was not initialized at startup.
    """
    svc: PatternService | None = getattr(request.app.state, "pattern_service", None)
    if svc is None:
        raise HTTPException(
            status_code=503,
            detail="Pattern service unavailable. Service not initialized.",
        )
    return svc


@emotions_router.get("", response_model=list[EmotionInfo])
async def get_emotions() -> list[EmotionInfo]:
    """List the emotion categories with their labels, icons and swatches."""
    return list_emotions()


@router.post("", response_model=PatternResponse)
def create_pattern(
    body: PatternRequest,
    service: PatternService = Depends(get_pattern_service),
) -> PatternResponse:
    """Render a pattern as a data URI.

    Unknown emotions fall back to the default palette; the response reports
    the emotion actually used.

    Raises:
        HTTPException 422: Dimensions out of range or non-finite seed.
    """
    try:
        return service.render(body)
    except ValueError as exc:
        logger.warning(
            "create_pattern rejected: %s",
            exc,
            extra={"service": "PatternRouter", "error_type": type(exc).__name__},
        )
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.get("/svg")
def download_pattern(
    seed: str,
    emotion: Optional[str] = None,
    width: Optional[float] = Query(None, gt=0),
    height: Optional[float] = Query(None, gt=0),
    download: bool = False,
    service: PatternService = Depends(get_pattern_service),
) -> Response:
    """Return the raw SVG markup for a pattern.

    The seed is always treated as a string identifier (message UUID), so
    ``seed=0.5`` here is hashed rather than used as a numeric seed.

    Args:
        seed: Seed string.
        emotion: Emotion category.
        width: Canvas width (configured default when omitted).
        height: Canvas height (configured default when omitted).
        download: Add an attachment Content-Disposition header.
    """
    request = PatternRequest(width=width, height=height, seed=seed, emotion=emotion)
    try:
        svg, _, resolved = service.render_svg(request)
    except ValueError as exc:
        logger.warning(
            "download_pattern rejected: %s",
            exc,
            extra={"service": "PatternRouter", "error_type": type(exc).__name__},
        )
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    headers = {}
    if download:
        headers["Content-Disposition"] = (
            f'attachment; filename="{export_filename(seed, resolved)}"'
        )
    return Response(content=svg, media_type="image/svg+xml", headers=headers)
