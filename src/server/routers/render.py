"""Render endpoints for the API."""

from fastapi import APIRouter, HTTPException, status

from blogdoc.exceptions import ConfigError
from blogdoc.legacy_markup import convert_markup_to_html
from blogdoc.rendering import RenderOptions, render_content
from blogdoc.utils.logging_config import get_logger
from server.models import ErrorResponse, LegacyRequest, LegacyResponse, RenderRequest, RenderResponse

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/api/render",
    response_model=RenderResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def api_render(render_request: RenderRequest) -> RenderResponse:
    """Render persisted document content.

    **Parameters**

    - **render_request** (`RenderRequest`): content, mode, theme and excerpt length

    **Returns**

    - **RenderResponse**: rendered output and whether the content parsed

    **Raises**

    - **HTTPException**: **400** - unknown theme name

    """
    options = RenderOptions(
        mode=render_request.mode,
        theme=render_request.theme,
        excerpt_length=render_request.excerpt_length,
    )
    try:
        result = render_content(render_request.content, options)
    except ConfigError as exc:
        logger.warning("Render rejected", extra={"theme": render_request.theme, "error": str(exc)})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    if not result.parsed:
        logger.info("Rendered fallback output", extra={"mode": result.mode})
    return RenderResponse(mode=result.mode, output=result.output, parsed=result.parsed)


@router.post("/api/legacy", response_model=LegacyResponse)
async def api_legacy(legacy_request: LegacyRequest) -> LegacyResponse:
    """Convert free text with lightweight markup to HTML (form preview path)."""
    return LegacyResponse(output=convert_markup_to_html(legacy_request.content))
