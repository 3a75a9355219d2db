"""Render endpoint for filling SVG templates."""

from fastapi import APIRouter, Depends, Request, Response
from pydantic import ValidationError

from ..exceptions import MalformedPayloadError
from ..models.requests import RenderRequest, parse_render_payload
from ..services.fetcher import SourceFetcher
from ..services.substitution import apply_substitutions
from ..utils.logging import get_logger


RESPONSE_CONTENT_TYPE = "text/html; charset=utf-8"

router = APIRouter()
logger = get_logger(__name__)


def get_source_fetcher(request: Request) -> SourceFetcher:
    """Get the fetcher bound to the application's shared HTTP client."""
    return SourceFetcher(
        request.app.state.http_client,
        timeout=request.app.state.config.fetch_timeout_seconds,
    )


async def parse_render_request(request: Request) -> RenderRequest:
    """Parse the raw request body into a render payload."""
    body = await request.body()
    try:
        return parse_render_payload(body)
    except ValidationError as e:
        raise MalformedPayloadError(f"{e.error_count()} validation error(s)") from e


@router.post("/render")
async def render_svg(
    payload: RenderRequest = Depends(parse_render_request),
    fetcher: SourceFetcher = Depends(get_source_fetcher),
):
    """
    Fetch an SVG source and fill in its placeholders.
    
    The body is the transformed markup, always served as
    ``text/html; charset=utf-8``. Replacement values outside the character
    whitelist are skipped without failing the request.
    """
    document = await fetcher.fetch_and_transform(payload.source, payload.remove_hyphens)
    result = apply_substitutions(document, payload.replace)
    
    if result.rejected:
        logger.debug("Skipped replacement values outside whitelist", placeholders=list(result.rejected))
    logger.info(
        "Rendered source",
        source=payload.source,
        applied=len(result.applied),
        rejected=len(result.rejected),
    )
    
    return Response(
        content=result.document.encode("utf-8", errors="surrogateescape"),
        status_code=200,
        media_type=RESPONSE_CONTENT_TYPE,
    )
