"""Readiness endpoint reporting whether sources can be fetched."""

from fastapi import APIRouter, Request, Response

from .. import __version__
from ..models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request, response: Response):
    """
    Report whether the shared fetch client is open.
    
    Answers 503 before the lifespan has created the client and after it
    has been closed on shutdown.
    """
    http_client = getattr(request.app.state, "http_client", None)
    client_open = http_client is not None and not http_client.is_closed
    
    if not client_open:
        response.status_code = 503
    
    return HealthResponse(
        status="ready" if client_open else "unavailable",
        version=__version__,
        fetch_client_open=client_open,
    )
