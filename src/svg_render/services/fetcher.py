"""Retrieval of SVG sources over HTTP."""

from typing import Optional

import httpx

from ..exceptions import InvalidContentTypeError, ReadFailureError, SourceRequestError
from ..utils.logging import get_logger
from .substitution import strip_apostrophes


ACCEPTED_CONTENT_TYPE = "image/svg+xml"

logger = get_logger(__name__)


class SourceFetcher:
    """Fetches SVG documents with a shared httpx client."""
    
    def __init__(self, http_client: httpx.AsyncClient, timeout: Optional[float] = None):
        """
        Initialize with shared HTTP client.
        
        Args:
            http_client: Shared httpx AsyncClient instance
            timeout: Limit in seconds applied to each of the connect, read, write
                and pool phases separately, None for no limit
        """
        self._client = http_client
        self._timeout = httpx.Timeout(timeout)
    
    async def fetch(self, url: str) -> str:
        """
        Download the document at ``url``.
        
        The declared content type must be exactly ``image/svg+xml``; it is
        checked before the body is read. The upstream status code is not
        inspected.
        
        Raises:
            SourceRequestError: The request could not be made or failed in transit
            InvalidContentTypeError: The source is not declared as SVG
            ReadFailureError: The body could not be read
        """
        try:
            request = self._client.build_request("GET", url, timeout=self._timeout)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise SourceRequestError(f"Unusable source URL {url!r}: {e}") from e
        
        try:
            response = await self._client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise SourceRequestError(f"Request to {url!r} failed: {e}") from e
        
        try:
            content_type = response.headers.get("content-type")
            if content_type != ACCEPTED_CONTENT_TYPE:
                raise InvalidContentTypeError(content_type)
            
            try:
                body = await response.aread()
            except httpx.HTTPError as e:
                raise ReadFailureError(f"Reading {url!r} failed: {e}") from e
        finally:
            await response.aclose()
        
        logger.debug("Fetched source", url=url, status_code=response.status_code, size=len(body))
        
        # Invalid UTF-8 is carried through untouched and restored on output.
        return body.decode("utf-8", errors="surrogateescape")
    
    async def fetch_and_transform(self, url: str, remove_hyphens: bool = False) -> str:
        """
        Fetch an SVG source and optionally strip its apostrophes.
        
        ``remove_hyphens`` keeps its historical name; the character it
        removes is the apostrophe.
        """
        document = await self.fetch(url)
        if remove_hyphens:
            document = strip_apostrophes(document)
        return document
