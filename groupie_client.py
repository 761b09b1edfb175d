import httpx
import logging
from typing import Any, List, Optional
from pydantic import TypeAdapter, ValidationError

from models import Artist, RelationRecord
from errors import UpstreamUnreachable, UpstreamBadStatus, UpstreamBadPayload


logger = logging.getLogger(__name__)

_artists_adapter = TypeAdapter(List[Artist])


class GroupieClient:
    """Client for the remote artist catalog API"""

    def __init__(
        self,
        artists_url: str = "https://groupietrackers.herokuapp.com/api/artists",
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.artists_url = artists_url
        self.timeout = timeout
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def close(self):
        """Close the HTTP client"""
        await self.client.aclose()

    async def fetch_artists(self) -> List[Artist]:
        """Fetch the whole artist collection"""
        data = await self._get_json(self.artists_url)
        try:
            artists = _artists_adapter.validate_python(data)
        except ValidationError as e:
            raise UpstreamBadPayload(
                f"artist collection does not match the expected shape: {e.error_count()} errors",
                self.artists_url,
            ) from e
        logger.debug("Fetched %d artists from %s", len(artists), self.artists_url)
        return artists

    async def fetch_relations(self, url: str) -> RelationRecord:
        """Fetch the touring schedule behind an artist's relations URL"""
        data = await self._get_json(url)
        try:
            return RelationRecord.model_validate(data)
        except ValidationError as e:
            raise UpstreamBadPayload(
                f"relation record does not match the expected shape: {e.error_count()} errors",
                url,
            ) from e

    async def _get_json(self, url: str) -> Any:
        """GET a URL and decode its JSON body, mapping failures to upstream error kinds"""
        try:
            response = await self.client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise UpstreamUnreachable(
                f"cannot reach upstream: {type(e).__name__}", url
            ) from e

        if response.status_code != httpx.codes.OK:
            raise UpstreamBadStatus(response.status_code, url)

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamBadPayload("upstream body is not valid JSON", url) from e
