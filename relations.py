import logging

from models import Artist, ArtistDetail, RelationRecord
from groupie_client import GroupieClient
from errors import UpstreamError


logger = logging.getLogger(__name__)


class RelationEnricher:
    """Loads the touring schedule of a single artist for the detail view"""

    def __init__(self, client: GroupieClient):
        self.client = client

    async def fetch(self, relations_ref: str) -> RelationRecord:
        """Fetch relations, raising an UpstreamError on failure"""
        return await self.client.fetch_relations(relations_ref)

    async def enrich(self, artist: Artist) -> ArtistDetail:
        """Attach relations to an artist; upstream failures yield an empty mapping and a warning"""
        try:
            record = await self.fetch(artist.relations_ref)
        except UpstreamError as e:
            logger.warning(
                "Could not load relations for artist %d (%s): %s",
                artist.id,
                e.kind,
                e.message,
            )
            return ArtistDetail(
                artist=artist,
                relations={},
                warning="Concert dates are temporarily unavailable.",
            )

        if record.id and record.id != artist.id:
            logger.warning(
                "Relations for artist %d returned id %d", artist.id, record.id
            )
        return ArtistDetail(artist=artist, relations=record.dates_locations)
