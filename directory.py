from typing import List

from models import Artist, ArtistDetail, FilterCriteria, SearchResultItem
from cache import DirectoryCache
from relations import RelationEnricher
from filters import apply_filters
from search import search_artists
from errors import InvalidParameter, NotFound


def parse_artist_id(raw: str) -> int:
    """Validate an artist id supplied by a caller"""
    if not isinstance(raw, str) or not (raw.isascii() and raw.isdigit()):
        raise InvalidParameter("id", "artist id must be a positive number")
    artist_id = int(raw)
    if artist_id <= 0:
        raise InvalidParameter("id", "artist id must be a positive number")
    return artist_id


class ArtistDirectory:
    """Answers list, detail and search queries against the cached catalog"""

    def __init__(self, cache: DirectoryCache, enricher: RelationEnricher):
        self.cache = cache
        self.enricher = enricher

    async def list_artists(self, criteria: FilterCriteria) -> List[Artist]:
        """List artists matching the filters"""
        return apply_filters(await self.cache.get_all(), criteria)

    async def get_artist(self, artist_id: int) -> Artist:
        """Get one artist or raise NotFound"""
        artist = await self.cache.get_artist_by_id(artist_id)
        if artist is None:
            raise NotFound(f"no artist with id {artist_id}")
        return artist

    async def artist_detail(self, artist_id: int) -> ArtistDetail:
        """Get one artist with its relations, fetched fresh on every call"""
        artist = await self.get_artist(artist_id)
        return await self.enricher.enrich(artist)

    async def search(self, query: str) -> List[SearchResultItem]:
        """Ranked search over names and members"""
        if not query.strip():
            return []
        return search_artists(await self.cache.get_all(), query)
