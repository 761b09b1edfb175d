import asyncio
import logging
from enum import Enum
from typing import Optional, Tuple

from models import Artist
from groupie_client import GroupieClient


logger = logging.getLogger(__name__)


class CacheState(str, Enum):
    EMPTY = "empty"
    POPULATING = "populating"
    POPULATED = "populated"


class DirectoryCache:
    """Holds the artist collection in memory, fetched once on first access.

    Population is guarded by a lock so at most one upstream fetch is in flight.
    Callers that queued behind a successful fetch get its result; a failed fetch
    leaves the cache empty and the next caller tries again.
    """

    def __init__(self, client: GroupieClient):
        self.client = client
        self._artists: Tuple[Artist, ...] = ()
        self._state = CacheState.EMPTY
        self._lock = asyncio.Lock()

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def is_populated(self) -> bool:
        return self._state is CacheState.POPULATED

    @property
    def size(self) -> int:
        return len(self._artists)

    async def get_all(self) -> Tuple[Artist, ...]:
        """Get all artists, populating the cache from upstream if needed"""
        if self._state is CacheState.POPULATED:
            return self._artists

        async with self._lock:
            # Another caller may have populated while we waited
            if self._state is CacheState.POPULATED:
                return self._artists

            self._state = CacheState.POPULATING
            logger.info("Populating artist cache from %s", self.client.artists_url)
            try:
                artists = await self.client.fetch_artists()
            except BaseException as e:
                self._state = CacheState.EMPTY
                logger.warning("Artist cache population failed: %s", e)
                raise

            self._artists = tuple(artists)
            self._state = CacheState.POPULATED
            logger.info("Artist cache populated with %d artists", len(self._artists))
            return self._artists

    async def get_artist_by_id(self, artist_id: int) -> Optional[Artist]:
        """Get a specific artist by id"""
        for artist in await self.get_all():
            if artist.id == artist_id:
                return artist
        return None
