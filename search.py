from typing import Callable, List, Sequence

from models import Artist, SearchResultItem


MAX_SEARCH_RESULTS = 8


def _name_starts_with(artist: Artist, query: str) -> bool:
    return artist.name.lower().startswith(query)


def _name_contains(artist: Artist, query: str) -> bool:
    return query in artist.name.lower()


def _member_contains(artist: Artist, query: str) -> bool:
    return any(query in member.lower() for member in artist.members)


# Ordered from most to least relevant
SEARCH_TIERS: List[Callable[[Artist, str], bool]] = [
    _name_starts_with,
    _name_contains,
    _member_contains,
]


def search_artists(
    artists: Sequence[Artist], query: str, limit: int = MAX_SEARCH_RESULTS
) -> List[SearchResultItem]:
    """Rank artists matching a free-text query.

    Name prefix matches come first, then name substring matches, then artists
    with a matching member name. Within a tier the collection order is kept.
    Each artist appears at most once and at most ``limit`` items are returned.
    """
    if not query.strip():
        return []
    query = query.lower()

    results: List[SearchResultItem] = []
    seen_ids = set()
    for matches in SEARCH_TIERS:
        for artist in artists:
            if len(results) >= limit:
                return results
            if artist.id in seen_ids or not matches(artist, query):
                continue
            seen_ids.add(artist.id)
            results.append(
                SearchResultItem(id=artist.id, name=artist.name, image=artist.image)
            )
    return results
