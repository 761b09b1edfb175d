from typing import Iterable, List, Optional

from models import Artist, FilterCriteria, MAX_CREATION_YEAR


def apply_filters(artists: Iterable[Artist], criteria: FilterCriteria) -> List[Artist]:
    """Keep artists inside the year range and, if any are given, with an accepted member count.

    Input order is preserved.
    """
    selected = []
    for artist in artists:
        if not criteria.min_creation_year <= artist.creation_year <= criteria.max_creation_year:
            continue
        if criteria.member_counts and artist.member_count not in criteria.member_counts:
            continue
        selected.append(artist)
    return selected


def _parse_int(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def parse_filter_criteria(
    min_creation: Optional[str] = None,
    max_creation: Optional[str] = None,
    members: Optional[Iterable[str]] = None,
) -> FilterCriteria:
    """Normalize raw query string values into FilterCriteria.

    Missing or malformed values fall back to the permissive defaults: no lower
    bound, the MAX_CREATION_YEAR upper bound (also used for 0) and no member
    constraint. Member values that are not positive integers are ignored.
    """
    min_year = _parse_int(min_creation) or 0
    max_year = _parse_int(max_creation) or MAX_CREATION_YEAR

    member_counts = set()
    for raw in members or ():
        count = _parse_int(raw)
        if count is not None and count > 0:
            member_counts.add(count)

    return FilterCriteria(
        min_creation_year=min_year,
        max_creation_year=max_year,
        member_counts=frozenset(member_counts),
    )
