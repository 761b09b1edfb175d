from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Dict, FrozenSet


MAX_CREATION_YEAR = 2030  # Upper bound used when no maximum year is given


class Artist(BaseModel):
    """Model for one artist of the mirrored catalog"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    image: str = ""
    members: List[str] = []
    creation_year: int = Field(0, alias="creationDate")
    first_album_date: str = Field("", alias="firstAlbum")
    locations_ref: str = Field("", alias="locations")
    concert_dates_ref: str = Field("", alias="concertDates")
    relations_ref: str = Field("", alias="relations")

    @property
    def member_count(self) -> int:
        return len(self.members)


class RelationRecord(BaseModel):
    """Tour locations and dates of one artist, keyed by location"""
    model_config = ConfigDict(populate_by_name=True)

    id: int = 0
    dates_locations: Dict[str, List[str]] = Field(
        default_factory=dict, alias="datesLocations"
    )

    @field_validator("dates_locations", mode="before")
    @classmethod
    def _null_means_empty(cls, value):
        return value if value is not None else {}


class FilterCriteria(BaseModel):
    """Normalized list filters (inclusive year bounds, accepted member counts)"""
    model_config = ConfigDict(frozen=True)

    min_creation_year: int = 0
    max_creation_year: int = MAX_CREATION_YEAR
    member_counts: FrozenSet[int] = frozenset()  # Empty means no constraint


class SearchResultItem(BaseModel):
    """Minimal projection of an artist returned by search"""
    id: int
    name: str
    image: str


class ArtistDetail(BaseModel):
    """An artist together with its relations, as shown on the detail view"""
    artist: Artist
    relations: Dict[str, List[str]] = {}
    warning: Optional[str] = None  # Set when relations could not be loaded
