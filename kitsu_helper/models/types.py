"""Type definitions for kitsu-helper.

Field names mirror the Kitsu JSON:API payloads exactly (camelCase included),
so a decoded entity can be compared field by field against the raw response.
Fields use pydantic strict types: values are type-checked, never coerced.
"""

from typing import Annotated, Any, Dict, Generic, List, Literal, Optional, TypeVar, TypedDict

from pydantic import (
    AfterValidator, BaseModel, ConfigDict, StrictBool, StrictInt, StrictStr, field_validator,
)


class KitsuModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


def _rating(v: Any) -> Any:
    # averageRating is a decimal string on the live API, a number on older dumps
    if isinstance(v, bool) or not isinstance(v, (str, int, float)):
        raise ValueError("Input should be a decimal string or a number")
    return v


Rating = Annotated[Any, AfterValidator(_rating)]


class MediaAttributes(KitsuModel):
    canonicalTitle: StrictStr
    slug: StrictStr
    titles: Dict[str, Any]
    abbreviatedTitles: Optional[List[Any]] = None
    synopsis: Optional[StrictStr] = None
    status: Optional[StrictStr] = None              # current/finished/tba/unreleased/upcoming
    averageRating: Optional[Rating] = None
    ratingFrequencies: Optional[Dict[str, Any]] = None
    userCount: Optional[StrictInt] = None
    favoritesCount: Optional[StrictInt] = None
    popularityRank: Optional[StrictInt] = None
    ratingRank: Optional[StrictInt] = None
    startDate: Optional[StrictStr] = None
    endDate: Optional[StrictStr] = None
    ageRating: Optional[StrictStr] = None           # G/PG/R/R18...
    subtype: Optional[StrictStr] = None
    posterImage: Optional[Dict[str, Any]] = None
    coverImage: Optional[Dict[str, Any]] = None
    coverImageTopOffset: Optional[StrictInt] = None
    youtubeVideoId: Optional[StrictStr] = None


class AnimeAttributes(MediaAttributes):
    ageRatingGuide: Optional[StrictStr] = None
    showType: Optional[StrictStr] = None            # TV/movie/OVA/ONA/special/music
    episodeCount: Optional[StrictInt] = None
    episodeLength: Optional[StrictInt] = None
    nsfw: Optional[StrictBool] = None


class MangaAttributes(MediaAttributes):
    mangaType: Optional[StrictStr] = None           # manga/novel/manhua/oneshot/doujin...
    serialization: Optional[StrictStr] = None
    chapterCount: Optional[StrictInt] = None
    volumeCount: Optional[StrictInt] = None


class UserAttributes(KitsuModel):
    name: StrictStr
    about: Optional[StrictStr] = None
    bio: Optional[StrictStr] = None
    location: Optional[StrictStr] = None
    gender: Optional[StrictStr] = None
    birthday: Optional[StrictStr] = None
    website: Optional[StrictStr] = None
    title: Optional[StrictStr] = None
    createdAt: Optional[StrictStr] = None
    updatedAt: Optional[StrictStr] = None
    pastNames: Optional[List[Any]] = None
    avatar: Optional[Dict[str, Any]] = None
    coverImage: Optional[Dict[str, Any]] = None
    followersCount: Optional[StrictInt] = None
    followingCount: Optional[StrictInt] = None
    commentsCount: Optional[StrictInt] = None
    favoritesCount: Optional[StrictInt] = None
    likesGivenCount: Optional[StrictInt] = None
    likesReceivedCount: Optional[StrictInt] = None
    postsCount: Optional[StrictInt] = None
    ratingsCount: Optional[StrictInt] = None
    reviewsCount: Optional[StrictInt] = None
    lifeSpentOnAnime: Optional[StrictInt] = None
    waifuOrHusbando: Optional[StrictStr] = None


class Resource(KitsuModel):
    id: StrictStr
    links: Dict[str, Any] = {}
    relationships: Dict[str, Any] = {}

    @field_validator("links", "relationships", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return {} if v is None else v


class Anime(Resource):
    type: Literal["anime"]
    attributes: AnimeAttributes


class Manga(Resource):
    type: Literal["manga"]
    attributes: MangaAttributes


class User(Resource):
    type: Literal["users"]
    attributes: UserAttributes


T = TypeVar("T")


class Document(KitsuModel, Generic[T]):
    """A whole response body: one entity, or a list of them for searches."""

    data: T
    links: Dict[str, Any] = {}

    @field_validator("links", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return {} if v is None else v


class Response(TypedDict):
    """What the request functions return: a dumped :class:`Document`."""

    data: Any
    links: Dict[str, Any]


class Titles(TypedDict, total=False):
    en: Optional[str]
    en_jp: Optional[str]
    ja_jp: Optional[str]


class MediaHit(TypedDict):
    source: str
    id: str
    kind: str                              # anime/manga
    title: str
    titles: Titles
    format: Optional[str]                  # showType or mangaType
    status: Optional[str]
    episodes: Optional[int]
    chapters: Optional[int]
    score: Optional[str]                   # averageRating, as published
    url: str


class Details(MediaHit):
    synopsis: str
    airing: str                            # airing/finished
    startDate: Optional[str]
    endDate: Optional[str]
    ageRating: Optional[str]
    poster: Optional[str]
    trailer: Optional[str]
