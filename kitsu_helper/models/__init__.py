"""Models and type definitions for kitsu-helper."""

from .types import (
    KitsuModel, MediaAttributes, AnimeAttributes, MangaAttributes, UserAttributes,
    Resource, Anime, Manga, User, Document, Response,
    Titles, MediaHit, Details,
)

__all__ = [
    "KitsuModel", "MediaAttributes", "AnimeAttributes", "MangaAttributes", "UserAttributes",
    "Resource", "Anime", "Manga", "User", "Document", "Response",
    "Titles", "MediaHit", "Details",
]
