"""Helper functions for kitsu-helper."""

from typing import Any, Dict, Optional

SITE_URL = "https://kitsu.io"


def airing_status(attributes: Dict[str, Any]) -> str:
    """'finished' once an end date is known, 'airing' otherwise."""
    return "finished" if attributes.get("endDate") else "airing"


def media_url(entity: Dict[str, Any]) -> str:
    """Public kitsu.io page for an anime, manga or user."""
    attrs = entity["attributes"]
    if entity["type"] == "users":
        return f"{SITE_URL}/users/{attrs['name']}"
    return f"{SITE_URL}/{entity['type']}/{attrs['slug']}"


def youtube_url(attributes: Dict[str, Any]) -> Optional[str]:
    vid = attributes.get("youtubeVideoId")
    return f"https://www.youtube.com/watch?v={vid}" if vid else None


def largest_image(image: Optional[Dict[str, Any]]) -> Optional[str]:
    if not image:
        return None
    for size in ("original", "large", "medium", "small", "tiny"):
        if image.get(size):
            return image[size]
    return None
