"""Flatten decoded Kitsu entities into the summaries the tools return."""

from typing import Dict, Any
from ..models.types import MediaHit, Details
from ..utils.helpers import airing_status, media_url, youtube_url, largest_image


def norm_hit(e: Dict[str, Any]) -> MediaHit:
    a = e["attributes"]
    score = a.get("averageRating")
    return {
        "source": "kitsu",
        "id": e["id"],
        "kind": e["type"],
        "title": a["canonicalTitle"],
        "titles": a.get("titles") or {},
        "format": a.get("showType") or a.get("mangaType") or a.get("subtype"),
        "status": a.get("status"),
        "episodes": a.get("episodeCount"),
        "chapters": a.get("chapterCount"),
        "score": str(score) if score is not None else None,
        "url": media_url(e),
    }


def norm_details(e: Dict[str, Any]) -> Details:
    a = e["attributes"]
    det: Details = {**norm_hit(e)}
    det.update({
        "synopsis": a.get("synopsis") or "",
        "airing": airing_status(a),
        "startDate": a.get("startDate"),
        "endDate": a.get("endDate"),
        "ageRating": a.get("ageRating"),
        "poster": largest_image(a.get("posterImage")),
        "trailer": youtube_url(a),
    })
    return det
