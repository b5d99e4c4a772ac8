import copy

import pytest


class DummyResponse:
    def __init__(self, status_code=200, json_data=None, text=None):
        self.status_code = status_code
        self._json = json_data
        self.text = text

    def json(self):
        if self._json is None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._json


ANIME = {
    "id": "1",
    "type": "anime",
    "links": {"self": "https://kitsu.io/api/edge/anime/1"},
    "attributes": {
        "createdAt": "2013-02-20T16:00:13.609Z",
        "slug": "cowboy-bebop",
        "synopsis": "In the year 2071, humanity has colonized several of the planets...",
        "titles": {"en": "Cowboy Bebop", "en_jp": "Cowboy Bebop", "ja_jp": "カウボーイビバップ"},
        "canonicalTitle": "Cowboy Bebop",
        "abbreviatedTitles": ["COWBOY BEBOP"],
        "averageRating": "82.26",
        "ratingFrequencies": {"2": "4", "20": "1000"},
        "userCount": 130000,
        "favoritesCount": 4900,
        "startDate": "1998-04-03",
        "endDate": "1999-04-24",
        "popularityRank": 27,
        "ratingRank": 26,
        "ageRating": "R",
        "ageRatingGuide": "17+ (violence & profanity)",
        "subtype": "TV",
        "status": "finished",
        "posterImage": {
            "tiny": "https://media.kitsu.io/anime/poster_images/1/tiny.jpg",
            "original": "https://media.kitsu.io/anime/poster_images/1/original.jpg",
            "meta": {"dimensions": {}},
        },
        "coverImage": None,
        "episodeCount": 26,
        "episodeLength": 25,
        "youtubeVideoId": "qig4KOK2R2g",
        "showType": "TV",
        "nsfw": False,
    },
    "relationships": {
        "genres": {"links": {
            "self": "https://kitsu.io/api/edge/anime/1/relationships/genres",
            "related": "https://kitsu.io/api/edge/anime/1/genres",
        }},
    },
}

MANGA = {
    "id": "14916",
    "type": "manga",
    "links": {"self": "https://kitsu.io/api/edge/manga/14916"},
    "attributes": {
        "slug": "orange",
        "synopsis": "Naho receives a letter from herself, ten years in the future.",
        "titles": {"en": "Orange", "en_jp": "Orange"},
        "canonicalTitle": "Orange",
        "averageRating": "80.9",
        "startDate": "2012-03-13",
        "endDate": None,
        "status": "current",
        "mangaType": "manga",
        "serialization": "Bessatsu Margaret",
        "chapterCount": 22,
        "volumeCount": 6,
    },
    "relationships": {},
}

USER = {
    "id": "1",
    "type": "users",
    "links": {"self": "https://kitsu.io/api/edge/users/1"},
    "attributes": {"name": "vikhyat", "about": "", "followersCount": 1200, "pastNames": []},
}


@pytest.fixture
def anime():
    return copy.deepcopy(ANIME)


@pytest.fixture
def manga():
    return copy.deepcopy(MANGA)


@pytest.fixture
def user():
    return copy.deepcopy(USER)


@pytest.fixture
def transport():
    """Fake transport collaborator: records calls, replays queued responses."""

    class FakeTransport:
        def __init__(self):
            self.calls = []
            self.responses = []

        def queue(self, status_code=200, json_data=None):
            self.responses.append(DummyResponse(status_code, json_data))
            return self

        def fail(self, exc):
            self.responses.append(exc)
            return self

        def __call__(self, url, timeout=None):
            self.calls.append({"url": url, "timeout": timeout})
            r = self.responses.pop(0)
            if isinstance(r, Exception):
                raise r
            return r

    return FakeTransport()
