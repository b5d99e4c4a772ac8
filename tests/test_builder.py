from urllib.parse import parse_qsl

import pytest

from kitsu_helper.core.builder import Search


def test_empty_builder_yields_empty_query():
    s = Search()
    assert s.to_query() == ""
    assert dict(s.params()) == {}
    assert len(s) == 0


def test_filter_is_chainable_and_stored_verbatim():
    s = Search()
    assert s.filter("text", "non non biyori") is s
    assert dict(s.params()) == {"filter[text]": "non non biyori"}


def test_query_percent_encodes_keys_and_values():
    q = Search().filter("text", "non non biyori").to_query()
    assert q == "filter%5Btext%5D=non%20non%20biyori"


@pytest.mark.parametrize("value", ["a&b=c", "100%", "進撃の巨人", "x/y?z", "+plus"])
def test_every_pair_round_trips_through_query(value):
    s = Search().filter("text", value).filter("season", "winter")
    assert parse_qsl(s.to_query()) == [("filter[text]", value), ("filter[season]", "winter")]


def test_reinserting_a_key_overwrites():
    s = Search().filter("text", "one").filter("text", "two")
    assert dict(s.params()) == {"filter[text]": "two"}
    assert s.to_query().count("filter%5Btext%5D") == 1


def test_paging_and_sort():
    s = Search().limit(5).offset(10).sort("-averageRating,id")
    assert dict(s.params()) == {
        "page[limit]": "5",
        "page[offset]": "10",
        "sort": "-averageRating,id",
    }
    assert s.to_query() == "page%5Blimit%5D=5&page%5Boffset%5D=10&sort=-averageRating%2Cid"


def test_params_snapshot_is_read_only():
    s = Search().filter("text", "a")
    p = s.params()
    with pytest.raises(TypeError):
        p["filter[text]"] = "b"
    s.filter("text", "c")
    assert p["filter[text]"] == "a"
