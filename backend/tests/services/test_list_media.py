"""GET /media — pagination links, filters and status codes over the seeded catalog.

Invariants:
    - 200 with {count, next, previous, results} when the page has records
    - 204 with no body when the filtered page is empty
    - 500 with no body for negative or non-numeric limit/offset
"""

from urllib.parse import parse_qs, urlsplit


def _query(link):
    return {k: v[0] for k, v in parse_qs(urlsplit(link).query).items()}


async def test_list_returns_all_media_by_default(client):
    res = await client.get("/media")
    assert res.status_code == 200
    body = res.json()
    assert set(body) == {"count", "next", "previous", "results"}
    assert body["count"] == 20
    assert len(body["results"]) == 20
    assert body["next"] is None
    assert body["previous"] is None


async def test_results_use_canonical_paths(client):
    res = await client.get("/media?limit=2")
    ids = [r["id"] for r in res.json()["results"]]
    assert ids == ["/media/0", "/media/1"]


async def test_negative_limit_is_500_without_body(client):
    res = await client.get("/media?limit=-1&offset=0")
    assert res.status_code == 500
    assert res.content == b""


async def test_negative_offset_is_500(client):
    res = await client.get("/media?limit=10&offset=-1")
    assert res.status_code == 500


async def test_non_numeric_limit_is_500(client):
    res = await client.get("/media?limit=ten")
    assert res.status_code == 500


async def test_middle_page_has_both_links(client):
    res = await client.get("/media?limit=5&offset=5")
    body = res.json()
    assert res.status_code == 200
    assert _query(body["next"]) == {"limit": "5", "offset": "10"}
    assert _query(body["previous"]) == {"limit": "5", "offset": "0"}


async def test_previous_limit_shrinks_to_reach_offset_zero(client):
    res = await client.get("/media?limit=10&offset=5")
    body = res.json()
    assert _query(body["next"]) == {"limit": "10", "offset": "15"}
    assert _query(body["previous"]) == {"limit": "5", "offset": "0"}


async def test_window_past_the_end_returns_remaining_records(client):
    res = await client.get("/media?limit=10&offset=15")
    body = res.json()
    assert res.status_code == 200
    assert len(body["results"]) == 5
    assert body["results"][0]["id"] == "/media/15"
    assert body["next"] is None
    assert body["previous"] is not None


async def test_last_record_page_has_no_next(client):
    res = await client.get("/media?limit=10&offset=19")
    body = res.json()
    assert body["next"] is None
    assert _query(body["previous"]) == {"limit": "10", "offset": "9"}


async def test_first_page_has_no_previous(client):
    res = await client.get("/media?limit=10&offset=0")
    body = res.json()
    assert _query(body["next"]) == {"limit": "10", "offset": "10"}
    assert body["previous"] is None


async def test_offset_beyond_collection_is_204(client):
    res = await client.get("/media?limit=10&offset=40")
    assert res.status_code == 204
    assert res.content == b""


async def test_filter_by_name_is_case_sensitive(client):
    assert (await client.get("/media?name=akira")).status_code == 204
    res = await client.get("/media?name=Akira")
    assert res.status_code == 200
    assert res.json()["count"] == 1


async def test_filter_by_type(client):
    res = await client.get("/media?type=DVD")
    assert res.json()["count"] == 9
    assert {r["type"] for r in res.json()["results"]} == {"DVD"}


async def test_filter_by_desc(client):
    res = await client.get(
        "/media", params={"desc": "Influential Japanese anime film."},
    )
    assert res.json()["count"] == 1


async def test_links_preserve_all_active_filters(client):
    entry = {
        "name": "Akira", "type": "DVD",
        "desc": "Influential Japanese anime film.",
    }
    await client.post("/media", json=entry)
    await client.post("/media", json=entry)

    res = await client.get(
        "/media", params={**entry, "offset": "1", "limit": "1"},
    )
    body = res.json()
    assert body["count"] == 3
    assert _query(body["next"]) == {**entry, "limit": "1", "offset": "2"}
    assert _query(body["previous"]) == {**entry, "limit": "1", "offset": "0"}


async def test_following_next_links_walks_the_whole_collection(client):
    seen = []
    link = "/media?limit=6"
    while link:
        body = (await client.get(link)).json()
        seen.extend(r["id"] for r in body["results"])
        link = body["next"]
    assert seen == [f"/media/{i}" for i in range(20)]


async def test_next_then_previous_returns_to_window_start(client):
    first = (await client.get("/media?limit=4&offset=8")).json()
    after = (await client.get(first["next"])).json()
    back = (await client.get(after["previous"])).json()
    assert back["results"][0]["id"] == first["results"][0]["id"]


async def test_store_fault_is_500(client, seeded_store):
    seeded_store.error_mode = True
    res = await client.get("/media")
    assert res.status_code == 500
