# mypy: ignore-errors
"""Tests for the public listing search."""

from __future__ import annotations

import math

import pytest
from fastapi import status

from patidestek.models import PostStatus


def test_pagination_of_25_listings(client, make_post) -> None:
    for i in range(25):
        make_post(title=f"Listing number {i}", age_minutes=i)

    pages = [client.get("/posts", params={"page": page}).json() for page in (1, 2, 3)]

    assert [len(p["posts"]) for p in pages] == [12, 12, 1]
    assert all(p["total"] == 25 and p["limit"] == 12 for p in pages)
    assert pages[0]["totalPages"] == math.ceil(25 / 12) == 3
    assert pages[0]["posts"][0]["title"] == "Listing number 0"
    assert pages[2]["posts"][0]["title"] == "Listing number 24"


def test_empty_result_has_zero_pages(client) -> None:
    data = client.get("/posts").json()
    assert data == {"posts": [], "total": 0, "page": 1, "limit": 12, "totalPages": 0}


def test_non_approved_listings_are_hidden(client, make_post) -> None:
    visible = make_post(title="Onaylı ilan")
    hidden = [
        make_post(title=f"Gizli ilan {state.value}", status=state)
        for state in (PostStatus.PENDING, PostStatus.REJECTED, PostStatus.RESOLVED)
    ]

    listed = client.get("/posts").json()
    assert [p["id"] for p in listed["posts"]] == [visible.id]
    for post in hidden:
        response = client.get(f"/posts/{post.id}")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Post not found or not approved"


def test_public_view_shape(client, make_post, make_category, make_tag) -> None:
    post = make_post(category=make_category("Kayıp"), tags=[make_tag("Kedi")])
    data = client.get(f"/posts/{post.id}").json()

    assert data["owner"] == {"id": post.owner_id, "name": "Ayşe Yılmaz"}
    assert data["category"]["name"] == "Kayıp"
    assert [t["name"] for t in data["tags"]] == ["Kedi"]
    assert data["neighbourhoodName"] == "Caferağa"
    assert "status" not in data
    assert "email" not in data["owner"]


@pytest.mark.parametrize(
    ("logic", "expected"),
    [("ANY", {"cat", "both"}), ("any", {"cat", "both"}), ("OR", {"cat", "both"}), ("ALL", {"both"}), ("AND", {"both"})],
)
def test_tag_logic(client, make_post, make_tag, logic: str, expected: set[str]) -> None:
    cat, urgent = make_tag("Kedi"), make_tag("Acil")
    make_post(title="cat", tags=[cat])
    make_post(title="both", tags=[cat, urgent])
    make_post(title="none")

    data = client.get("/posts", params={"tagIds": f"{cat.id},{urgent.id}", "tagLogic": logic}).json()
    titles = [p["title"] for p in data["posts"]]
    assert set(titles) == expected
    assert len(titles) == len(set(titles)) == data["total"]


def test_tag_ids_with_blanks_are_tolerated(client, make_post, make_tag) -> None:
    cat = make_tag("Kedi")
    make_post(title="cat", tags=[cat])
    data = client.get("/posts", params={"tagIds": f" {cat.id}, ,{cat.id}"}).json()
    assert data["total"] == 1


OUT_OF_RANGE = 10**20


@pytest.mark.parametrize(
    "params",
    [
        {"tagIds": "1,abc"},
        {"tagIds": f"1,{OUT_OF_RANGE}"},
        {"tagIds": "0"},
        {"tagLogic": "XOR"},
        {"page": 0},
        {"page": OUT_OF_RANGE},
        {"limit": 0},
        {"limit": 1000},
        {"categoryId": OUT_OF_RANGE},
        {"categoryId": 0},
    ],
)
def test_invalid_query_parameters(client, params) -> None:
    assert client.get("/posts", params=params).status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_category_and_location_filters(client, make_post, make_category) -> None:
    lost = make_category("Kayıp")
    make_post(title="Kadıköy kayıp", category=lost)
    make_post(title="Kadıköy sahiplendirme")
    make_post(
        title="Bornova kayıp",
        category=lost,
        province_code="35",
        province_name="İzmir",
        district_code="1203",
        district_name="Bornova",
        neighbourhood_name="Erzene",
    )

    by_category = client.get("/posts", params={"categoryId": lost.id}).json()
    assert {p["title"] for p in by_category["posts"]} == {"Kadıköy kayıp", "Bornova kayıp"}

    combined = client.get(
        "/posts",
        params={"categoryId": lost.id, "provinceCode": "34", "districtCode": "1421", "neighbourhoodName": "Caferağa"},
    ).json()
    assert [p["title"] for p in combined["posts"]] == ["Kadıköy kayıp"]


def test_search_term(client, make_post) -> None:
    make_post(title="Kayıp papağan", description="Yeşil renkli papağanımız uçtu gitti.")
    make_post(title="Yavru kediler", description="Sahiplendirme için dört yavru kedi.")
    data = client.get("/posts", params={"search": "papağan"}).json()
    assert [p["title"] for p in data["posts"]] == ["Kayıp papağan"]
