# mypy: ignore-errors
"""Tests for the location lookup endpoints."""

from __future__ import annotations

from fastapi import status


def test_provinces_use_turkish_order(client) -> None:
    response = client.get("/locations/provinces")
    assert response.status_code == status.HTTP_200_OK
    names = [p["name"] for p in response.json()]
    assert names.index("Çanakkale") < names.index("Eskişehir")
    assert names.index("Iğdır") < names.index("İstanbul") < names.index("İzmir") < names.index("Şanlıurfa")


def test_districts_of_province(client) -> None:
    data = client.get("/locations/districts", params={"provinceCode": "34"}).json()
    assert {"code": "1421", "name": "Kadıköy", "provinceCode": "34"} in data
    assert all(d["provinceCode"] == "34" for d in data)


def test_districts_without_province_are_empty(client) -> None:
    assert client.get("/locations/districts").json() == []
    assert client.get("/locations/districts", params={"provinceCode": " "}).json() == []


def test_neighbourhoods_need_both_codes(client) -> None:
    assert client.get("/locations/neighbourhoods", params={"provinceCode": "34"}).json() == []
    data = client.get("/locations/neighbourhoods", params={"provinceCode": "34", "districtCode": "1708"}).json()
    assert [n["name"] for n in data] == ["Altunizade", "Çengelköy", "İcadiye", "Kuzguncuk"]
