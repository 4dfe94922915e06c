# mypy: ignore-errors
"""Tests for the static location lookup."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from patidestek.services.locations import (
    LocationService,
    get_location_service,
    turkish_lower,
    turkish_sort_key,
)


@pytest.fixture()
def fixture_dir(tmp_path: Path) -> Path:
    (tmp_path / "provinces.json").write_text(
        json.dumps(
            [
                {"code": "35", "name": "İzmir"},
                {"code": "06", "name": "Ankara"},
                {"code": "76", "name": "Iğdır"},
                {"code": "17", "name": "Çanakkale"},
                {"code": "16", "name": "Bursa"},
            ]
        ),
        encoding="utf-8",
    )
    (tmp_path / "districts.json").write_text(
        json.dumps(
            [
                {"code": "3", "name": "Üsküdar", "provinceCode": "34"},
                {"code": "1", "name": "Kadıköy", "provinceCode": "34"},
                {"code": "2", "name": "Beşiktaş", "provinceCode": "34"},
                {"code": "9", "name": "Çankaya", "provinceCode": "06"},
            ]
        ),
        encoding="utf-8",
    )
    (tmp_path / "neighbourhoods.json").write_text(
        json.dumps(
            [
                {"name": "Osmanağa", "districtCode": "1", "provinceCode": "34"},
                {"name": "Caferağa", "districtCode": "1", "provinceCode": "34"},
                {"name": "Çengelköy", "districtCode": "3", "provinceCode": "34"},
            ]
        ),
        encoding="utf-8",
    )
    return tmp_path


def test_turkish_lower_handles_dotted_and_dotless_i() -> None:
    assert turkish_lower("IĞDIR") == "ığdır"
    assert turkish_lower("İZMİR") == "izmir"


def test_turkish_sort_key_orders_special_letters_after_base_letter() -> None:
    names = ["Şanlıurfa", "Çanakkale", "Sakarya", "Canik", "İzmir", "Iğdır", "Ordu", "Ödemiş"]
    assert sorted(names, key=turkish_sort_key) == [
        "Canik", "Çanakkale", "Iğdır", "İzmir", "Ordu", "Ödemiş", "Sakarya", "Şanlıurfa",
    ]


def test_turkish_sort_key_collates_circumflex_with_base_letter() -> None:
    names = ["Kütahya", "Kâhta", "Kahramanmaraş", "Kırşehir", "Kâzım Karabekir", "Kazan"]
    assert sorted(names, key=turkish_sort_key) == [
        "Kahramanmaraş", "Kâhta", "Kazan", "Kâzım Karabekir", "Kırşehir", "Kütahya",
    ]
    # Identical apart from the accent: the plain spelling comes first.
    assert sorted(["Hâkim", "Hakim"], key=turkish_sort_key) == ["Hakim", "Hâkim"]


def test_list_provinces_sorted_by_turkish_alphabet(fixture_dir: Path) -> None:
    service = LocationService.from_directory(fixture_dir)
    names = [p.name for p in service.list_provinces()]
    assert names == ["Ankara", "Bursa", "Çanakkale", "Iğdır", "İzmir"]


def test_list_districts_filters_by_province(fixture_dir: Path) -> None:
    service = LocationService.from_directory(fixture_dir)
    assert [d.name for d in service.list_districts("34")] == ["Beşiktaş", "Kadıköy", "Üsküdar"]
    assert service.list_districts("") == []
    assert service.list_districts(None) == []
    assert service.list_districts("99") == []


def test_list_neighbourhoods_requires_both_codes(fixture_dir: Path) -> None:
    service = LocationService.from_directory(fixture_dir)
    assert [n.name for n in service.list_neighbourhoods("34", "1")] == ["Caferağa", "Osmanağa"]
    assert service.list_neighbourhoods("34", None) == []
    assert service.list_neighbourhoods(None, "1") == []
    assert service.list_neighbourhoods("06", "1") == []


def test_missing_fixtures_yield_empty_lists(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    service = LocationService.from_directory(tmp_path / "nowhere")
    assert service.list_provinces() == []
    assert "not found" in caplog.text


def test_corrupt_fixture_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "provinces.json").write_text("{not json", encoding="utf-8")
    service = LocationService.from_directory(tmp_path)
    assert service.list_provinces() == []


def test_bundled_fixtures_load() -> None:
    service = get_location_service()
    assert service is get_location_service()
    codes = {p.code for p in service.list_provinces()}
    assert {"06", "34", "35"} <= codes
    assert "Kadıköy" in [d.name for d in service.list_districts("34")]
