"""Static Turkish province/district/neighbourhood lookup.

Fixtures are read once per process and kept in immutable tuples; callers get
new sorted lists on every query.
"""

from __future__ import annotations

import json
import logging
import unicodedata
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from patidestek.core.settings import settings

logger = logging.getLogger(__name__)

TURKISH_ALPHABET = "abcçdefgğhıijklmnoöprsştuüvyz"
_ALPHABET_RANK = {char: index for index, char in enumerate(TURKISH_ALPHABET)}
_TURKISH_LOWER = str.maketrans({"I": "ı", "İ": "i"})


def turkish_lower(value: str) -> str:
    """Lowercase ``value`` honouring the dotted/dotless i distinction."""
    return value.translate(_TURKISH_LOWER).lower()


def _letter_rank(char: str) -> tuple[int, int | str]:
    rank = _ALPHABET_RANK.get(char)
    if rank is not None:
        return (0, rank)
    # Circumflexed vowels (â, î, û) collate with their base letter.
    base = "".join(c for c in unicodedata.normalize("NFD", char) if not unicodedata.combining(c))
    rank = _ALPHABET_RANK.get(base)
    if rank is not None:
        return (0, rank)
    return (1, char)


def turkish_sort_key(value: str) -> tuple[tuple[tuple[int, int | str], ...], str]:
    """Return a collation key ordering strings by the Turkish alphabet.

    Accented forms of Turkish letters sort with the plain letter and only
    break ties against it. Letters outside the alphabet (digits, punctuation,
    foreign letters) sort after every Turkish letter, ordered by code point
    among themselves.
    """
    lowered = unicodedata.normalize("NFC", turkish_lower(value))
    return tuple(_letter_rank(char) for char in lowered), lowered


@dataclass(frozen=True)
class Province:
    code: str
    name: str


@dataclass(frozen=True)
class District:
    code: str
    name: str
    province_code: str


@dataclass(frozen=True)
class Neighbourhood:
    name: str
    district_code: str
    province_code: str


def _read_fixture(path: Path) -> list[dict[str, Any]]:
    if not path.exists():
        logger.warning("Location fixture %s not found; serving an empty list", path)
        return []
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Could not load location fixture %s: %s", path, exc)
        return []
    if not isinstance(data, list):
        logger.warning("Location fixture %s is not a JSON array; ignoring it", path)
        return []
    return data


class LocationService:
    """Read-only lookup over the bundled location fixtures."""

    def __init__(
        self,
        provinces: tuple[Province, ...],
        districts: tuple[District, ...],
        neighbourhoods: tuple[Neighbourhood, ...],
    ) -> None:
        self._provinces = provinces
        self._districts = districts
        self._neighbourhoods = neighbourhoods

    @classmethod
    def from_directory(cls, data_dir: Path) -> LocationService:
        """Load ``provinces.json``, ``districts.json`` and ``neighbourhoods.json``."""
        provinces = tuple(
            Province(code=str(row["code"]), name=row["name"])
            for row in _read_fixture(data_dir / "provinces.json")
        )
        districts = tuple(
            District(
                code=str(row["code"]),
                name=row["name"],
                province_code=str(row["provinceCode"]),
            )
            for row in _read_fixture(data_dir / "districts.json")
        )
        neighbourhoods = tuple(
            Neighbourhood(
                name=row["name"],
                district_code=str(row["districtCode"]),
                province_code=str(row["provinceCode"]),
            )
            for row in _read_fixture(data_dir / "neighbourhoods.json")
        )
        logger.info(
            "Loaded %d provinces, %d districts, %d neighbourhoods from %s",
            len(provinces),
            len(districts),
            len(neighbourhoods),
            data_dir,
        )
        return cls(provinces, districts, neighbourhoods)

    def list_provinces(self) -> list[Province]:
        return sorted(self._provinces, key=lambda p: turkish_sort_key(p.name))

    def list_districts(self, province_code: str | None) -> list[District]:
        """Return districts of a province; empty when no code is given."""
        if not province_code:
            return []
        return sorted(
            (d for d in self._districts if d.province_code == province_code),
            key=lambda d: turkish_sort_key(d.name),
        )

    def list_neighbourhoods(
        self,
        province_code: str | None,
        district_code: str | None,
    ) -> list[Neighbourhood]:
        """Return neighbourhoods of a district; both codes are required."""
        if not province_code or not district_code:
            return []
        return sorted(
            (
                n
                for n in self._neighbourhoods
                if n.province_code == province_code and n.district_code == district_code
            ),
            key=lambda n: turkish_sort_key(n.name),
        )


@lru_cache(maxsize=1)
def get_location_service() -> LocationService:
    """Return the process-wide location service, loading fixtures on first use."""
    return LocationService.from_directory(Path(settings.locations_data_dir))
