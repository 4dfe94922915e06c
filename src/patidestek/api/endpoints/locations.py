"""Read-only Turkish location lookup endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from patidestek.schemas.location import DistrictResponse, NeighbourhoodResponse, ProvinceResponse
from patidestek.services.locations import (
    District,
    LocationService,
    Neighbourhood,
    Province,
    get_location_service,
)

router = APIRouter(prefix="/locations", tags=["locations"])


def get_location_service_dep() -> LocationService:
    """Return the shared location service."""
    return get_location_service()


LocationServiceDep = Annotated[LocationService, Depends(get_location_service_dep)]


@router.get("/provinces", response_model=list[ProvinceResponse])
async def list_provinces(locations: LocationServiceDep) -> list[Province]:
    return locations.list_provinces()


@router.get("/districts", response_model=list[DistrictResponse])
async def list_districts(
    locations: LocationServiceDep,
    province_code: str | None = Query(None, alias="provinceCode"),
) -> list[District]:
    """Districts of a province; an empty list when no province is given."""
    return locations.list_districts(province_code.strip() if province_code else None)


@router.get("/neighbourhoods", response_model=list[NeighbourhoodResponse])
async def list_neighbourhoods(
    locations: LocationServiceDep,
    province_code: str | None = Query(None, alias="provinceCode"),
    district_code: str | None = Query(None, alias="districtCode"),
) -> list[Neighbourhood]:
    """Neighbourhoods of a district; both codes are required for a non-empty result."""
    return locations.list_neighbourhoods(
        province_code.strip() if province_code else None,
        district_code.strip() if district_code else None,
    )
