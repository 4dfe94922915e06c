"""Location lookup Pydantic schemas."""

from .common import APIModel


class ProvinceResponse(APIModel):
    code: str
    name: str


class DistrictResponse(APIModel):
    code: str
    name: str
    province_code: str


class NeighbourhoodResponse(APIModel):
    name: str
    district_code: str
    province_code: str
