"""Static enrichment tables for MDU rows."""

from __future__ import annotations

UNKNOWN_PROVINCE = "Unknown"

PROVINCES: dict[int, str] = {
    1: "Alberta",
    2: "British Columbia",
    3: "Manitoba",
    4: "Ontario",
    5: "Quebec",
    6: "Saskatchewan",
    7: "New Brunswick",
    8: "Nova Scotia",
    9: "Prince Edward Island",
    10: "Newfoundland and Labrador",
}

# Empty code means the licence PDF is attached to the entry out of band.
FILE_TYPES: dict[str, str] = {
    "1": "One-page Building Access Licence Template",
    "2": "Two-page Building Access Licence Template",
    "3": "This Building Access Licence is available upon request",
    "": "PDF Attached",
}


def province_name(province_id: int) -> str:
    return PROVINCES.get(province_id, UNKNOWN_PROVINCE)


def file_type_description(code: str) -> str:
    return FILE_TYPES.get(code, "")
