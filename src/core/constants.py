"""Core constants used across ReliefMap modules.

This module centralizes file names, column lists, and region defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path("data")
DATA_ROOT_ENV_VAR = "RELIEFMAP_DATA_ROOT"
REGION_FILE_ENV_VAR = "RELIEFMAP_REGION_FILE"

CASUALTIES_FILE_NAME = "casualties.csv"
INFRASTRUCTURE_FILE_NAME = "infrastructure.csv"
DISPLACEMENT_FILE_NAME = "displacement.csv"
DISPLACEMENT_EVENTS_FILE_NAME = "event_data_pse.csv"
EVENTS_METADATA_LINE_INDEX = 1

COORDINATE_COLUMNS = ("latitude", "longitude")
CASUALTY_NUMERIC_COLUMNS = (
    "killed",
    "injured",
    "children_killed",
    "women_killed",
    "latitude",
    "longitude",
)
INFRASTRUCTURE_NUMERIC_COLUMNS = (
    "hospitals_damaged",
    "schools_damaged",
    "homes_destroyed",
    "latitude",
    "longitude",
)
DISPLACEMENT_NUMERIC_COLUMNS = (
    "people_displaced",
    "displacement_centers",
    "capacity",
    "latitude",
    "longitude",
)
DISPLACEMENT_EVENT_NUMERIC_COLUMNS = ("latitude", "longitude", "figure", "year")

CASUALTY_CSV_COLUMNS = (
    "date",
    "killed",
    "injured",
    "children_killed",
    "women_killed",
    "latitude",
    "longitude",
    "location",
    "area",
    "source",
)

DEFAULT_REGION_NAME = "gaza-strip"
DEFAULT_TARGET_COUNTRY = "Palestine"
DEFAULT_SUBREGION_TOKEN = "gaza"
DEFAULT_FALLBACK_LOCATION = "Gaza Strip"
# (south, north, west, east)
DEFAULT_VALID_BOX = (31.0, 32.0, 34.0, 35.0)
DEFAULT_MAP_BOUNDS = (31.2, 31.6, 34.2, 34.5)
# name -> (latitude, longitude, area)
DEFAULT_GAZETTEER = {
    "Gaza": (31.5017, 34.4668, "North Gaza"),
    "Gaza City": (31.5017, 34.4668, "North Gaza"),
    "Khan Younis": (31.3469, 34.3044, "South Gaza"),
    "Rafah": (31.2948, 34.2492, "South Gaza"),
    "Deir al-Balah": (31.4181, 34.3517, "Central Gaza"),
    "Jabalia": (31.5314, 34.4831, "North Gaza"),
    "Gaza Strip": (31.4181, 34.3668, "Gaza Strip"),
}

CASUALTY_HEADER_KEYWORDS = ("killed", "death", "casualt")
DISPLACEMENT_HEADER_KEYWORDS = ("displac", "refugee", "idp")
KILLED_KEYWORDS = ("killed", "death", "fatal")
INJURED_KEYWORDS = ("injured", "wound")
DATE_FIELDS = ("date", "event_date", "data_date", "timestamp")
LOCATION_FIELDS = ("location", "admin1", "admin2", "region", "area", "place")

HTTP_OK = 200
HTTP_SERVER_ERROR = 500
