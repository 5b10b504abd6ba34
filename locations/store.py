"""
Purpose: Read-only store of the tour's points of interest.
What it does:
Loads the dataset ({"locations": [...]}) once through pandas, validates the
columns the core needs, and hands out Points by their stable index.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator, List, Sequence, Union

import pandas as pd
from loguru import logger

from .models import LocationRecord, Point

REQUIRED_COLUMNS = ("name", "lat", "lon")

# dataset key -> LocationRecord field
DISPLAY_COLUMNS = {
    "description": "description",
    "analysis": "analysis",
    "fieldNotes": "field_notes",
    "imageUrl": "image_url",
}


class LocationDataError(Exception):
    """Raised when the tour dataset cannot be turned into points."""
    pass


class LocationStore:
    """
    Ordered, read-only list of locations. Index == Point.index.
    """
    def __init__(self, records: Sequence[LocationRecord]):
        self._records: List[LocationRecord] = list(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[LocationRecord]:
        return iter(self._records)

    def __contains__(self, index: int) -> bool:
        return 0 <= index < len(self._records)

    def record(self, index: int) -> LocationRecord:
        # negative ids are not valid identities
        if index not in self:
            raise IndexError(f"No location with index {index} (loaded {len(self)})")
        return self._records[index]

    def point(self, index: int) -> Point:
        return self.record(index).point

    @property
    def points(self) -> List[Point]:
        return [record.point for record in self._records]

    @classmethod
    def from_frame(cls, frame: pd.DataFrame) -> LocationStore:
        missing = [column for column in REQUIRED_COLUMNS if column not in frame.columns]
        if missing:
            raise LocationDataError(f"Dataset is missing required columns: {', '.join(missing)}")

        frame = frame.reset_index(drop=True)
        try:
            frame["lat"] = frame["lat"].astype(float)
            frame["lon"] = frame["lon"].astype(float)
        except (TypeError, ValueError) as e:
            raise LocationDataError(f"Non-numeric coordinates in dataset: {e}") from e

        for column in DISPLAY_COLUMNS:
            if column not in frame.columns:
                frame[column] = ""
        frame = frame.fillna({column: "" for column in DISPLAY_COLUMNS})

        records = []
        for index, row in frame.iterrows():
            records.append(
                LocationRecord.new(
                    index=int(index),
                    name=str(row["name"]),
                    lat=row["lat"],
                    lon=row["lon"],
                    **{field: str(row[column]) for column, field in DISPLAY_COLUMNS.items()},
                )
            )
        return cls(records)


def load_location_store(source: Union[str, Path, dict]) -> LocationStore:
    """
    Load the tour dataset from a JSON file path or an already-parsed payload.

    The payload must look like {"locations": [ {name, lat, lon, ...}, ... ]}.
    """
    if isinstance(source, dict):
        payload = source
    else:
        path = Path(source)
        try:
            with path.open("r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise LocationDataError(f"Failed to load tour data from {path}: {e}") from e

    locations = payload.get("locations") if isinstance(payload, dict) else None
    if not locations:
        raise LocationDataError("Tour data has no 'locations' entries")

    store = LocationStore.from_frame(pd.DataFrame(locations))
    logger.info(f"Loaded {len(store)} locations")
    return store
