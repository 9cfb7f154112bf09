from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from pathlib import Path
from typing import List

import pandas as pd

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Catalog, VehicleSpec

logger = logging.getLogger(__name__)

CATALOG_COLUMNS: List[str] = [
    "Model",
    "Variant",
    "Base Price (USD)",
    "Range (mi)",
    "Top Speed (mph)",
    "0-60 mph (sec)",
    "Energy Consumption (Wh/mi)",
    "Seating Capacity",
    "Body Type",
    "Towing Capacity (lbs)",
    "Full Self Driving Available",
    "Drive Type",
    "Warranty Years/Warranty Miles",
]

# Drive type and warranty are display-only
REQUIRED_COLUMNS: List[str] = CATALOG_COLUMNS[:-2]

NOT_APPLICABLE = "NA"


class CatalogRecordParseError(ValueError):
    """A single catalog row could not be converted into a ``VehicleSpec``."""


def _text(row: Mapping[str, str], column: str) -> str:
    value = row.get(column)
    if value is None or pd.isna(value):
        return ""
    return str(value).strip()


def _parse_int(row: Mapping[str, str], column: str) -> int:
    raw = _text(row, column).replace(",", "")
    try:
        value = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        raise CatalogRecordParseError(f"{column!r} is not numeric: {raw!r}") from None
    if value < 0:
        raise CatalogRecordParseError(f"{column!r} is negative: {value}")
    return value


def _parse_float(row: Mapping[str, str], column: str) -> float:
    raw = _text(row, column)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise CatalogRecordParseError(f"{column!r} is not numeric: {raw!r}") from None
    if not math.isfinite(value):
        raise CatalogRecordParseError(f"{column!r} is not finite: {raw!r}")
    if value < 0:
        raise CatalogRecordParseError(f"{column!r} is negative: {value}")
    return value


def _parse_seating(row: Mapping[str, str]) -> tuple[int, ...]:
    # "5/7" means the variant can be configured with either seat count
    raw = _text(row, "Seating Capacity") or "5"
    try:
        options = tuple(int(part.strip()) for part in raw.split("/"))
    except ValueError:
        raise CatalogRecordParseError(f"'Seating Capacity' is not numeric: {raw!r}") from None
    if any(seats < 1 for seats in options):
        raise CatalogRecordParseError(f"'Seating Capacity' must be positive: {raw!r}")
    return options


def _parse_towing(row: Mapping[str, str]) -> int | None:
    raw = _text(row, "Towing Capacity (lbs)")
    if not raw or raw.upper() == NOT_APPLICABLE:
        return None
    return _parse_int(row, "Towing Capacity (lbs)")


def parse_vehicle_row(row: Mapping[str, str]) -> VehicleSpec:
    """Convert one CSV row (column name -> raw text) into a ``VehicleSpec``."""
    model = _text(row, "Model")
    if not model:
        raise CatalogRecordParseError("'Model' is empty")

    return VehicleSpec(
        model_name=model,
        variant_name=_text(row, "Variant"),
        base_price_usd=_parse_int(row, "Base Price (USD)"),
        range_miles=_parse_int(row, "Range (mi)"),
        top_speed_mph=_parse_int(row, "Top Speed (mph)"),
        zero_to_sixty_seconds=_parse_float(row, "0-60 mph (sec)"),
        energy_consumption_wh_per_mile=_parse_int(row, "Energy Consumption (Wh/mi)"),
        seating_options=_parse_seating(row),
        body_type=_text(row, "Body Type"),
        towing_capacity_lbs=_parse_towing(row),
        full_self_driving_available=_text(row, "Full Self Driving Available").lower() == "yes",
        drive_type=_text(row, "Drive Type"),
        warranty_summary=_text(row, "Warranty Years/Warranty Miles"),
    )


def _skip_bad_line(csv_path: Path):
    def _handler(fields: list[str]) -> None:
        logger.warning(
            "Skipping catalog row in %s: expected %d fields, saw %d: %s",
            csv_path.name, len(CATALOG_COLUMNS), len(fields), ",".join(fields),
        )
        return None

    return _handler


def load_catalog(path: Path | str | None = None, config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> Catalog:
    """
    Read the vehicle-spec CSV into a ``Catalog``.

    Malformed rows are logged and skipped. A missing, empty or unreadable file,
    or one without the required columns, yields an empty catalog.
    """
    csv_path = Path(path) if path is not None else config.csv_path
    if not csv_path.is_file():
        logger.error("Vehicle catalog not found: %s", csv_path)
        return Catalog()

    try:
        # Keep every cell as text so the "NA" towing sentinel is not turned into NaN
        df = pd.read_csv(
            csv_path,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            engine="python",
            on_bad_lines=_skip_bad_line(csv_path),
        )
    except pd.errors.EmptyDataError:
        logger.error("Vehicle catalog is empty: %s", csv_path)
        return Catalog()
    except pd.errors.ParserError as exc:
        logger.error("Vehicle catalog %s could not be parsed: %s", csv_path, exc)
        return Catalog()
    df.columns = [str(c).strip() for c in df.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        logger.error("Vehicle catalog %s is missing columns: %s", csv_path, ", ".join(missing))
        return Catalog()

    vehicles: list[VehicleSpec] = []
    for record_no, row in enumerate(df.to_dict(orient="records"), start=1):
        try:
            vehicles.append(parse_vehicle_row(row))
        except CatalogRecordParseError as exc:
            logger.warning("Skipping catalog record %d in %s: %s", record_no, csv_path.name, exc)

    logger.info("Loaded %d vehicles from %s", len(vehicles), csv_path)
    return Catalog(vehicles)
