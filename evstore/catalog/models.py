from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class VehicleSpec:
    """One purchasable vehicle variant, as listed in the catalog CSV."""

    model_name: str
    variant_name: str
    base_price_usd: int
    range_miles: int
    top_speed_mph: int
    zero_to_sixty_seconds: float
    energy_consumption_wh_per_mile: int
    seating_options: tuple[int, ...]
    body_type: str
    towing_capacity_lbs: int | None  # None when towing is not applicable
    full_self_driving_available: bool
    drive_type: str = ""
    warranty_summary: str = ""

    @property
    def effective_seats(self) -> int:
        """Largest seat count among the configurable seating layouts."""
        return max(self.seating_options)

    @property
    def seating_label(self) -> str:
        return "/".join(str(s) for s in self.seating_options)

    @property
    def display_name(self) -> str:
        return f"{self.model_name} {self.variant_name}"


class Catalog:
    """Read-only, ordered collection of vehicle specs."""

    __slots__ = ("_vehicles",)

    def __init__(self, vehicles: Iterable[VehicleSpec] = ()) -> None:
        self._vehicles: tuple[VehicleSpec, ...] = tuple(vehicles)

    def __iter__(self) -> Iterator[VehicleSpec]:
        return iter(self._vehicles)

    def __len__(self) -> int:
        return len(self._vehicles)

    def __getitem__(self, index: int) -> VehicleSpec:
        return self._vehicles[index]

    def __repr__(self) -> str:
        return f"Catalog({len(self._vehicles)} vehicles)"

    def models(self) -> list[str]:
        """Distinct model names in first-seen order."""
        return list(dict.fromkeys(v.model_name for v in self._vehicles))
