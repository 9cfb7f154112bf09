from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DEFAULT_CSV = Path(__file__).resolve().parent.parent / "data" / "vehicles.csv"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Location of the vehicle-spec CSV loaded at startup.
    """

    csv_path: Path = field(
        default_factory=lambda: Path(os.getenv("EVSTORE_CATALOG_PATH", str(_DEFAULT_CSV)))
    )


DEFAULT_CATALOG_CONFIG = CatalogConfig()
