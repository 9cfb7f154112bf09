from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    try:
        value = int(os.getenv(name, default))
    except ValueError:
        value = default
    return max(minimum, value)


@dataclass(frozen=True)
class RecommendationConfig:
    top_n: int = field(default_factory=lambda: _env_int("EVSTORE_RECOMMEND_LIMIT", 3))
    history_limit: int = field(default_factory=lambda: _env_int("EVSTORE_HISTORY_LIMIT", 10))

    def __post_init__(self) -> None:
        object.__setattr__(self, "top_n", max(1, self.top_n))
        object.__setattr__(self, "history_limit", max(1, self.history_limit))


DEFAULT_RECOMMENDATION_CONFIG = RecommendationConfig()
