from __future__ import annotations

import os

from src.app.services.path_finder_service import PathFinderService

DEFAULT_TIMEOUT_S = 10.0


def get_path_finder_service() -> PathFinderService:
    return PathFinderService()


def get_search_timeout_s() -> float | None:
    """Deadline for one path search, from PATHFINDER_TIMEOUT_S.

    Unset or blank uses the default; zero or a negative value disables it.
    """

    raw = (os.getenv("PATHFINDER_TIMEOUT_S") or "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_S

    value = float(raw)
    return value if value > 0 else None
