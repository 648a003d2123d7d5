"""Resolves stop search names to upstream stations."""

import logging

from r7_delays.domain.models.station_match import StationMatch
from r7_delays.domain.ports.transit_api import TransitApi

logger = logging.getLogger(__name__)

PREFERRED_KINDS = ("stop", "station")


class StationResolver:
    """Best-effort mapping of search names to StationMatch, cached per search string."""

    def __init__(self, transit_api: TransitApi, candidate_limit: int = 5) -> None:
        """Initialize with the upstream API and the number of candidates to consider."""
        self._transit_api = transit_api
        self._candidate_limit = candidate_limit
        # Unbounded: the stop list is small and fixed
        self._cache: dict[str, StationMatch] = {}

    async def find_station(self, search_name: str) -> StationMatch | None:
        """Find the station for a search name, or None if it cannot be resolved."""
        cached = self._cache.get(search_name)
        if cached is not None:
            return cached

        try:
            candidates = await self._transit_api.search_locations(
                search_name, results=self._candidate_limit
            )
        except Exception as e:
            logger.error(f"Error searching for station '{search_name}': {e}")
            return None

        if not candidates:
            logger.debug(f"No station candidates for '{search_name}'")
            return None

        station = self.select_best_match(candidates)
        self._cache[search_name] = station
        return station

    @staticmethod
    def select_best_match(candidates: list[StationMatch]) -> StationMatch:
        """Prefer the first stop or station, falling back to the first candidate."""
        for candidate in candidates:
            if candidate.kind in PREFERRED_KINDS:
                return candidate
        return candidates[0]
