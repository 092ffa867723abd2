"""Scheduler keeping track of the current point of interest in a tour."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from pathlib import Path

from tourbot.tour_storage import TourStorage

log = logging.getLogger(__name__)

GENERIC_POI_NAME = "___generic___"


class SchedulerComponent:
    """Selects the current point of interest among the tour's active ones."""

    def __init__(self, storage: TourStorage) -> None:
        self._storage = storage
        self._lock = threading.Lock()
        self._current_poi = 0
        self._current_action = 0
        self._current_command = ""

    @property
    def storage(self) -> TourStorage:
        """The storage holding the loaded tour."""
        return self._storage

    @classmethod
    def from_args(cls, argv: Sequence[str]) -> SchedulerComponent:
        """Build a scheduler from a tours file path and a tour name.

        Raises ValueError when either argument is missing and
        TourLoadError when the tour cannot be loaded.
        """
        args = list(argv)
        if len(args) < 2:
            raise ValueError("file path and tour name are required")
        path, tour_name = args[0], args[1]
        storage = TourStorage()
        storage.load_tour(Path(path) if path else path, tour_name)
        log.debug("SchedulerComponent::start")
        return cls(storage)

    def set_poi(self, poi_number: int) -> int:
        """Select a point of interest, wrapping around the active list.

        Returns the index that became current; ValueError if the tour
        has no active points of interest.
        """
        log.info("SchedulerComponent::SetPoi %d", poi_number)
        pois = self._storage.tour.active_tour_pois
        if not pois:
            raise ValueError("the loaded tour has no active points of interest")
        with self._lock:
            self._current_poi = poi_number % len(pois)
            current = self._current_poi
        log.info("Update Poi to: %d - %s", current, pois[current])
        return current

    def get_current_poi(self) -> int:
        """The index of the current point of interest."""
        with self._lock:
            current = self._current_poi
        log.info("SchedulerComponent::GetCurrentPoi number: %d", current)
        return current