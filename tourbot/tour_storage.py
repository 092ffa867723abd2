"""Loading tours from JSON files."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from tourbot.tour import Tour

log = logging.getLogger(__name__)


class TourLoadError(ValueError):
    """A tour file could not be read or did not hold the requested tour."""


def read_json_file(path: str | Path) -> Any:
    """Parse a JSON file, keeping key order; TourLoadError if unreadable or empty."""
    log.info("Reading file: %s", path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise TourLoadError(f"failed to open file {path}") from exc
    if text == "":
        raise TourLoadError(f"file {path} is empty")
    return json.loads(text)


def write_json_file(data: Any, path: str | Path) -> None:
    """Write data as JSON indented by four spaces."""
    Path(path).write_text(json.dumps(data, indent=4), encoding="utf-8")


@dataclass
class TourStorage:
    """Holds the tour loaded from a tours file."""

    tour: Tour = field(default_factory=Tour)

    def load_tour(self, path: str | Path, tour_name: str) -> Tour:
        """Load the named tour from a file of tours and keep it."""
        if str(path) == "":
            raise TourLoadError("no tours file given")
        data = read_json_file(path)
        if data is None:
            raise TourLoadError(f"file {path} holds no tours")
        if not isinstance(data, dict):
            raise TourLoadError(f"file {path} must hold an object of tours")
        try:
            tours = {name: Tour.from_dict(item) for name, item in data.items()}
        except ValueError as exc:
            raise TourLoadError(f"invalid tour in {path}: {exc}") from exc
        log.info("Loading tour: %s", tour_name)
        if tour_name not in tours:
            raise TourLoadError(f"tour {tour_name!r} not found")
        self.tour = tours[tour_name]
        log.info("Tour loaded")
        return self.tour