import json

import pytest

from tourbot.scheduler import SchedulerComponent
from tourbot.tour_storage import TourLoadError


def _write_tours(tmp_path, active):
    data = {
        "museum": {
            "m_availablePoIs": {"en-US": {}},
            "m_activeTourPoIs": active,
        }
    }
    path = tmp_path / "tours.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_from_args_loads_tour(tmp_path):
    path = _write_tours(tmp_path, ["a", "b", "c"])
    scheduler = SchedulerComponent.from_args([str(path), "museum"])
    assert scheduler.storage.tour.active_tour_pois == ["a", "b", "c"]


def test_initial_poi_is_zero(tmp_path):
    path = _write_tours(tmp_path, ["a", "b"])
    scheduler = SchedulerComponent.from_args([str(path), "museum"])
    assert scheduler.get_current_poi() == 0


def test_set_poi_within_range(tmp_path):
    path = _write_tours(tmp_path, ["a", "b", "c"])
    scheduler = SchedulerComponent.from_args([str(path), "museum"])
    assert scheduler.set_poi(2) == 2
    assert scheduler.get_current_poi() == 2


def test_set_poi_wraps_to_start(tmp_path):
    pois = ["a", "b", "c"]
    path = _write_tours(tmp_path, pois)
    scheduler = SchedulerComponent.from_args([str(path), "museum"])
    assert scheduler.set_poi(len(pois)) == 0


def test_set_poi_always_in_range(tmp_path):
    pois = ["a", "b", "c", "d"]
    path = _write_tours(tmp_path, pois)
    scheduler = SchedulerComponent.from_args([str(path), "museum"])
    for number in range(20):
        assert 0 <= scheduler.set_poi(number) < len(pois)


def test_set_poi_empty_tour(tmp_path):
    path = _write_tours(tmp_path, [])
    scheduler = SchedulerComponent.from_args([str(path), "museum"])
    with pytest.raises(ValueError):
        scheduler.set_poi(1)


def test_missing_arguments():
    with pytest.raises(ValueError):
        SchedulerComponent.from_args(["only_path.json"])


def test_unknown_tour(tmp_path):
    path = _write_tours(tmp_path, ["a"])
    with pytest.raises(TourLoadError):
        SchedulerComponent.from_args([str(path), "nowhere"])


def test_missing_file(tmp_path):
    with pytest.raises(TourLoadError):
        SchedulerComponent.from_args([str(tmp_path / "absent.json"), "museum"])