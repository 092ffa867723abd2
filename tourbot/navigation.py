"""Navigation to points of interest as a preemptible goal server."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

log = logging.getLogger(__name__)

LOCATION_PREFIX = "sim_gam_"
NODE_PREFIX = "/NavigationComponentNode"
DEFAULT_PERIOD = 1.0


class NavigationStatus(Enum):
    """Navigation states reported to goal clients."""

    IDLE = 0
    PREPARING_BEFORE_MOVE = 1
    MOVING = 2
    WAITING_OBSTACLE = 3
    GOAL_REACHED = 4
    ABORTED = 5
    FAILING = 6
    PAUSED = 7
    THINKING = 8
    ERROR = 9


class GoalResponse(Enum):
    """Answer to a new goal request."""

    REJECT = 1
    ACCEPT_AND_EXECUTE = 2


class CancelResponse(Enum):
    """Answer to a cancel request."""

    REJECT = 1
    ACCEPT = 2


def poi_location_name(poi_number: int) -> str:
    """The map location name of a point of interest."""
    return LOCATION_PREFIX + str(poi_number)


_NAVIGATOR_NAMES = {
    "navigation_status_" + status.name.lower(): status for status in NavigationStatus
}


def convert_status(status: Any) -> NavigationStatus:
    """Map a navigator status to a NavigationStatus; anything unknown is ERROR.

    Accepts a NavigationStatus, its name, or the navigator's
    ``navigation_status_<name>`` form.
    """
    if isinstance(status, NavigationStatus):
        return status
    if isinstance(status, str):
        if status in _NAVIGATOR_NAMES:
            return _NAVIGATOR_NAMES[status]
        try:
            return NavigationStatus[status.upper()]
        except KeyError:
            return NavigationStatus.ERROR
    return NavigationStatus.ERROR


class Navigator(Protocol):
    """The navigation device driven by the component."""

    def goto_target_by_location_name(self, name: str) -> bool: ...

    def stop_navigation(self) -> bool: ...

    def get_navigation_status(self) -> Any | None: ...


@dataclass
class NavigationClientConfig:
    """Settings for opening the navigation client device."""

    device: str = "navigation2D_nwc_yarp"
    local: str = NODE_PREFIX + "/navClient"
    navigation_server: str = "/navigation2D_nws_yarp"
    map_locations_server: str = "/map2D_nws_yarp"
    localization_server: str = "/localization2D_nws_yarp"
    period: int = 5

    @classmethod
    def from_mapping(cls, group: Mapping[str, Any] | None) -> NavigationClientConfig:
        """Build settings from a NAVIGATION2D-CLIENT group; None gives defaults."""
        config = cls()
        if group is None:
            return config
        if "device" in group:
            config.device = str(group["device"])
        if "local-suffix" in group:
            config.local = NODE_PREFIX + str(group["local-suffix"])
        if "navigation_server" in group:
            config.navigation_server = str(group["navigation_server"])
        if "map_locations_server" in group:
            config.map_locations_server = str(group["map_locations_server"])
        if "localization_server" in group:
            config.localization_server = str(group["localization_server"])
        return config

    def to_properties(self) -> dict[str, Any]:
        """The property set used to open the device."""
        return {
            "device": self.device,
            "local": self.local,
            "navigation_server": self.navigation_server,
            "map_locations_server": self.map_locations_server,
            "localization_server": self.localization_server,
            "period": self.period,
        }


@dataclass(eq=False)
class GoalHandle:
    """A goal to reach a point of interest, with its feedback and outcome."""

    poi_number: int
    feedback: list[NavigationStatus] = field(default_factory=list)
    outcome: str | None = None
    result: bool | None = None
    _cancel_requested: bool = False
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def is_canceling(self) -> bool:
        """Whether a cancel was requested and the goal has not finished."""
        with self._lock:
            return self._cancel_requested and self.outcome is None

    @property
    def is_active(self) -> bool:
        """Whether the goal has not finished."""
        with self._lock:
            return self.outcome is None

    def _finish(self, outcome: str, is_ok: bool) -> None:
        with self._lock:
            if self.outcome is not None:
                raise RuntimeError(f"goal already {self.outcome}")
            self.outcome = outcome
            self.result = is_ok

    def abort(self, is_ok: bool) -> None:
        """Finish the goal as aborted."""
        self._finish("aborted", is_ok)

    def succeed(self, is_ok: bool) -> None:
        """Finish the goal as succeeded."""
        self._finish("succeeded", is_ok)

    def canceled(self, is_ok: bool) -> None:
        """Finish the goal as canceled."""
        self._finish("canceled", is_ok)

    def request_cancel(self) -> None:
        """Ask for the goal to be canceled."""
        with self._lock:
            self._cancel_requested = True

    def publish_feedback(self, status: NavigationStatus) -> None:
        """Record a feedback status."""
        with self._lock:
            self.feedback.append(status)


class NavigationComponent:
    """Drives a navigator to points of interest, one goal at a time."""

    def __init__(self, navigator: Navigator, period: float = DEFAULT_PERIOD) -> None:
        self._navigator = navigator
        self._period = period
        self._goal_lock = threading.Lock()
        self._active_goal: GoalHandle | None = None
        self._shutdown = threading.Event()

    @property
    def active_goal(self) -> GoalHandle | None:
        """The goal currently being executed."""
        with self._goal_lock:
            return self._active_goal

    def close(self) -> None:
        """Stop the component; running goals end without a result."""
        self._shutdown.set()

    def _running(self) -> bool:
        return not self._shutdown.is_set()

    def handle_goal(self, poi_number: int) -> GoalResponse:
        """Decide whether to accept a goal for a point of interest."""
        log.info("GoToPoi Action - Received goal request, poi_number: %d", poi_number)
        if poi_location_name(poi_number):
            return GoalResponse.ACCEPT_AND_EXECUTE
        return GoalResponse.REJECT

    def handle_cancel(self, goal_handle: GoalHandle) -> CancelResponse:
        """Accept every cancel request."""
        log.info("GoToPoi Action - Received request to cancel goal")
        return CancelResponse.ACCEPT

    def handle_accepted(self, goal_handle: GoalHandle) -> threading.Thread:
        """Preempt any running goal and execute the new one in the background."""
        with self._goal_lock:
            current = self._active_goal
            if current is not None and not current.is_canceling and current.is_active:
                log.info("Preempting the current goal")
                current.abort(False)
            self._active_goal = goal_handle
        thread = threading.Thread(target=self.execute, args=(goal_handle,), daemon=True)
        thread.start()
        return thread

    def _is_preempted(self, goal_handle: GoalHandle, poi_name: str) -> bool:
        with self._goal_lock:
            if goal_handle is not self._active_goal:
                log.info("This goal is preempted %s", poi_name)
                return True
        return False

    def _clear_active(self) -> None:
        with self._goal_lock:
            self._active_goal = None

    def execute(self, goal_handle: GoalHandle) -> None:
        """Drive the navigator until the goal is reached, canceled or fails."""
        log.info("GoToPoi Action - Executing goal")
        poi_name = poi_location_name(goal_handle.poi_number)
        if self._is_preempted(goal_handle, poi_name):
            return
        if not self._navigator.goto_target_by_location_name(poi_name):
            goal_handle.abort(False)
            log.info("Goal aborted")
            return

        status: Any = None
        while True:
            if self._is_preempted(goal_handle, poi_name):
                return
            if goal_handle.is_canceling:
                goal_handle.canceled(False)
                if self._navigator.stop_navigation():
                    log.info("Stop navigation")
                else:
                    log.info("Stop navigation failed")
                log.info("Goal canceled")
                self._clear_active()
                return
            if convert_status(status) in (NavigationStatus.ABORTED, NavigationStatus.IDLE):
                if not self._navigator.goto_target_by_location_name(poi_name):
                    goal_handle.abort(False)
                    log.info("Goal aborted")
                    return
            status = self._navigator.get_navigation_status()
            if status is None:
                log.info("Failed to get navigation status")
                return
            goal_handle.publish_feedback(convert_status(status))
            log.info("Publish feedback, poi= %s", poi_name)
            self._shutdown.wait(self._period)
            if not self._running() or convert_status(status) is NavigationStatus.GOAL_REACHED:
                break

        if self._running():
            goal_handle.succeed(True)
            log.info("Goal succeeded")
            self._clear_active()