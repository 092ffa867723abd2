"""Behaviour-tree leaves that delegate their ticks to remote skills."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from enum import Enum

log = logging.getLogger(__name__)

MONITOR_SUFFIX = "_mon"
FLIP_FLOP_PERIOD = 30


class NodeStatus(Enum):
    """Result of ticking a behaviour-tree node."""

    IDLE = 0
    RUNNING = 1
    SUCCESS = 2
    FAILURE = 3


class SkillStatus(Enum):
    """Status codes returned by skills."""

    SUCCESS = 0
    FAILURE = 1
    RUNNING = 2


def provided_ports() -> tuple[str, ...]:
    """Input ports understood by the skill leaves."""
    return ("interface", "isMonitored")


def _monitor_suffix(name: str, ports: Mapping[str, str]) -> str:
    if "isMonitored" not in ports:
        raise ValueError(f"node {name!r} is missing the required port 'isMonitored'")
    return MONITOR_SUFFIX if ports["isMonitored"] == "true" else ""


def _as_skill_status(code: int | None) -> SkillStatus | None:
    if code is None:
        return None
    try:
        return SkillStatus(code)
    except ValueError:
        return None


TickCall = Callable[[str], "int | None"]
HaltCall = Callable[[str], bool]


class SkillAction:
    """An action leaf that asks a skill service for its status on each tick.

    ``send_tick`` is called with the tick service name and returns the
    skill's status code, or None when the call could not be completed.
    ``send_halt`` is called with the halt service name and returns whether
    the request was completed; it is retried until it is.
    """

    def __init__(
        self,
        name: str,
        ports: Mapping[str, str],
        send_tick: TickCall,
        send_halt: HaltCall,
    ) -> None:
        self.name = name
        self.interface = ports.get("interface")
        suffix = _monitor_suffix(name, ports)
        self.tick_service = f"{name}Skill/tick{suffix}"
        self.halt_service = f"{name}Skill/halt{suffix}"
        self._send_tick = send_tick
        self._send_halt = send_halt
        self._lock = threading.Lock()
        log.info("name %s suffixmonitor %s", name, suffix)

    def send_tick_to_skill(self) -> int:
        """Send one tick; failure code if the skill did not answer."""
        log.info("sending tick to %s", self.name)
        code = self._send_tick(self.tick_service)
        return SkillStatus.FAILURE.value if code is None else code

    def tick(self) -> NodeStatus:
        """Tick the skill and translate its answer."""
        with self._lock:
            log.info("Node %s sending tick to skill", self.name)
            status = _as_skill_status(self.send_tick_to_skill())
        if status is SkillStatus.RUNNING:
            return NodeStatus.RUNNING
        if status is SkillStatus.SUCCESS:
            return NodeStatus.SUCCESS
        return NodeStatus.FAILURE

    def halt(self) -> int:
        """Send halt until the skill acknowledges it; returns the attempts made."""
        attempts = 0
        while True:
            attempts += 1
            log.info("Node %s sending halt to skill", self.name)
            if self._send_halt(self.halt_service):
                return attempts


class SkillCondition:
    """A condition leaf that asks a skill service whether it holds."""

    def __init__(
        self,
        name: str,
        ports: Mapping[str, str],
        send_tick: TickCall,
    ) -> None:
        self.name = name
        self.interface = ports.get("interface")
        suffix = _monitor_suffix(name, ports)
        self.tick_service = f"{name}Skill/tick{suffix}"
        self._send_tick = send_tick
        self._lock = threading.Lock()
        log.info("name %s suffixmonitor %s", name, suffix)

    def send_tick_to_skill(self) -> int:
        """Send one tick; failure code if the skill did not answer."""
        with self._lock:
            code = self._send_tick(self.tick_service)
        return SkillStatus.FAILURE.value if code is None else code

    def tick(self) -> NodeStatus:
        """Succeed only when the skill reports success."""
        log.info("Node %s sending tick to skill", self.name)
        status = _as_skill_status(self.send_tick_to_skill())
        if status is SkillStatus.SUCCESS:
            return NodeStatus.SUCCESS
        return NodeStatus.FAILURE


class FlipFlopCondition:
    """Holds for a fixed number of ticks, then fails once and starts over."""

    registration_id = "FlipFlopCondition"

    def __init__(self, name: str, period: int = FLIP_FLOP_PERIOD) -> None:
        self.name = name
        self._period = period
        self._count = 0

    def tick(self) -> NodeStatus:
        """Success for ``period`` ticks, then one failure."""
        count = self._count
        self._count += 1
        if count < self._period:
            log.info("condition true")
            return NodeStatus.SUCCESS
        self._count = 0
        log.info("condition false")
        return NodeStatus.FAILURE


class AlwaysRunning:
    """An action that never finishes."""

    registration_id = "AlwaysRunning"

    def __init__(self, name: str) -> None:
        self.name = name
        self.halt_count = 0

    def tick(self) -> NodeStatus:
        """Always running."""
        log.info("Action Ticked")
        return NodeStatus.RUNNING

    def halt(self) -> None:
        """Record the halt."""
        log.info("Action halted")
        self.halt_count += 1