"""Actions a robot can perform at a point of interest."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Kinds of action, with the names used in tour files."""

    SPEAK = 0
    DANCE = 1
    SIGNAL = 2
    INVALID = -1

    @property
    def json_value(self) -> str | None:
        """The value written to a tour file for this type."""
        return _TYPE_TO_JSON[self]

    @classmethod
    def from_json(cls, value: Any) -> ActionType:
        """Read a type from a tour file; anything unknown is INVALID."""
        for action_type, json_value in _TYPE_TO_JSON.items():
            if json_value == value and type(json_value) is type(value):
                return action_type
        return cls.INVALID


_TYPE_TO_JSON: dict[ActionType, str | None] = {
    ActionType.INVALID: None,
    ActionType.SPEAK: "speak",
    ActionType.DANCE: "dance",
    ActionType.SIGNAL: "signal",
}


def _require(data: Any, key: str) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    if key not in data:
        raise ValueError(f"missing key {key!r}")
    return data[key]


@dataclass(frozen=True)
class Action:
    """A single action; the default instance is an invalid action."""

    type: ActionType = ActionType.INVALID
    is_blocking: bool = True
    param: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Action:
        """Build an action from its tour-file object."""
        raw_type = _require(data, "m_type")
        is_blocking = _require(data, "m_isBlocking")
        param = _require(data, "m_param")
        if not isinstance(is_blocking, bool):
            raise ValueError("m_isBlocking must be a boolean")
        if not isinstance(param, str):
            raise ValueError("m_param must be a string")
        return cls(ActionType.from_json(raw_type), is_blocking, param)

    def to_dict(self) -> dict[str, Any]:
        """The tour-file object for this action."""
        return {
            "m_type": self.type.json_value,
            "m_isBlocking": self.is_blocking,
            "m_param": self.param,
        }