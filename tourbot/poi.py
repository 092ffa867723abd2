"""Points of interest and the commands available at each."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tourbot.actions import Action


@dataclass
class PoI:
    """A named point of interest mapping commands to action sequences."""

    name: str = ""
    available_actions: dict[str, list[Action]] = field(default_factory=dict)

    def is_command_valid(self, command: str) -> bool:
        """Whether the command is one of this point's keys."""
        return command in self.available_actions

    def get_actions(self, command: str) -> list[Action]:
        """The actions for a command; KeyError if the command is unknown."""
        if not self.is_command_valid(command):
            raise KeyError(f"command {command!r} not available at {self.name!r}")
        return list(self.available_actions[command])

    def available_commands(self) -> list[str]:
        """All commands known at this point."""
        return list(self.available_actions)

    def command_multiples_num(self, command: str) -> int:
        """How many commands contain the given text."""
        return sum(command in cmd for cmd in self.available_commands())

    @classmethod
    def from_dict(cls, data: Any) -> PoI:
        """Build a point of interest from its tour-file object."""
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        try:
            name = data["m_name"]
            raw_actions = data["m_availableActions"]
        except KeyError as exc:
            raise ValueError(f"missing key {exc.args[0]!r}") from None
        if not isinstance(name, str):
            raise ValueError("m_name must be a string")
        if not isinstance(raw_actions, dict):
            raise ValueError("m_availableActions must be an object")
        actions: dict[str, list[Action]] = {}
        for command, items in raw_actions.items():
            if not isinstance(items, list):
                raise ValueError(f"actions for {command!r} must be a list")
            actions[command] = [Action.from_dict(item) for item in items]
        return cls(name, actions)

    def to_dict(self) -> dict[str, Any]:
        """The tour-file object for this point."""
        return {
            "m_name": self.name,
            "m_availableActions": {
                command: [action.to_dict() for action in actions]
                for command, actions in self.available_actions.items()
            },
        }