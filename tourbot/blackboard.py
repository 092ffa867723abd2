"""A shared store of integer values keyed by point-of-interest number."""

from __future__ import annotations

import logging
import threading

log = logging.getLogger(__name__)

FIELD_PREFIX = "PoiDone"


def field_key(field_name: int | str) -> str:
    """The blackboard key for a field name."""
    return FIELD_PREFIX + str(field_name)


class BlackboardComponent:
    """Thread-safe integer blackboard."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ints: dict[str, int] = {}

    def get_int(self, field_name: int | str) -> int:
        """The value stored for a field; KeyError if missing or unnamed."""
        key = field_key(field_name)
        with self._lock:
            log.info("GetInt Request: %s translation %s", field_name, key)
            if key == FIELD_PREFIX:
                raise KeyError("missing required field name")
            if key not in self._ints:
                raise KeyError(f"field {key!r} not found")
            value = self._ints[key]
        log.info("GetInt: %s %d", key, value)
        return value

    def set_int(self, field_name: int | str, value: int) -> None:
        """Store a value for a field, overwriting any earlier one."""
        key = field_key(field_name)
        with self._lock:
            log.info("SetInt Request: %s translation %s", field_name, key)
            if key == FIELD_PREFIX:
                log.warning("SetInt: missing required field name")
                return
            if key in self._ints:
                log.info("SetInt: field already present, overwriting")
            self._ints[key] = value
        log.info("SetInt: %s %d", key, value)