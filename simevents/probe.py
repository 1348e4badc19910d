"""A probe pairs a condition with a callback fired on matching events."""

from __future__ import annotations

from typing import Any, Callable, Optional

from simevents.conditions import Condition, EventInfo

ProbeCallback = Callable[["Probe", dict], None]


class Probe:
    """Calls its callback with the event header and payload when its condition matches."""

    def __init__(self, callback: ProbeCallback, condition: Optional[Condition]) -> None:
        self.callback = callback
        self.condition = condition

    def on_event(self, info: EventInfo, data: Any) -> None:
        """Dispatch an event to the callback if the condition matches."""
        if self.condition is not None and self.condition.matches(info, data):
            self.callback(
                self,
                {
                    "event": info.event,
                    "seq": info.seq,
                    "uid": info.uid,
                    "handle": info.handle,
                    "data": data,
                },
            )

    def set_condition(self, condition: Optional[Condition]) -> Optional[Condition]:
        """Replace the condition and return the previous one."""
        old, self.condition = self.condition, condition
        return old