"""Registry of probes and children monitors, dispatching events per scene."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Any, Callable, Iterable

from simevents.conditions import ChildrenMonitor, EventInfo
from simevents.parser import parse
from simevents.probe import Probe


class UnknownProbeError(LookupError):
    """Raised when a probe handle is not registered."""


@dataclass
class _Entry:
    probe: Probe
    script_id: int
    scene_id: int


class ProbeRegistry:
    """Owns probes, routes events to them and removes them safely.

    get_children(parent_handle) returns the handles of the objects in the
    parent's tree; call_script(script_id, callback_name, payload) delivers a
    notification to a script.
    """

    def __init__(
        self,
        get_children: Callable[[int], Iterable[int]],
        call_script: Callable[[int, str, Any], Any],
    ) -> None:
        self._get_children = get_children
        self._call_script = call_script
        self._entries: dict[int, _Entry] = {}
        self._next_handle = count(1)
        self._dispatching = False
        self._delete_later: list[int] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, handle: object) -> bool:
        return handle in self._entries

    def _register(self, probe: Probe, script_id: int, scene_id: int) -> int:
        handle = next(self._next_handle)
        self._entries[handle] = _Entry(probe, script_id, scene_id)
        return handle

    def add_probe(self, script_id: int, scene_id: int, condition_json: Any, callback: str) -> int:
        """Register a probe for a JSON condition; return its handle."""
        condition = parse(condition_json)

        def notify(probe: Probe, event_data: dict) -> None:
            self._call_script(script_id, callback, event_data)

        return self._register(Probe(notify, condition), script_id, scene_id)

    def remove_probe(self, handle: int) -> None:
        """Remove a probe; during dispatch the removal is deferred."""
        if handle not in self._entries:
            raise UnknownProbeError(f"invalid probe handle: {handle!r}")
        if self._dispatching:
            self._delete_later.append(handle)
            return
        entry = self._entries.pop(handle)
        entry.probe.set_condition(None)

    def add_children_monitor(
        self, script_id: int, scene_id: int, parent_handle: int, callback: str
    ) -> int:
        """Watch the children of an object and notify the script when they change."""

        def children() -> list[int]:
            return list(self._get_children(parent_handle))

        def notify_children_changed() -> None:
            self._call_script(script_id, callback, children())

        def on_change(probe: Probe, event_data: dict) -> None:
            probe.set_condition(ChildrenMonitor(parent_handle, children()))
            notify_children_changed()

        probe = Probe(on_change, ChildrenMonitor(parent_handle, children()))
        # Notify immediately so scripts also react correctly to undo.
        notify_children_changed()
        return self._register(probe, script_id, scene_id)

    def on_script_destroyed(self, script_id: int) -> None:
        """Remove every probe owned by a script."""
        for handle in [h for h, e in self._entries.items() if e.script_id == script_id]:
            self.remove_probe(handle)

    def on_event(self, scene_id: int, info: EventInfo, data: Any) -> None:
        """Dispatch an event to the probes of a scene."""
        targets = [e.probe for e in self._entries.values() if e.scene_id == scene_id]
        self._dispatching = True
        try:
            for probe in targets:
                probe.on_event(info, data)
        finally:
            self._dispatching = False
            pending, self._delete_later = self._delete_later, []
            for handle in dict.fromkeys(pending):
                if handle in self._entries:
                    self.remove_probe(handle)