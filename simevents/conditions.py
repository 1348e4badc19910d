"""Event conditions: predicates over an event header and its JSON payload."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(frozen=True)
class EventInfo:
    """Header of a simulator event."""

    event: str
    seq: int
    uid: int
    handle: int


def _json_equal(a: Any, b: Any) -> bool:
    """Compare two JSON values, keeping booleans distinct from numbers."""
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(_json_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(_json_equal(a[k], b[k]) for k in a)
    if isinstance(a, (list, dict)) or isinstance(b, (list, dict)):
        return False
    return a == b


def _has_field(data: Any, field_name: str) -> bool:
    return isinstance(data, dict) and field_name in data


class Condition(ABC):
    """A predicate deciding whether an event is of interest."""

    @abstractmethod
    def matches(self, info: EventInfo, data: Any) -> bool:
        """Return True if the event matches this condition."""


class And(Condition):
    """Matches when every sub-condition matches."""

    def __init__(self, conditions: Iterable[Condition]) -> None:
        self.conditions = tuple(conditions)

    def matches(self, info: EventInfo, data: Any) -> bool:
        return all(c.matches(info, data) for c in self.conditions)


class Or(Condition):
    """Matches when at least one sub-condition matches."""

    def __init__(self, conditions: Iterable[Condition]) -> None:
        self.conditions = tuple(conditions)

    def matches(self, info: EventInfo, data: Any) -> bool:
        return any(c.matches(info, data) for c in self.conditions)


class Not(Condition):
    """Negates a sub-condition."""

    def __init__(self, condition: Condition) -> None:
        self.condition = condition

    def matches(self, info: EventInfo, data: Any) -> bool:
        return not self.condition.matches(info, data)


class Event(Condition):
    """Matches events of a given type."""

    def __init__(self, event_type: str) -> None:
        self.event_type = event_type

    def matches(self, info: EventInfo, data: Any) -> bool:
        return info.event == self.event_type


class Handles(Condition):
    """Matches events concerning one of the given object handles."""

    def __init__(self, handles: Iterable[int]) -> None:
        self.handles = tuple(handles)

    def matches(self, info: EventInfo, data: Any) -> bool:
        return info.handle in self.handles


class UIDs(Condition):
    """Matches events concerning one of the given unique ids."""

    def __init__(self, uids: Iterable[int]) -> None:
        self.uids = tuple(uids)

    def matches(self, info: EventInfo, data: Any) -> bool:
        return info.uid in self.uids


class Has(Condition):
    """Matches events whose payload contains a field."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name

    def matches(self, info: EventInfo, data: Any) -> bool:
        return _has_field(data, self.field_name)


class Eq(Condition):
    """Matches events whose payload field equals a value."""

    def __init__(self, field_name: str, field_value: Any) -> None:
        self.field_name = field_name
        self.field_value = field_value

    def matches(self, info: EventInfo, data: Any) -> bool:
        if not _has_field(data, self.field_name):
            return False
        return _json_equal(data[self.field_name], self.field_value)


class ChildrenMonitor(Condition):
    """Matches events that change the set of children of a parent object."""

    def __init__(self, parent_handle: int, children: Iterable[int]) -> None:
        self.parent_handle = parent_handle
        self.children = tuple(children)

    def matches(self, info: EventInfo, data: Any) -> bool:
        match_handle = info.handle in self.children
        has_parent = _has_field(data, "parentHandle")
        match_parent = has_parent and int(data["parentHandle"]) == self.parent_handle
        return (
            (info.event in ("objectAdded", "objectChanged") and match_parent)
            or (info.event == "objectRemoved" and match_handle)
            or (info.event == "objectChanged" and match_handle and has_parent)
        )