import pytest

from simevents.conditions import (
    And,
    ChildrenMonitor,
    Condition,
    Eq,
    Event,
    EventInfo,
    Handles,
    Has,
    Not,
    Or,
    UIDs,
)


def info(event="objectChanged", seq=1, uid=100, handle=5):
    return EventInfo(event=event, seq=seq, uid=uid, handle=handle)


class Const(Condition):
    def __init__(self, value):
        self.value = value

    def matches(self, info, data):
        return self.value


def test_condition_is_abstract():
    with pytest.raises(TypeError):
        Condition()


@pytest.mark.parametrize(
    "values, expected",
    [([True, True], True), ([True, False], False), ([False], False), ([], True)],
)
def test_and(values, expected):
    assert And(Const(v) for v in values).matches(info(), {}) is expected


@pytest.mark.parametrize(
    "values, expected",
    [([False, True], True), ([False, False], False), ([True], True), ([], False)],
)
def test_or(values, expected):
    assert Or(Const(v) for v in values).matches(info(), {}) is expected


def test_not():
    assert Not(Const(True)).matches(info(), {}) is False
    assert Not(Const(False)).matches(info(), {}) is True


def test_event():
    assert Event("objectAdded").matches(info(event="objectAdded"), {})
    assert not Event("objectAdded").matches(info(event="objectRemoved"), {})


def test_handles():
    assert Handles([1, 5, 9]).matches(info(handle=5), {})
    assert not Handles([1, 9]).matches(info(handle=5), {})
    assert not Handles([]).matches(info(handle=5), {})


def test_uids():
    assert UIDs([100]).matches(info(uid=100), {})
    assert not UIDs([101]).matches(info(uid=100), {})


def test_has():
    assert Has("name").matches(info(), {"name": "cube"})
    assert not Has("name").matches(info(), {"other": 1})
    assert not Has("name").matches(info(), [1, 2])


def test_eq():
    assert Eq("name", "cube").matches(info(), {"name": "cube"})
    assert not Eq("name", "cube").matches(info(), {"name": "sphere"})
    assert not Eq("name", "cube").matches(info(), {})
    assert Eq("pos", [1, 2, 3]).matches(info(), {"pos": [1, 2, 3]})
    assert Eq("opt", {"a": 1}).matches(info(), {"opt": {"a": 1}})


def test_eq_distinguishes_bool_from_number():
    assert not Eq("flag", True).matches(info(), {"flag": 1})
    assert Eq("flag", True).matches(info(), {"flag": True})


def test_children_monitor_added_with_parent():
    cm = ChildrenMonitor(10, [5])
    assert cm.matches(info(event="objectAdded", handle=7), {"parentHandle": 10})
    assert not cm.matches(info(event="objectAdded", handle=7), {"parentHandle": 11})
    assert not cm.matches(info(event="objectAdded", handle=7), {})


def test_children_monitor_removed_child():
    cm = ChildrenMonitor(10, [5])
    assert cm.matches(info(event="objectRemoved", handle=5), {})
    assert not cm.matches(info(event="objectRemoved", handle=6), {})


def test_children_monitor_child_reparented():
    cm = ChildrenMonitor(10, [5])
    assert cm.matches(info(event="objectChanged", handle=5), {"parentHandle": 20})
    assert not cm.matches(info(event="objectChanged", handle=5), {"name": "x"})
    assert cm.matches(info(event="objectChanged", handle=8), {"parentHandle": 10})