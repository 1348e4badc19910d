# simevents

Subscribe callbacks to scene events and filter them with small, composable
conditions written as JSON-style lists.

## Installation

```
pip install simevents
```

The package has no runtime dependencies.

## Conditions

A condition is a list whose first item names its type:

| Expression                    | Matches when                                          |
|-------------------------------|-------------------------------------------------------|
| `["event", "objectAdded"]`    | the event type equals the given string                |
| `["handles", [12, 15]]`       | the event's object handle is in the list              |
| `["uids", [1001, 1002]]`      | the event's object uid is in the list                 |
| `["has", "name"]`             | the event data is an object containing the field      |
| `["eq", "name", "Cuboid"]`    | the event data field equals the value                 |
| `["and", c1, c2, ...]`        | every sub-condition matches                           |
| `["or", c1, c2, ...]`         | at least one sub-condition matches                    |
| `["not", c]`                  | the sub-condition does not match                      |

`eq` compares values the JSON way: `true` is not equal to `1`, and lists and
objects are compared item by item.

Turn an expression into a condition object with `simevents.parser.parse`; a
malformed expression raises `ConditionError` (a `ValueError`).
`parse_list(expr, start, end)` parses the slice `expr[start:end]` into a list
of conditions.

```python
from simevents.conditions import EventInfo
from simevents.parser import parse

cond = parse(["and", ["event", "objectChanged"], ["has", "pose"]])
info = EventInfo(event="objectChanged", seq=7, uid=1001, handle=12)
cond.matches(info, {"pose": [0, 0, 0]})   # True
```

The condition classes (`Condition`, `And`, `Or`, `Not`, `Event`, `Handles`,
`UIDs`, `Has`, `Eq`, `ChildrenMonitor`) and the `EventInfo` header live in
`simevents.conditions` and can also be built directly.
`ChildrenMonitor(parent_handle, children)` matches events that add, remove or
re-parent children of the given parent.

## Probes

A `Probe` (in `simevents.probe`) pairs a condition with a callback. When an
event matches, the callback receives the probe and a dictionary with the keys
`event`, `seq`, `uid`, `handle` and `data`. A probe whose condition is `None`
never fires. `Probe.set_condition` swaps the condition and returns the
previous one.

## Registry

`ProbeRegistry` (in `simevents.registry`) owns probes per script and per scene:

```python
from simevents.conditions import EventInfo
from simevents.registry import ProbeRegistry

def get_children(parent_handle):
    return [...]            # handles of the objects below parent_handle

def call_script(script_id, function_name, payload):
    ...                     # deliver payload to the named script function

registry = ProbeRegistry(get_children, call_script)
handle = registry.add_probe(script_id=1, scene_id=0,
                            condition_json=["event", "objectAdded"],
                            callback="onObjectAdded")

info = EventInfo(event="objectAdded", seq=1, uid=1001, handle=12)
registry.on_event(0, info, {"name": "Cuboid"})   # calls call_script(1, "onObjectAdded", {...})
registry.remove_probe(handle)
```

- `add_probe` returns an integer handle; `handle in registry` and
  `len(registry)` report what is registered.
- `add_children_monitor(script_id, scene_id, parent_handle, callback)`
  watches the children of an object and calls the script with the list of
  current child handles once at creation and again whenever they change.
- `on_script_destroyed(script_id)` removes every probe owned by a script.
- `on_event(scene_id, info, data)` delivers an event only to the probes of
  that scene.
- Removing a probe from inside a callback is deferred until the current
  event has been delivered to every probe.
- Unknown handles raise `UnknownProbeError` (a `LookupError`).

## What it does not do

simevents does not connect to a simulator on its own. The host application
feeds it events through `ProbeRegistry.on_event` and supplies the two
functions that look up an object's children and deliver payloads to scripts.

## Running the tests

```
pip install simevents[test]
pytest
```