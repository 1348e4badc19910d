"""Build condition trees from JSON expressions."""

from __future__ import annotations

from typing import Any

from simevents.conditions import (
    And,
    Condition,
    Eq,
    Event,
    Handles,
    Has,
    Not,
    Or,
    UIDs,
)


class ConditionError(ValueError):
    """Raised when a condition expression is malformed."""


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _int_list(kind: str, expr: list) -> list[int]:
    if len(expr) != 2:
        raise ConditionError(f'"{kind}" requires exactly one argument')
    arg = expr[1]
    if not isinstance(arg, list):
        raise ConditionError(f'"{kind}" argument must be an array')
    if not all(_is_int(item) for item in arg):
        raise ConditionError(f'"{kind}" argument items must be int')
    return list(arg)


def _string_arg(kind: str, expr: list, count_message: str, type_message: str) -> str:
    if len(expr) < 2:
        raise ConditionError(count_message)
    if not isinstance(expr[1], str):
        raise ConditionError(type_message)
    return expr[1]


def parse_list(expr: list, start: int = 0, end: int | None = None) -> list[Condition]:
    """Parse the sub-expressions expr[start:end] into conditions."""
    return [parse(item) for item in expr[start:end]]


def parse(expr: Any) -> Condition:
    """Parse a JSON condition expression such as ["event", "objectAdded"]."""
    if not isinstance(expr, list) or not expr or not isinstance(expr[0], str):
        raise ConditionError("invalid condition")

    kind = expr[0]
    if kind in ("and", "or"):
        if len(expr) < 2:
            raise ConditionError(f'"{kind}" requires one or more arguments')
        subs = parse_list(expr, 1)
        return And(subs) if kind == "and" else Or(subs)
    if kind == "not":
        if len(expr) != 2:
            raise ConditionError('"not" requires exactly one argument')
        return Not(parse(expr[1]))
    if kind == "event":
        return Event(
            _string_arg(
                kind,
                expr,
                '"event" requires exactly one argument',
                '"event" argument must be a string',
            )
        )
    if kind == "handles":
        return Handles(_int_list(kind, expr))
    if kind == "uids":
        return UIDs(_int_list(kind, expr))
    if kind == "has":
        return Has(
            _string_arg(
                kind,
                expr,
                '"has" requires exactly one argument',
                '"has" argument must be a string',
            )
        )
    if kind == "eq":
        field_name = _string_arg(
            kind,
            expr,
            '"eq" requires exactly two arguments',
            '"eq" argument 1 must be a string',
        )
        if len(expr) < 3:
            raise ConditionError('"eq" requires exactly two arguments')
        return Eq(field_name, expr[2])
    raise ConditionError(f'invalid condition type: "{kind}"')