"""Strict deep structural equality."""

from __future__ import annotations

import dataclasses
import types
from typing import Any

# attributes only C-implemented classes carry in their own namespace
_C_LEVEL_ATTRS = (
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
    types.ClassMethodDescriptorType,
    types.BuiltinFunctionType,
)


def deep_equal(expected: Any, actual: Any) -> bool:
    """Compare two values by content, recursing into containers and objects.

    Values of different concrete types are never equal, so ``1`` and ``1.0``
    or ``[1]`` and ``(1,)`` differ, including as dict keys and set members.
    Distinct objects with equal contents are equal. Cycles are tolerated.
    Never raises for values whose ``==`` has no single truth value.
    """
    return _deep_equal(expected, actual, set())


def _deep_equal(a: Any, b: Any, visiting: set[tuple[int, int]]) -> bool:
    if type(a) is not type(b):
        return False

    if isinstance(a, (set, frozenset)):
        return _same_members(a, b)

    if isinstance(a, (list, tuple, dict)) or _is_structured(a):
        key = (id(a), id(b))
        if key in visiting:
            return True
        visiting.add(key)
        try:
            return _compare_contents(a, b, visiting)
        finally:
            visiting.discard(key)

    return _opaque_equal(a, b)


def _compare_contents(a: Any, b: Any, visiting: set[tuple[int, int]]) -> bool:
    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(
            _deep_equal(x, y, visiting) for x, y in zip(a, b)
        )

    if isinstance(a, dict):
        if not _same_members(a.keys(), b.keys()):
            return False
        return all(_deep_equal(a[k], b[k], visiting) for k in a)

    if dataclasses.is_dataclass(a):
        return all(
            _deep_equal(getattr(a, f.name), getattr(b, f.name), visiting)
            for f in dataclasses.fields(a)
        )

    return _deep_equal(_state(a), _state(b), visiting)


def _same_members(a: Any, b: Any) -> bool:
    """Set-like equality that also requires each member to keep its type."""
    if len(a) != len(b) or not _opaque_equal(a, b):
        return False
    b_types = {member: type(member) for member in b}
    return all(type(member) is b_types[member] for member in a)


def _opaque_equal(a: Any, b: Any) -> bool:
    try:
        result = a == b
    except (TypeError, ValueError):
        return False
    if isinstance(result, bool):
        return result
    try:
        return bool(result)
    except (TypeError, ValueError):
        pass
    # element-wise results such as numpy arrays
    reduce_all = getattr(result, "all", None)
    if callable(reduce_all):
        try:
            return bool(reduce_all())
        except (TypeError, ValueError):
            pass
    return False


def _is_structured(value: Any) -> bool:
    """True for dataclasses, exceptions and plain Python objects without their own __eq__."""
    if isinstance(value, type):
        return False
    if dataclasses.is_dataclass(value) or isinstance(value, BaseException):
        return True
    cls = type(value)
    if cls.__eq__ is not object.__eq__:
        return False
    # C types keep their state outside __dict__
    if not all(_is_python_class(klass) for klass in cls.__mro__[:-1]):
        return False
    return hasattr(value, "__dict__") or _slot_names(cls) != []


def _is_python_class(klass: type) -> bool:
    return not any(isinstance(attr, _C_LEVEL_ATTRS) for attr in vars(klass).values())


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in ("__dict__", "__weakref__"))
    return names


def _state(obj: Any) -> dict[str, Any]:
    state = dict(vars(obj)) if hasattr(obj, "__dict__") else {}
    if isinstance(obj, BaseException):
        state["args"] = obj.args
    for name in _slot_names(type(obj)):
        if hasattr(obj, name):
            state[name] = getattr(obj, name)
    return state
