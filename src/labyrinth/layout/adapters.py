"""Structural interoperability with rectangle-like types defined elsewhere.

The engine never depends on a toolkit's geometry classes. Instead each
foreign type gets an adapter at the system boundary: one function that
reads ``(x, y, width, height)`` out of an instance and one that builds an
instance from such a tuple.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

RectTuple = tuple[Any, Any, Any, Any]

FIELDS = ("x", "y", "width", "height")


@runtime_checkable
class RectangleLike(Protocol):
    """Anything that exposes the four rectangle accessors as attributes."""

    x: Any
    y: Any
    width: Any
    height: Any


@dataclass(frozen=True)
class RectangleAdapter:
    """Reads and builds one external rectangle representation."""

    to_tuple: Callable[[Any], RectTuple]
    from_tuple: Callable[[RectTuple], Any]


_ADAPTERS: dict[type, RectangleAdapter] = {}


def register_rectangle_adapter(
    kind: type,
    to_tuple: Callable[[Any], RectTuple],
    from_tuple: Callable[[RectTuple], Any],
) -> RectangleAdapter:
    """Register (or replace) the adapter used for ``kind`` and its subclasses."""
    adapter = RectangleAdapter(to_tuple=to_tuple, from_tuple=from_tuple)
    _ADAPTERS[kind] = adapter
    return adapter


def _registered(kind: type) -> RectangleAdapter | None:
    for base in kind.__mro__:
        adapter = _ADAPTERS.get(base)
        if adapter is not None:
            return adapter
    return None


def _attributes_to_tuple(value: Any) -> RectTuple:
    x, y, width, height = (getattr(value, name) for name in FIELDS)
    return (x, y, width, height)


def rectangle_tuple(value: Any) -> RectTuple:
    """Read ``(x, y, width, height)`` out of any rectangle-like value."""
    adapter = _registered(type(value))
    if adapter is not None:
        return adapter.to_tuple(value)
    if isinstance(value, RectangleLike):
        return _attributes_to_tuple(value)
    raise TypeError(
        f"{type(value).__name__} is not rectangle-like. Expose x, y, width "
        f"and height or register an adapter with register_rectangle_adapter()."
    )


def build_rectangle(kind: type, values: RectTuple) -> Any:
    """Build an instance of ``kind`` from ``(x, y, width, height)``.

    Named tuples are rebuilt with ``_make``; unregistered classes are called
    positionally as ``kind(x, y, width, height)``.
    """
    adapter = _ADAPTERS.get(kind)
    if adapter is not None:
        return adapter.from_tuple(values)
    if hasattr(kind, "_make"):
        return kind._make(values)
    adapter = _registered(kind)
    if adapter is not None:
        return adapter.from_tuple(values)
    return kind(*values)


def _sequence_to_tuple(value: Any) -> RectTuple:
    if len(value) != 4:
        raise ValueError(
            f"A rectangle sequence needs exactly 4 items (x, y, width, height), "
            f"got {len(value)}."
        )
    x, y, width, height = value
    return (x, y, width, height)


def _dict_to_tuple(value: dict) -> RectTuple:
    missing = [name for name in FIELDS if name not in value]
    if missing:
        raise KeyError(f"Rectangle dict is missing keys: {missing}")
    x, y, width, height = (value[name] for name in FIELDS)
    return (x, y, width, height)


register_rectangle_adapter(tuple, _sequence_to_tuple, tuple)
register_rectangle_adapter(list, _sequence_to_tuple, list)
register_rectangle_adapter(
    dict, _dict_to_tuple, lambda values: dict(zip(FIELDS, values))
)
