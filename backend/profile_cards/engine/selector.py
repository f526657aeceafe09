"""Dominant-entry selection."""

from __future__ import annotations

from collections.abc import Mapping

# Below any valid percentage, so the first entry always replaces it.
_MAX_SENTINEL = -1


def select_max(values: Mapping[str, int]) -> str:
    """Return the name with the largest value.

    Entries are visited in mapping order and only a strictly greater value
    replaces the running maximum, so on ties the first name seen wins.
    """
    if not values:
        raise ValueError("select_max() needs at least one entry")

    best_name: str | None = None
    best_value = _MAX_SENTINEL
    for name, value in values.items():
        if best_name is None or value > best_value:
            best_name = name
            best_value = value
    assert best_name is not None
    return best_name
