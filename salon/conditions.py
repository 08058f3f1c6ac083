"""Ready-made conditions over environment traits and interaction state.

Every factory returns a ``Condition`` that reads attributes by name, so it
works with the models in ``salon.views`` and with any other object exposing
the same attributes (``trait_collection.horizontal_size_class``, ``state``,
``is_selected`` ...).
"""

from operator import attrgetter
from typing import Any, Optional

from salon.errors import InvalidConditionError
from salon.style import Condition
from salon.views import (
    CollectionCellState,
    ContentSizeCategory,
    ControlState,
    DisplayGamut,
    ForceTouchCapability,
    InterfaceIdiom,
    SizeClass,
    TableCellState,
)


def attribute_equals(path: str, value: Any) -> Condition:
    """Match items whose (dotted) attribute ``path`` equals ``value``."""
    getter = attrgetter(path)
    return Condition(lambda item: getter(item) == value)


# ---------------------------------------------------------------------------
# Trait conditions
# ---------------------------------------------------------------------------

def horizontal_size_class(equals: SizeClass) -> Condition:
    return attribute_equals("trait_collection.horizontal_size_class", equals)


def vertical_size_class(equals: SizeClass) -> Condition:
    return attribute_equals("trait_collection.vertical_size_class", equals)


def user_interface_idiom(equals: InterfaceIdiom) -> Condition:
    return attribute_equals("trait_collection.user_interface_idiom", equals)


def force_touch_capability(equals: ForceTouchCapability) -> Condition:
    return attribute_equals("trait_collection.force_touch_capability", equals)


def preferred_content_size_category(equals: ContentSizeCategory) -> Condition:
    return attribute_equals("trait_collection.preferred_content_size_category", equals)


def display_gamut(equals: DisplayGamut) -> Condition:
    return attribute_equals("trait_collection.display_gamut", equals)


def display_scale(
    *,
    equals: Optional[float] = None,
    greater_than: Optional[float] = None,
    less_than: Optional[float] = None,
) -> Condition:
    """Compare ``trait_collection.display_scale`` against one bound.

    Exactly one of ``equals``, ``greater_than`` or ``less_than`` must be given.
    """
    bounds = {
        "equals": equals,
        "greater_than": greater_than,
        "less_than": less_than,
    }
    given = {name: value for name, value in bounds.items() if value is not None}
    if len(given) != 1:
        raise InvalidConditionError(
            f"display_scale needs exactly one bound, got {sorted(given) or 'none'}",
            details={"given": sorted(given)},
        )

    scale = attrgetter("trait_collection.display_scale")
    if equals is not None:
        return Condition(lambda item: scale(item) == equals)
    if greater_than is not None:
        return Condition(lambda item: scale(item) > greater_than)
    return Condition(lambda item: scale(item) < less_than)


# ---------------------------------------------------------------------------
# Interaction state conditions
# ---------------------------------------------------------------------------

def control_state(equals: ControlState) -> Condition:
    """Match controls whose full state equals ``equals`` (not a subset test)."""
    return attribute_equals("state", equals)


def collection_cell_state(equals: CollectionCellState) -> Condition:
    """Match collection cells by derived state."""
    if equals == CollectionCellState.NORMAL:
        return Condition(lambda cell: not cell.is_highlighted and not cell.is_selected)
    if equals == CollectionCellState.SELECTED:
        return Condition(lambda cell: cell.is_selected)
    if equals == CollectionCellState.HIGHLIGHTED:
        return Condition(lambda cell: cell.is_highlighted)
    raise InvalidConditionError(f"Unknown collection cell state: {equals!r}")


def table_cell_state(equals: TableCellState) -> Condition:
    """Match table cells by derived state.

    A cell can be editing, selected and highlighted at once, so only NORMAL
    excludes the others.
    """
    if equals == TableCellState.NORMAL:
        return Condition(
            lambda cell: not cell.is_highlighted and not cell.is_selected and not cell.is_editing
        )
    if equals == TableCellState.EDITING:
        return Condition(lambda cell: cell.is_editing)
    if equals == TableCellState.SELECTED:
        return Condition(lambda cell: cell.is_selected)
    if equals == TableCellState.HIGHLIGHTED:
        return Condition(lambda cell: cell.is_highlighted)
    raise InvalidConditionError(f"Unknown table cell state: {equals!r}")
