"""Composable, conditional view styles.

A style is an ordered list of (conditions, styler) pairs. Stylers are plain
functions that mutate the item handed to them; conditions are predicates over
the same item. This keeps styles:
- Reusable (define once, apply to any number of items)
- Composable (concatenate styles with ``compose`` or ``+``)
- Predictable (entries run in order, each one seeing earlier mutations)

Example::

    rounded = ViewStyle(lambda layer: setattr(layer, "corner_radius", 8.0))
    compact_only = ViewStyle(
        lambda view: setattr(view, "is_hidden", True),
        when=[horizontal_size_class(SizeClass.COMPACT)],
    )
    (base + compact_only).apply(view)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Optional, Sequence, TypeVar

from salon.logging import get_logger

T = TypeVar("T")

Styler = Callable[[T], None]
Matcher = Callable[[T], bool]

logger = get_logger("salon.style")


# ---------------------------------------------------------------------------
# Conditions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Condition(Generic[T]):
    """A predicate deciding whether a styler applies to an item.

    Matchers should only read from the item. Several conditions on one entry
    are OR-ed; to require all of them, write a single matcher that checks
    everything.
    """

    matcher: Matcher

    def matches(self, item: T) -> bool:
        return bool(self.matcher(item))


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StyleEntry(Generic[T]):
    """A styler plus the optional conditions gating it."""

    styler: Styler
    conditions: Optional[tuple[Condition[T], ...]] = None

    def is_active(self, item: T) -> bool:
        """True when unconditional or when any condition matches ``item``.

        An empty condition tuple counts as unconditional.
        """
        if not self.conditions:
            return True
        return any(condition.matches(item) for condition in self.conditions)


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------

class ViewStyle(Generic[T]):
    """An immutable, ordered sequence of conditional stylers.

    Usage::

        hidden_when_compact = ViewStyle(
            lambda view: setattr(view, "is_hidden", True),
            when=[horizontal_size_class(SizeClass.COMPACT)],
        )
        style = ViewStyle.compose([base_style, hidden_when_compact])
        style.apply(view)
    """

    __slots__ = ("_entries",)

    def __init__(self, styler: Styler, when: Optional[Sequence[Condition[T]]] = None):
        conditions = tuple(when) if when is not None else None
        self._entries: tuple[StyleEntry[T], ...] = (StyleEntry(styler, conditions),)

    @classmethod
    def from_entries(cls, entries: Iterable[StyleEntry[T]]) -> "ViewStyle[T]":
        """Build a style directly from entries, preserving their order."""
        style = cls.__new__(cls)
        style._entries = tuple(entries)
        return style

    @classmethod
    def empty(cls) -> "ViewStyle[T]":
        """A style with no entries. Applying it changes nothing."""
        return cls.from_entries(())

    @classmethod
    def compose(cls, styles: Iterable["ViewStyle[T]"]) -> "ViewStyle[T]":
        """Concatenate styles into a new one.

        Entries keep their order within each style, and styles are applied
        in the order given. Composing nothing yields the empty style.
        """
        return cls.from_entries(entry for style in styles for entry in style.entries)

    @property
    def entries(self) -> tuple[StyleEntry[T], ...]:
        return self._entries

    def apply(self, item: T) -> None:
        """Run every active styler against ``item``, in entry order.

        Each entry's conditions are checked when that entry is reached, so
        they see mutations made by earlier entries. Exceptions from matchers
        or stylers propagate and stop the remaining entries; mutations
        already made are kept.
        """
        applied = 0
        for entry in self._entries:
            if entry.is_active(item):
                entry.styler(item)
                applied += 1

        logger.debug(
            "style_applied",
            target=type(item).__name__,
            entries=len(self._entries),
            applied=applied,
        )

    def __call__(self, item: T) -> None:
        self.apply(item)

    def __add__(self, other: "ViewStyle[T]") -> "ViewStyle[T]":
        if not isinstance(other, ViewStyle):
            return NotImplemented
        return ViewStyle.compose([self, other])

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        conditional = sum(1 for entry in self._entries if entry.conditions)
        return f"ViewStyle(entries={len(self._entries)}, conditional={conditional})"
