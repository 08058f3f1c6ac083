"""
Salon Styleable: apply styles directly to items.

Two equivalent surfaces:
- Free functions (apply_style, apply_styles, apply_when, make_styled) that
  work with any object
- The Styleable mixin, for target classes that want the same calls as
  methods plus construction-time styling
"""
from __future__ import annotations
from typing import Any, Callable, Optional, Sequence, TypeVar

from salon.style import Condition, StyleEntry, Styler, ViewStyle

T = TypeVar("T")
S = TypeVar("S", bound="Styleable")


# ---------------------------------------------------------------------------
# Free functions
# ---------------------------------------------------------------------------

def apply_style(item: T, style: ViewStyle[T]) -> T:
    """Apply a single style to ``item`` and return the item."""
    style.apply(item)
    return item


def apply_styles(item: T, styles: Sequence[ViewStyle[T]]) -> T:
    """Compose ``styles`` in order and apply the result to ``item``."""
    ViewStyle.compose(styles).apply(item)
    return item


def apply_when(
    item: T,
    conditions: Optional[Sequence[Condition[T]]],
    styler: Styler,
) -> T:
    """Apply ``styler`` to ``item`` if any condition matches.

    ``None`` or an empty sequence applies unconditionally.
    """
    conditions = tuple(conditions) if conditions is not None else None
    ViewStyle.from_entries([StyleEntry(styler, conditions)]).apply(item)
    return item


def make_styled(factory: Callable[..., T], style: ViewStyle[T], **kwargs: Any) -> T:
    """Build ``factory(**kwargs)`` and apply ``style`` before returning it."""
    item = factory(**kwargs)
    style.apply(item)
    return item


# ---------------------------------------------------------------------------
# Mixin
# ---------------------------------------------------------------------------

class Styleable:
    """Mixin adding style application to a target class.

    Usage::

        class Badge(View):
            ...

        badge = Badge.with_style(pill_style, text="new")
        badge.apply_when([control_state(ControlState.HIGHLIGHTED)], dim)
    """

    def apply(self: S, style: ViewStyle[S]) -> S:
        return apply_style(self, style)

    def apply_all(self: S, styles: Sequence[ViewStyle[S]]) -> S:
        return apply_styles(self, styles)

    def apply_when(
        self: S,
        conditions: Optional[Sequence[Condition[S]]],
        styler: Styler,
    ) -> S:
        return apply_when(self, conditions, styler)

    @classmethod
    def with_style(cls: type[S], style: ViewStyle[S], **fields: Any) -> S:
        """Create an instance from ``fields`` and apply ``style`` to it."""
        return make_styled(cls, style, **fields)

    @classmethod
    def with_styles(cls: type[S], styles: Sequence[ViewStyle[S]], **fields: Any) -> S:
        """Create an instance from ``fields`` and apply ``styles`` in order."""
        return make_styled(cls, ViewStyle.compose(styles), **fields)

    @classmethod
    def with_styler(
        cls: type[S],
        styler: Styler,
        when: Optional[Sequence[Condition[S]]] = None,
        **fields: Any,
    ) -> S:
        """Create an instance and apply ``styler``, gated by ``when`` if given."""
        return apply_when(cls(**fields), when, styler)
