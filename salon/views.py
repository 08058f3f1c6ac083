"""Reference target model for styles.

Toolkit-neutral stand-ins for the views, controls, cells and layers a
styling layer usually targets. They are plain pydantic models: every field has
a default, so ``View()`` is a valid zero-configuration instance, and stylers
mutate them by simple attribute assignment.
"""

from enum import Enum, IntFlag
from typing import Optional

from pydantic import BaseModel, Field

from salon.styleable import Styleable


# ---------------------------------------------------------------------------
# Environment traits
# ---------------------------------------------------------------------------

class SizeClass(str, Enum):
    UNSPECIFIED = "unspecified"
    COMPACT = "compact"
    REGULAR = "regular"


class InterfaceIdiom(str, Enum):
    UNSPECIFIED = "unspecified"
    PHONE = "phone"
    PAD = "pad"
    TV = "tv"
    CAR_PLAY = "car_play"


class ForceTouchCapability(str, Enum):
    UNKNOWN = "unknown"
    UNAVAILABLE = "unavailable"
    AVAILABLE = "available"


class ContentSizeCategory(str, Enum):
    UNSPECIFIED = "unspecified"
    EXTRA_SMALL = "extra_small"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra_large"
    EXTRA_EXTRA_LARGE = "extra_extra_large"
    EXTRA_EXTRA_EXTRA_LARGE = "extra_extra_extra_large"
    ACCESSIBILITY_MEDIUM = "accessibility_medium"
    ACCESSIBILITY_LARGE = "accessibility_large"
    ACCESSIBILITY_EXTRA_LARGE = "accessibility_extra_large"
    ACCESSIBILITY_EXTRA_EXTRA_LARGE = "accessibility_extra_extra_large"
    ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE = "accessibility_extra_extra_extra_large"


class DisplayGamut(str, Enum):
    UNSPECIFIED = "unspecified"
    SRGB = "srgb"
    P3 = "p3"


class TraitCollection(BaseModel):
    """Environment traits a view is currently displayed with."""
    horizontal_size_class: SizeClass = SizeClass.UNSPECIFIED
    vertical_size_class: SizeClass = SizeClass.UNSPECIFIED
    user_interface_idiom: InterfaceIdiom = InterfaceIdiom.UNSPECIFIED
    force_touch_capability: ForceTouchCapability = ForceTouchCapability.UNKNOWN
    preferred_content_size_category: ContentSizeCategory = ContentSizeCategory.UNSPECIFIED
    display_gamut: DisplayGamut = DisplayGamut.UNSPECIFIED
    display_scale: float = 1.0


# ---------------------------------------------------------------------------
# Interaction state
# ---------------------------------------------------------------------------

class ControlState(IntFlag):
    """Control state flags. A control can be in several states at once."""

    NORMAL = 0
    HIGHLIGHTED = 1
    DISABLED = 2
    SELECTED = 4
    FOCUSED = 8


class CollectionCellState(str, Enum):
    """Derived collection cell state.

    A cell can be selected and highlighted at the same time; test for both
    if both matter.
    """

    NORMAL = "normal"
    SELECTED = "selected"
    HIGHLIGHTED = "highlighted"


class TableCellState(str, Enum):
    """Derived table cell state. Every state except NORMAL can overlap."""

    NORMAL = "normal"
    EDITING = "editing"
    SELECTED = "selected"
    HIGHLIGHTED = "highlighted"


# ---------------------------------------------------------------------------
# Targets
# ---------------------------------------------------------------------------

class View(BaseModel, Styleable):
    """Base visual element."""
    tag: int = 0
    is_hidden: bool = False
    alpha: float = 1.0
    background_color: Optional[str] = None
    tint_color: Optional[str] = None
    trait_collection: TraitCollection = Field(default_factory=TraitCollection)


class Label(View):
    text: str = ""
    text_color: Optional[str] = None
    font_size: float = 17.0
    number_of_lines: int = 1


class Control(View):
    is_enabled: bool = True
    is_selected: bool = False
    is_highlighted: bool = False
    is_focused: bool = False

    @property
    def state(self) -> ControlState:
        """Current state flags, derived from the individual flags."""
        state = ControlState.NORMAL
        if self.is_highlighted:
            state |= ControlState.HIGHLIGHTED
        if not self.is_enabled:
            state |= ControlState.DISABLED
        if self.is_selected:
            state |= ControlState.SELECTED
        if self.is_focused:
            state |= ControlState.FOCUSED
        return state


class CollectionViewCell(View):
    is_selected: bool = False
    is_highlighted: bool = False


class TableViewCell(View):
    is_selected: bool = False
    is_highlighted: bool = False
    is_editing: bool = False


class Layer(BaseModel, Styleable):
    """Backing layer of a view."""
    corner_radius: float = 0.0
    border_width: float = 0.0
    border_color: Optional[str] = None
    opacity: float = 1.0
    is_hidden: bool = False
