"""
Salon: composable, conditional styles for view-like objects.

- ViewStyle: ordered (conditions, styler) entries, composed with ``+``
- Condition: predicate gating a styler (OR-ed within one entry)
- Styleable: apply styles as methods, or at construction time
"""
from salon.conditions import (
    attribute_equals,
    collection_cell_state,
    control_state,
    display_gamut,
    display_scale,
    force_touch_capability,
    horizontal_size_class,
    preferred_content_size_category,
    table_cell_state,
    user_interface_idiom,
    vertical_size_class,
)
from salon.config import LoggingConfig, SalonConfig
from salon.errors import ConfigurationError, InvalidConditionError, SalonError
from salon.logging import configure_logging, get_logger
from salon.style import Condition, StyleEntry, ViewStyle
from salon.styleable import (
    Styleable,
    apply_style,
    apply_styles,
    apply_when,
    make_styled,
)

__all__ = [
    # Styles
    "Condition",
    "StyleEntry",
    "ViewStyle",
    # Applying
    "Styleable",
    "apply_style",
    "apply_styles",
    "apply_when",
    "make_styled",
    # Conditions
    "attribute_equals",
    "collection_cell_state",
    "control_state",
    "display_gamut",
    "display_scale",
    "force_touch_capability",
    "horizontal_size_class",
    "preferred_content_size_category",
    "table_cell_state",
    "user_interface_idiom",
    "vertical_size_class",
    # Config, logging, errors
    "LoggingConfig",
    "SalonConfig",
    "configure_logging",
    "get_logger",
    "ConfigurationError",
    "InvalidConditionError",
    "SalonError",
]
