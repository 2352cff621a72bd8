"""SimplyMaid Theme — schéma du thème + tokens dérivés."""
from .schema import (
    ThemeConfig,
    ThemeColors,
    ColorGroup,
    SemanticColors,
    SidebarColors,
    ChartColors,
    Spacing,
    Typography,
    Containers,
    MotionTokens,
)
from .tokens import (
    to_hsl,
    create_fluid_value,
    create_fluid_type_scale,
    create_fluid_space_scale,
    theme_scales,
    motion_tokens,
)

__all__ = [
    "ThemeConfig", "ThemeColors", "ColorGroup", "SemanticColors",
    "SidebarColors", "ChartColors", "Spacing", "Typography",
    "Containers", "MotionTokens",
    "to_hsl", "create_fluid_value", "create_fluid_type_scale",
    "create_fluid_space_scale", "theme_scales", "motion_tokens",
]
