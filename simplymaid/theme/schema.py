"""
Schéma du thème visuel (couleurs HSL, espacements, typographie, conteneurs, motion).

Consommé en lecture seule par la couche de rendu. Toutes les valeurs numériques
ont des défauts : un thème partiel est complété au parsing.
"""
from typing import Tuple

from pydantic import Field

from ..base import FrozenModel

HSLTriple = Tuple[float, float, float]


# ── Couleurs ─────────────────────────────────────────────────────────────────

class ColorGroup(FrozenModel):
    hue: float = Field(default=273, ge=0, le=360)
    saturation: float = Field(default=83, ge=0, le=100)
    lightness: float = Field(default=60, ge=0, le=100)


class SemanticColors(FrozenModel):
    background: HSLTriple
    foreground: HSLTriple
    accent: HSLTriple
    muted: HSLTriple
    destructive: HSLTriple
    border: HSLTriple
    input: HSLTriple
    ring: HSLTriple
    card: HSLTriple
    popover: HSLTriple
    card_foreground: HSLTriple
    popover_foreground: HSLTriple
    primary_foreground: HSLTriple
    secondary_foreground: HSLTriple
    muted_foreground: HSLTriple
    accent_foreground: HSLTriple
    destructive_foreground: HSLTriple


class SidebarColors(FrozenModel):
    background: HSLTriple
    foreground: HSLTriple
    primary: HSLTriple
    primary_foreground: HSLTriple
    accent: HSLTriple
    accent_foreground: HSLTriple
    border: HSLTriple
    ring: HSLTriple


class ChartColors(FrozenModel):
    c1: HSLTriple = Field(alias="1")
    c2: HSLTriple = Field(alias="2")
    c3: HSLTriple = Field(alias="3")
    c4: HSLTriple = Field(alias="4")
    c5: HSLTriple = Field(alias="5")


class ThemeColors(FrozenModel):
    primary: ColorGroup
    secondary: ColorGroup
    neutral: ColorGroup
    semantic: SemanticColors
    sidebar: SidebarColors
    chart: ChartColors


# ── Échelles ─────────────────────────────────────────────────────────────────

class FluidRange(FrozenModel):
    min: float = 0.5
    max: float = 1.5


class Spacing(FrozenModel):
    base: float = 16
    scale: float = 1.5
    fluid: FluidRange = Field(default_factory=FluidRange)


class FluidViewport(FrozenModel):
    min_vw: float = 320
    max_vw: float = 1280


class Typography(FrozenModel):
    base_size: float = 16
    scale_ratio: float = 1.25
    fluid: FluidViewport = Field(default_factory=FluidViewport)


class ContainerWidths(FrozenModel):
    sm: float = 640
    md: float = 768
    lg: float = 1024
    xl: float = 1280


class ContainerPadding(FrozenModel):
    sm: float = 16
    md: float = 24
    lg: float = 32


class Containers(FrozenModel):
    max_width: ContainerWidths = Field(default_factory=ContainerWidths)
    padding: ContainerPadding = Field(default_factory=ContainerPadding)


# ── Motion ───────────────────────────────────────────────────────────────────

class MotionDuration(FrozenModel):
    instant: float = 50
    fast: float = 100
    normal: float = 200
    slow: float = 300


class MotionEasing(FrozenModel):
    default: str = "cubic-bezier(0.4,0,0.2,1)"
    ease_in: str = Field(default="cubic-bezier(0.4,0,1,1)", alias="in")
    ease_out: str = Field(default="cubic-bezier(0,0,0.2,1)", alias="out")


class MotionTokens(FrozenModel):
    duration: MotionDuration = Field(default_factory=MotionDuration)
    easing: MotionEasing = Field(default_factory=MotionEasing)


class ThemeConfig(FrozenModel):
    """Configuration complète du thème (validée une fois, gelée)."""
    colors: ThemeColors
    spacing: Spacing = Field(default_factory=Spacing)
    typography: Typography = Field(default_factory=Typography)
    containers: Containers = Field(default_factory=Containers)
    motion: MotionTokens = Field(default_factory=MotionTokens)
    dark_mode: bool = False
    prefers_reduced_motion: bool = False
