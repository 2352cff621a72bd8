"""
Tokens dérivés du thème — valeurs fluides (clamp) et motion.
Fonctions pures : l'application des variables CSS reste côté rendu.
"""
from typing import Dict, Literal, Sequence

from .schema import ThemeConfig

_TYPE_STEPS: Dict[str, int] = {
    "xs": -2,
    "sm": -1,
    "base": 0,
    "lg": 1,
    "xl": 2,
    "2xl": 3,
    "3xl": 4,
    "4xl": 5,
}

_SPACE_MULTIPLIERS: Dict[str, float] = {
    "xs": 0.25,
    "sm": 0.5,
    "base": 1,
    "lg": 1.5,
    "xl": 2,
    "2xl": 2.5,
    "3xl": 3,
}


def to_hsl(triple: Sequence[float]) -> str:
    """(273, 83, 60) → "hsl(273 83% 60%)"."""
    h, s, l = triple
    return f"hsl({_num(h)} {_num(s)}% {_num(l)}%)"


def _num(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def create_fluid_value(
    min_value: float,
    max_value: float,
    min_vw: float,
    max_vw: float,
    unit: Literal["px", "rem"] = "px",
) -> str:
    """
    Expression clamp() interpolant linéairement entre min_vw et max_vw.

    Les valeurs d'entrée sont en px ; unit="rem" divise par 16.
    """
    if max_vw == min_vw:
        raise ValueError("max_vw doit être différent de min_vw")
    slope = (max_value - min_value) / (max_vw - min_vw)
    intersection = min_value - slope * min_vw
    div = 16 if unit == "rem" else 1
    return (
        f"clamp({_num(min_value / div)}{unit}, "
        f"{_num(intersection / div)}{unit} + {_num(slope * 100)}vw, "
        f"{_num(max_value / div)}{unit})"
    )


def create_fluid_type_scale(
    min_vw: float,
    max_vw: float,
    base_min: float,
    base_max: float,
    ratio: float = 1.25,
) -> Dict[str, str]:
    return {
        name: create_fluid_value(base_min * ratio ** step, base_max * ratio ** step, min_vw, max_vw, "rem")
        for name, step in _TYPE_STEPS.items()
    }


def create_fluid_space_scale(
    min_vw: float,
    max_vw: float,
    base_min: float,
    base_max: float,
) -> Dict[str, str]:
    return {
        name: create_fluid_value(base_min * mult, base_max * mult, min_vw, max_vw)
        for name, mult in _SPACE_MULTIPLIERS.items()
    }


def theme_scales(theme: ThemeConfig) -> Dict[str, Dict[str, str]]:
    """Échelles typo + espacement calculées depuis le thème."""
    fluid = theme.typography.fluid
    return {
        "font": create_fluid_type_scale(
            fluid.min_vw, fluid.max_vw,
            theme.typography.base_size,
            theme.typography.base_size * theme.typography.scale_ratio,
        ),
        "space": create_fluid_space_scale(
            fluid.min_vw, fluid.max_vw,
            theme.spacing.base,
            theme.spacing.base * theme.spacing.scale,
        ),
    }


def motion_tokens(theme: ThemeConfig) -> Dict[str, str]:
    """Durées/easings ; prefers_reduced_motion → 0ms + linear."""
    reduced = theme.prefers_reduced_motion
    d, e = theme.motion.duration, theme.motion.easing
    return {
        "instant": "0ms" if reduced else f"{_num(d.instant)}ms",
        "fast": "0ms" if reduced else f"{_num(d.fast)}ms",
        "normal": "0ms" if reduced else f"{_num(d.normal)}ms",
        "slow": "0ms" if reduced else f"{_num(d.slow)}ms",
        "ease-default": "linear" if reduced else e.default,
        "ease-in": "linear" if reduced else e.ease_in,
        "ease-out": "linear" if reduced else e.ease_out,
    }
