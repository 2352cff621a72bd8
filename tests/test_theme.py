"""Tests du thème et des tokens dérivés."""
import pytest

from simplymaid.core import load_app_config
from simplymaid.theme import (
    ThemeConfig,
    create_fluid_space_scale,
    create_fluid_type_scale,
    create_fluid_value,
    motion_tokens,
    theme_scales,
    to_hsl,
)


@pytest.fixture
def theme():
    return load_app_config().theme


class TestColors:
    def test_to_hsl(self):
        assert to_hsl((273, 83, 60)) == "hsl(273 83% 60%)"
        assert to_hsl((222.2, 47.4, 11.2)) == "hsl(222.2 47.4% 11.2%)"

    def test_bornes(self, theme):
        data = theme.to_wire()
        data["colors"]["primary"]["hue"] = 400
        with pytest.raises(ValueError):
            ThemeConfig.model_validate(data)

    def test_defauts_completes(self, theme):
        data = {"colors": theme.to_wire()["colors"]}
        partial = ThemeConfig.model_validate(data)
        assert partial.typography.base_size == 16
        assert partial.motion.duration.normal == 200


class TestFluid:
    def test_clamp_px(self):
        value = create_fluid_value(16, 24, 320, 1280)
        assert value.startswith("clamp(16px, ")
        assert value.endswith(", 24px)")
        assert "vw" in value

    def test_clamp_rem(self):
        assert create_fluid_value(16, 32, 320, 1280, "rem").startswith("clamp(1rem, ")

    def test_viewport_degenere(self):
        with pytest.raises(ValueError):
            create_fluid_value(16, 24, 320, 320)

    def test_echelles(self, theme):
        assert list(create_fluid_type_scale(320, 1280, 16, 20)) == ["xs", "sm", "base", "lg", "xl", "2xl", "3xl", "4xl"]
        assert create_fluid_space_scale(320, 1280, 16, 24)["base"] == create_fluid_value(16, 24, 320, 1280)
        scales = theme_scales(theme)
        assert scales["font"]["base"] == create_fluid_value(16, 20, 320, 1280, "rem")


class TestMotion:
    def test_tokens(self, theme):
        tokens = motion_tokens(theme)
        assert tokens["normal"] == "200ms"
        assert tokens["ease-in"] == "cubic-bezier(0.4,0,1,1)"

    def test_reduced_motion(self, theme):
        tokens = motion_tokens(theme.model_copy(update={"prefers_reduced_motion": True}))
        assert tokens["slow"] == "0ms"
        assert tokens["ease-default"] == "linear"
