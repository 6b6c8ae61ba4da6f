import pytest

from pathtracer.config import QUALITY_LEVELS, RenderSettings


class TestRenderSettings:
    def test_defaults(self):
        settings = RenderSettings()
        assert (settings.width, settings.height, settings.samples) == (200, 100, 100)
        assert settings.max_depth == 50
        assert settings.aspect_ratio == 2.0

    @pytest.mark.parametrize("field, value", [
        ("width", 0),
        ("height", -1),
        ("samples", 0),
        ("max_depth", -1),
        ("workers", 0),
        ("vfov", 180.0),
        ("aperture", -0.1),
    ])
    def test_invalid_values(self, field, value):
        with pytest.raises(ValueError):
            RenderSettings(**{field: value})

    def test_from_quality(self):
        """Test that presets apply and explicit overrides win."""
        settings = RenderSettings.from_quality("preview", samples=2)
        assert settings.width == QUALITY_LEVELS["preview"]["width"]
        assert settings.samples == 2

    def test_unknown_quality(self):
        with pytest.raises(ValueError):
            RenderSettings.from_quality("ultra")

    def test_with_overrides_ignores_none(self):
        settings = RenderSettings().with_overrides(width=10, height=None)
        assert settings.width == 10
        assert settings.height == 100
