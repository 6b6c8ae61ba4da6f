# config.py
from dataclasses import dataclass, field, replace
from typing import Tuple

Triple = Tuple[float, float, float]

# Named presets, smallest to largest. Anything not listed keeps its default.
QUALITY_LEVELS = {
    "preview": {"width": 100, "height": 50, "samples": 4},
    "balanced": {"width": 200, "height": 100, "samples": 16},
    "final": {"width": 200, "height": 100, "samples": 100},
}


@dataclass(frozen=True)
class RenderSettings:
    width: int = 200
    height: int = 100
    samples: int = 100
    max_depth: int = 50
    seed: int = 0
    scene_seed: int = 0
    workers: int = 1
    look_from: Triple = (16.0, 2.0, 4.0)
    look_at: Triple = (0.0, 0.5, 0.0)
    vup: Triple = (0.0, 1.0, 0.0)
    vfov: float = 15.0
    aperture: float = 1.0 / 16.0
    # The camera focuses at the distance from look_from to this point.
    focus_point: Triple = field(default=(4.0, 1.0, 0.0))

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"image size must be positive, got {self.width}x{self.height}")
        if self.samples <= 0:
            raise ValueError(f"samples per pixel must be positive, got {self.samples}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")
        if self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")
        if not 0.0 < self.vfov < 180.0:
            raise ValueError(f"vfov must be between 0 and 180 degrees, got {self.vfov}")
        if self.aperture < 0:
            raise ValueError(f"aperture must not be negative, got {self.aperture}")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "RenderSettings":
        if name not in QUALITY_LEVELS:
            raise ValueError(f"unknown quality level {name!r}, expected one of {sorted(QUALITY_LEVELS)}")
        return cls(**{**QUALITY_LEVELS[name], **overrides})

    def with_overrides(self, **overrides) -> "RenderSettings":
        """Returns a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
