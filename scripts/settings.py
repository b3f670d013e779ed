from dataclasses import dataclass
from typing import Optional

WIDTH, HEIGHT = 800, 600

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
LIGHT_GRAY = (192, 192, 192)

BACKGROUND_COLOR = BLACK
BOUND_COLOR = WHITE
RAY_COLOR = LIGHT_GRAY

FPS = 60
BUFFER_COUNT = 3


@dataclass(frozen=True)
class VisualiserConfig:
    title: str = "Ray casting"
    width: int = WIDTH
    height: int = HEIGHT
    bound_count: int = 8
    resolution: int = 180
    max_distance: float = 3000.0
    fps: float = FPS
    buffer_count: int = BUFFER_COUNT
    antialias: bool = True
    seed: Optional[int] = None
    # seconds the render thread sleeps between ticks, 0 spins
    idle_sleep: float = 0.001

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"canvas must have a positive size, got {self.width}x{self.height}")
        if self.bound_count < 0:
            raise ValueError(f"bound_count must not be negative, got {self.bound_count}")
        if self.resolution < 0:
            raise ValueError(f"resolution must not be negative, got {self.resolution}")
        if self.max_distance <= 0:
            raise ValueError(f"max_distance must be positive, got {self.max_distance}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.buffer_count < 1:
            raise ValueError(f"buffer_count must be at least 1, got {self.buffer_count}")
        if self.idle_sleep < 0:
            raise ValueError(f"idle_sleep must not be negative, got {self.idle_sleep}")

    @property
    def frame_period(self):
        return 1.0 / self.fps
