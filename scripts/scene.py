from geometry import Segment


def generate_bounds(count, width, height, rng):
    """Random obstacle segments with endpoints inside [0, width) x [0, height)."""
    if count < 0:
        raise ValueError(f"bound count must not be negative, got {count}")
    if width <= 0 or height <= 0:
        raise ValueError(f"canvas must have a positive size, got {width}x{height}")

    bounds = []
    for _ in range(count):
        x1 = rng.random() * width
        y1 = rng.random() * height
        x2 = rng.random() * width
        y2 = rng.random() * height
        bounds.append(Segment(x1, y1, x2, y2))
    return bounds


class Scene:
    """Read-only set of obstacles the rays are cast against."""

    def __init__(self, bounds):
        self._bounds = tuple(Segment(*bound) for bound in bounds)

    @classmethod
    def random(cls, count, width, height, rng):
        return cls(generate_bounds(count, width, height, rng))

    @property
    def bounds(self):
        return self._bounds

    def __len__(self):
        return len(self._bounds)
