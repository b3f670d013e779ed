import math
from typing import NamedTuple, Optional


class Segment(NamedTuple):
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def start(self):
        return (self.x1, self.y1)

    @property
    def end(self):
        return (self.x2, self.y2)

    @property
    def length(self):
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)


def intersect_distance(ray: Segment, bound: Segment) -> Optional[float]:
    """Distance from the ray origin to where it crosses the bound, or None."""
    x1, y1, x2, y2 = ray
    x3, y3, x4, y4 = bound

    # Calculate denominator (if zero, lines are parallel or collinear)
    denominator = (x2 - x1) * (y4 - y3) - (y2 - y1) * (x4 - x3)
    if denominator == 0:
        return None

    # t runs along the ray, u along the bound
    t = ((x3 - x1) * (y4 - y3) - (y3 - y1) * (x4 - x3)) / denominator
    u = ((x3 - x1) * (y2 - y1) - (y3 - y1) * (x2 - x1)) / denominator

    if 0 <= t <= 1 and 0 <= u <= 1:
        hit_x = x1 + t * (x2 - x1)
        hit_y = y1 + t * (y2 - y1)
        return math.hypot(hit_x - x1, hit_y - y1)
    return None
