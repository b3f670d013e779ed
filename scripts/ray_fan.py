import math

from geometry import Segment, intersect_distance


def cast_fan(bounds, origin_x, origin_y, resolution, max_distance):
    """Cast `resolution` evenly spaced rays from the origin, each clipped to the
    closest bound it crosses.

    Rays are returned in angle order starting along +x. A bound only shortens a
    ray when its distance is strictly positive and strictly below the current
    best, so a bound through the origin is ignored and the first of two
    equidistant bounds wins.
    """
    if resolution < 0:
        raise ValueError(f"resolution must not be negative, got {resolution}")

    rays = []
    for i in range(resolution):
        direction = (math.pi * 2) * (i / resolution)
        dx = math.cos(direction)
        dy = math.sin(direction)
        candidate = Segment(
            origin_x,
            origin_y,
            origin_x + dx * max_distance,
            origin_y + dy * max_distance,
        )

        min_distance = max_distance
        for bound in bounds:
            distance = intersect_distance(candidate, bound)
            if distance is not None and 0 < distance < min_distance:
                min_distance = distance

        rays.append(
            Segment(
                origin_x,
                origin_y,
                origin_x + dx * min_distance,
                origin_y + dy * min_distance,
            )
        )
    return rays
