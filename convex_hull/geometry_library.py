# Standard imports
import numpy as np
from scipy.spatial import ConvexHull

from typing import Iterable, Set

from convex_hull.point_sequence import Point, as_point

LEFT = 1
RIGHT = -1
COLLINEAR = 0


def point_distance(a: Point, b: Point, c: Point) -> int:
    """ Distance from segment ab to c, not normalised by |ab|. Only compare values sharing the same ab. """
    abx = b.x - a.x
    aby = b.y - a.y
    return abs(abx * (a.y - c.y) - aby * (a.x - c.x))


def point_location(a: Point, b: Point, p: Point) -> int:
    """ +1 if p is left of the directed line a -> b, -1 if right, 0 if collinear """
    cross_product = (b.x - a.x) * (p.y - a.y) - (b.y - a.y) * (p.x - a.x)
    if cross_product > 0:
        return LEFT
    if cross_product == 0:
        return COLLINEAR
    return RIGHT


def hull_winding(hull) -> int:
    """ LEFT for counter-clockwise, RIGHT for clockwise (y axis pointing up). First non-zero turn decides. """
    points = [as_point(point) for point in hull]
    number_of_points = len(points)
    if number_of_points < 3:
        return COLLINEAR

    for i in range(number_of_points):
        turn = point_location(points[i],
                              points[(i + 1) % number_of_points],
                              points[(i + 2) % number_of_points])
        if turn != COLLINEAR:
            return turn
    return COLLINEAR


def is_inside_hull(hull, point) -> bool:
    """ True when point lies on or inside the convex polygon hull """
    points = [as_point(hull_point) for hull_point in hull]
    point = as_point(point)
    winding = hull_winding(points)

    if winding == COLLINEAR:
        return _is_on_chain(points, point)

    number_of_points = len(points)
    for i in range(number_of_points):
        location = point_location(points[i], points[(i + 1) % number_of_points], point)
        if location not in (COLLINEAR, winding):
            return False
    return True


def _is_on_chain(points, point: Point) -> bool:
    """ Degenerate hulls: a point, or a segment spanned by the chain """
    if not points:
        return False
    if len(points) == 1:
        return points[0] == point

    for a in points:
        for b in points:
            if point_location(a, b, point) != COLLINEAR:
                continue
            if min(a.x, b.x) <= point.x <= max(a.x, b.x) and min(a.y, b.y) <= point.y <= max(a.y, b.y):
                return True
    return False


def reference_hull(points: Iterable) -> Set[Point]:
    """ Hull vertices according to Qhull. Raises scipy.spatial.QhullError for degenerate input. """
    coordinates = np.array([as_point(point) for point in points], dtype=np.int64)
    hull = ConvexHull(coordinates)
    return {Point.of(x, y) for x, y in coordinates[hull.vertices]}
