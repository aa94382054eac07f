import sys
import warnings

from typing import Iterable, Tuple

from convex_hull.geometry_library import LEFT, RIGHT, point_distance, point_location
from convex_hull.hull_errors import DeepRecursionWarning, NonEmptyDestinationError
from convex_hull.point_sequence import Point, PointSequence


def extreme_point_indices(points: PointSequence) -> Tuple[int, int]:
    """ Indices of the leftmost and rightmost points, compared by (x, y).

        Among points sharing the minimum x the lowest is taken, among those sharing the maximum x the highest,
        so both are hull corners. Exact duplicates resolve to the first index.
        Both indices are equal only when every point has the same coordinates.
    """
    min_index, max_index = 0, 0
    min_point = max_point = points.get(0)

    for index in range(1, points.size()):
        point = points.get(index)
        if point < min_point:
            min_point = point
            min_index = index
        if point > max_point:
            max_point = point
            max_index = index
    return min_index, max_index


def furthest_point_index(a: Point, b: Point, point_set: PointSequence) -> int:
    """ First index with the largest distance from segment ab """
    furthest_index = 0
    furthest_distance = -1
    for index, point in enumerate(point_set):
        distance = point_distance(a, b, point)
        if distance > furthest_distance:
            furthest_distance = distance
            furthest_index = index
    return furthest_index


def points_left_of(a: Point, b: Point, point_set: PointSequence) -> PointSequence:
    left_set = PointSequence()
    for point in point_set:
        if point_location(a, b, point) == LEFT:
            left_set.append(point)
    return left_set


def hull_set(p1: Point, p2: Point, point_set: PointSequence, hull: PointSequence) -> None:
    """ Inserts into hull, just before p2, the hull points of point_set lying left of p1 -> p2.
        point_set must only hold points strictly left of p1 -> p2. It is consumed.
    """
    if point_set.is_empty():
        return None

    insert_position = hull.index_of(p2)

    if point_set.size() == 1:
        hull.insert_at(point_set.remove_at(0), insert_position)
        return None

    furthest = point_set.remove_at(furthest_point_index(p1, p2, point_set))
    hull.insert_at(furthest, insert_position)

    # Points inside triangle (p1, furthest, p2) are left of neither edge and get dropped here
    left_set_p1_furthest = points_left_of(p1, furthest, point_set)
    left_set_furthest_p2 = points_left_of(furthest, p2, point_set)

    hull_set(p1, furthest, left_set_p1_furthest, hull)
    hull_set(furthest, p2, left_set_furthest_p2, hull)
    return None


def quickhull(src: PointSequence, dest: PointSequence) -> PointSequence:
    """ Builds the convex hull of src into dest, which must be empty.

        The extreme points are removed from src, the remaining points are left in it.
        dest ends up as: points right of A -> B, A, points left of A -> B, B.
        With the y axis pointing up this walks the boundary clockwise.
    :param src: Points to build the convex hull of
    :param dest: Empty sequence that receives the hull points
    :return: dest
    """
    if dest.size() != 0:
        raise NonEmptyDestinationError(dest.size())

    if src.size() < 3:
        # Too few points to form a polygon, all of them are on the hull
        for point in src:
            dest.append(point)
        return dest

    min_index, max_index = extreme_point_indices(src)

    a = src.get(min_index)
    b = src.get(max_index)

    dest.append(a)
    if min_index == max_index:
        # Every point coincides with a
        src.remove_at(min_index)
        return dest
    dest.append(b)

    # Larger index first, so the other index stays valid
    for index in sorted((min_index, max_index), reverse=True):
        src.remove_at(index)

    left_of_ab = PointSequence()
    right_of_ab = PointSequence()
    for point in src:
        location = point_location(a, b, point)
        if location == LEFT:
            left_of_ab.append(point)
        elif location == RIGHT:
            right_of_ab.append(point)

    hull_set(a, b, left_of_ab, dest)
    hull_set(b, a, right_of_ab, dest)
    return dest


def compute_hull(src: PointSequence) -> PointSequence:
    """ Convex hull of src as a new sequence. src is consumed. """
    recursion_limit = sys.getrecursionlimit()
    if src.size() > recursion_limit:
        warnings.warn(DeepRecursionWarning(src.size(), recursion_limit))

    return quickhull(src, PointSequence())


def convex_hull(points: Iterable) -> PointSequence:
    """ Convex hull of any iterable of (x, y) integer pairs, the input is left untouched """
    return compute_hull(PointSequence(points))
