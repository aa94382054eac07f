import os

import numpy as np
from dotenv import load_dotenv

from convex_hull.plotting import plot_hull
from convex_hull.point_sequence import Point, PointSequence
from convex_hull.quickhull import compute_hull

EXAMPLE_POINTS = (Point(12, 32), Point(45, 98), Point(65, 12), Point(10, 30))
EXPECTED_EXAMPLE_HULL = (Point(10, 30), Point(45, 98), Point(65, 12))


def hull_print_decorator(func: callable, symbol='-', number_of_symbol_per_line: int = 40) -> callable:
    def wrapper(*args, **kwargs):
        print(symbol * number_of_symbol_per_line)
        print(f"Running: {func.__name__}")
        hull = func(*args, **kwargs)
        print(f"Finished: {func.__name__}, {len(hull)} hull points")
        print(symbol * number_of_symbol_per_line)
        return hull
    return wrapper


@hull_print_decorator
def quickhull_example() -> PointSequence:
    points = PointSequence(EXAMPLE_POINTS)
    hull = compute_hull(points)

    print("Expected points:")
    for point in EXPECTED_EXAMPLE_HULL:
        print(point)

    print("\nResults:")
    hull.print_table()
    return hull


def random_points(number_of_points: int, seed: int = 0, coord_limit: int = 100) -> PointSequence:
    rng = np.random.default_rng(seed)
    coordinates = rng.integers(0, coord_limit, size=(number_of_points, 2))
    return PointSequence(coordinates)


@hull_print_decorator
def random_example(number_of_points: int, seed: int = 0, coord_limit: int = 100,
                   plot_path: str = None) -> PointSequence:
    points = random_points(number_of_points, seed=seed, coord_limit=coord_limit)
    hull = compute_hull(points.copy())
    hull.print_table(title=f"Hull of {number_of_points} random points")

    if plot_path:
        plot_hull(points, hull, save_path=plot_path)
        print(f"Saved plot to: {plot_path}")
    return hull


def main():
    load_dotenv()

    number_of_points = int(os.getenv("QUICKHULL_RANDOM_POINTS", "0"))
    seed = int(os.getenv("QUICKHULL_SEED", "0"))
    coord_limit = int(os.getenv("QUICKHULL_COORD_LIMIT", "100"))
    plot_path = os.getenv("QUICKHULL_PLOT_PATH")

    quickhull_example()

    if number_of_points > 0:
        random_example(number_of_points, seed=seed, coord_limit=coord_limit, plot_path=plot_path)


if __name__ == '__main__':
    main()
