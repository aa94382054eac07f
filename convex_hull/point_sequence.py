from __future__ import annotations

import operator
from typing import Iterable, Iterator, List, NamedTuple

import numpy as np
from prettytable import PrettyTable

from convex_hull.hull_errors import AllocationFailureError, EmptyContainerError, IndexOutOfRangeError

INITIAL_CAPACITY = 16
GROWTH_RATE = 2
NOT_FOUND = -1


class Point(NamedTuple):
    x: int
    y: int

    def __repr__(self):
        return f'({self.x}, {self.y})'

    @classmethod
    def of(cls, x, y) -> Point:
        """ Accepts python or numpy integers, raises TypeError for anything else (e.g. floats) """
        return cls(operator.index(x), operator.index(y))


def as_point(point_like) -> Point:
    x, y = point_like
    return Point.of(x, y)


def allocate_buffer(capacity: int) -> np.ndarray:
    return np.empty((capacity, 2), dtype=np.int64)


class PointSequence:
    """ Growable ordered storage of 2D integer points.

        Points live in a (capacity, 2) int64 buffer. The buffer starts with INITIAL_CAPACITY rows and is
        multiplied by GROWTH_RATE whenever an insertion finds it full. It never shrinks.
    """
    def __init__(self, points: Iterable = None):
        self.__capacity = INITIAL_CAPACITY
        self.__size = 0
        self.__points = allocate_buffer(self.__capacity)

        if points is not None:
            for point in points:
                self.append(point)

    def __len__(self):
        return self.__size

    def __getitem__(self, idx: int) -> Point:
        return self.get(idx)

    def __iter__(self) -> Iterator[Point]:
        for idx in range(self.__size):
            yield self.get(idx)

    def __contains__(self, point) -> bool:
        try:
            return self.index_of(point) != NOT_FOUND
        except (TypeError, ValueError):
            # Not an integer pair, so it cannot be stored here
            return False

    def __eq__(self, other):
        if not isinstance(other, PointSequence):
            return NotImplemented
        return self.to_list() == other.to_list()

    def __repr__(self):
        return f'PointSequence({self.to_list()})'

    @property
    def capacity(self) -> int:
        return self.__capacity

    def size(self) -> int:
        return self.__size

    def is_empty(self) -> bool:
        return self.__size == 0

    def get(self, idx: int) -> Point:
        idx = operator.index(idx)
        if idx < 0 or idx >= self.__size:
            raise IndexOutOfRangeError(idx, self.__size)
        x, y = self.__points[idx].tolist()
        return Point(x, y)

    def index_of(self, point) -> int:
        """ First index holding the same coordinates as point, NOT_FOUND otherwise """
        target = list(as_point(point))
        for idx, row in enumerate(self.__points[:self.__size].tolist()):
            if row == target:
                return idx
        return NOT_FOUND

    def insert_at(self, point, idx: int) -> None:
        idx = operator.index(idx)
        if idx < 0 or idx > self.__size:
            raise IndexOutOfRangeError(idx, self.__size)

        # Converted before any shifting so an out of range coordinate leaves the sequence untouched
        row = np.array(as_point(point), dtype=np.int64)

        if self.__capacity == self.__size:
            self.__reshape()

        self.__points[idx + 1:self.__size + 1] = self.__points[idx:self.__size]
        self.__points[idx] = row
        self.__size += 1
        return None

    def append(self, point) -> None:
        self.insert_at(point, self.__size)
        return None

    def remove_at(self, idx: int) -> Point:
        if self.__size == 0:
            raise EmptyContainerError('remove')
        idx = operator.index(idx)
        if idx < 0 or idx >= self.__size:
            raise IndexOutOfRangeError(idx, self.__size)

        point = self.get(idx)
        self.__points[idx:self.__size - 1] = self.__points[idx + 1:self.__size]
        self.__size -= 1
        return point

    def pop_last(self) -> Point:
        if self.__size == 0:
            raise EmptyContainerError('pop')
        point = self.get(self.__size - 1)
        self.__size -= 1
        return point

    def copy(self) -> PointSequence:
        return PointSequence(self)

    def to_list(self) -> List[Point]:
        return [Point(x, y) for x, y in self.__points[:self.__size].tolist()]

    def to_array(self) -> np.ndarray:
        return self.__points[:self.__size].copy()

    def to_table(self) -> PrettyTable:
        table = PrettyTable(["Index", "x", "y"])
        for idx in range(self.size()):
            point = self.get(idx)
            table.add_row([f'p_{idx}', point.x, point.y])
        return table

    def print_table(self, title: str = 'Polygon') -> None:
        print(f'\t {title}')
        print(self.to_table())
        return None

    def __reshape(self) -> None:
        new_capacity = self.__capacity * GROWTH_RATE
        try:
            new_points = allocate_buffer(new_capacity)
        except MemoryError as error:
            raise AllocationFailureError(new_capacity) from error

        new_points[:self.__size] = self.__points[:self.__size]
        self.__points = new_points
        self.__capacity = new_capacity
        return None
