class IndexOutOfRangeError(IndexError):
    """ When an index does not address a valid slot of a PointSequence """
    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        self.message = f'Index {index} is out of range for a sequence of size {size}'
        super().__init__(self.message)


class EmptyContainerError(Exception):
    """ When an element is removed from an empty PointSequence """
    def __init__(self, operation: str = 'remove'):
        self.message = f'Cannot {operation} element from empty sequence'
        super().__init__(self.message)


class AllocationFailureError(MemoryError):
    """ When the point buffer cannot grow """
    def __init__(self, capacity: int):
        self.capacity = capacity
        self.message = f'Failed to allocate memory for {capacity} points'
        super().__init__(self.message)


class NonEmptyDestinationError(ValueError):
    def __init__(self, size: int):
        self.message = f'Quick Hull must be built on an empty sequence, the destination holds {size} points'
        super().__init__(self.message)


class DeepRecursionWarning(Warning):
    def __init__(self, number_of_points: int, recursion_limit: int):
        self.message = f'WARNING: {number_of_points} points exceeds the recursion limit ({recursion_limit}), ' \
                       f'collinear heavy input may exhaust the stack'

    def __str__(self):
        return repr(self.message)
