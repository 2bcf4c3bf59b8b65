"""
Grid traversal sequences

Each traversal is a small re-iterable object rather than a one-shot
generator: iterating it twice walks the grid twice, and its length is known
before iterating.
"""

from maze.coordinates import Coordinate


class CellIter:
    """Row-major traversal of every cell in a grid"""

    def __init__(self, row_length, column_length):
        self.row_length = row_length
        self.column_length = column_length

    def __iter__(self):
        for y in range(self.column_length):
            for x in range(self.row_length):
                yield Coordinate(x, y)

    def __len__(self):
        return self.row_length * self.column_length

    def __repr__(self):
        return f"CellIter({self.row_length}x{self.column_length})"


class BatchIter:
    """
    Traversal of a grid in batches, either row by row (each row left to
    right) or column by column (each column top to bottom).
    """
    ROWS = "rows"
    COLUMNS = "columns"

    def __init__(self, batch_type, row_length, column_length):
        if batch_type not in (self.ROWS, self.COLUMNS):
            raise ValueError(f"Unknown batch type: {batch_type!r}")
        self.batch_type = batch_type
        self.row_length = row_length
        self.column_length = column_length

    def __iter__(self):
        if self.batch_type == self.ROWS:
            for y in range(self.column_length):
                yield [Coordinate(x, y) for x in range(self.row_length)]
        else:
            for x in range(self.row_length):
                yield [Coordinate(x, y) for y in range(self.column_length)]

    def __len__(self):
        if self.batch_type == self.ROWS:
            return self.column_length
        return self.row_length

    def __repr__(self):
        return f"BatchIter({self.batch_type}, {self.row_length}x{self.column_length})"
