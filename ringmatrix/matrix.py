#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Dense, immutable matrix value type over generic ring elements"""

from collections.abc import Iterable, Mapping, Set
from typing import Any, List, Optional, Sequence
import logging
import operator

from .errors import ElementTypeError, InvalidConstructionError, MatrixIndexError
from .matrix_operations import MatrixOperations
from .number_operations import N, NumberOperations, operations_for
from .readable_matrix import ReadableMatrix

LOG = logging.getLogger(__name__)


def _as_row_list(value: Any, what: str) -> list:
    if isinstance(value, (str, bytes, Mapping, Set)) or not isinstance(value, Iterable):
        raise InvalidConstructionError(f"{what} must be a sequence, got {type(value).__name__}")
    return list(value)


class Matrix(ReadableMatrix[N]):
    """
    Fixed-size, dense, row-major matrix of ring elements.

    A matrix is built once from a rectangular structure of rows and never
    changes afterwards; addition and multiplication return new matrices.
    The element type only needs to provide NumberOperations (see
    ringmatrix.number_operations), which are looked up from the first
    element unless given explicitly. Every element is converted to the
    element type of those operations, so Matrix([[1, 2]], operations=
    FractionOperations.instance()) holds Fractions.

        >>> a = Matrix([[1, 2], [3, 4]])
        >>> b = Matrix([[5, 6], [7, 8]])
        >>> a * b == Matrix([[19, 22], [43, 50]])
        True

    Args:
        rows: Non-empty iterable of rows, each a non-empty iterable of
            elements, all rows of equal length
        operations: NumberOperations for the element type. Inferred from the
            element at (0, 0) when omitted.

    Raises:
        InvalidConstructionError: for empty, zero-column or jagged input, or
            an element the operations cannot represent exactly
        UnsupportedElementError: if operations are omitted and the element
            type has none registered
    """

    def __init__(self, rows: Sequence[Sequence[N]], operations: Optional[NumberOperations[N]] = None):
        row_list = _as_row_list(rows, "rows")
        if not row_list:
            raise InvalidConstructionError("matrix needs at least one row")
        checked_rows = [_as_row_list(row, f"row {index}") for index, row in enumerate(row_list)]
        column_count = len(checked_rows[0])
        if column_count == 0:
            raise InvalidConstructionError("first row is empty, matrices need at least one column")
        for index, row in enumerate(checked_rows):
            if len(row) != column_count:
                raise InvalidConstructionError(f"row {index} has {len(row)} elements, expected {column_count}")

        if operations is None:
            operations = operations_for(checked_rows[0][0])
        elif not isinstance(operations, NumberOperations):
            raise TypeError(f"operations must be a NumberOperations instance, got {type(operations).__name__}")

        self._operations = operations
        self._row_count = len(checked_rows)
        self._column_count = column_count
        self._rows = tuple(tuple(self._element(operations, value, row_index, col_index)
                                 for col_index, value in enumerate(row))
                           for row_index, row in enumerate(checked_rows))
        LOG.debug(f"Created {self._row_count}x{self._column_count} matrix with {operations!r}.")

    @staticmethod
    def _element(operations: NumberOperations[N], value: Any, row: int, col: int) -> N:
        try:
            return operations.copy(operations.value_of(value))
        except ElementTypeError as err:
            raise InvalidConstructionError(f"element at ({row}, {col}): {err}") from err

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[N]], operations: Optional[NumberOperations[N]] = None) -> 'Matrix[N]':
        """Build a matrix from rows, same as calling Matrix(rows)"""
        return cls(rows, operations=operations)

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def column_count(self) -> int:
        return self._column_count

    def get_row_count(self) -> int:
        return self._row_count

    def get_column_count(self) -> int:
        return self._column_count

    def get_number_operations(self) -> NumberOperations[N]:
        return self._operations

    def get_number_value_at(self, row: int, col: int) -> N:
        return self._rows[row][col]

    def new_instance_from_data(self, data: List[List[N]]) -> 'Matrix[N]':
        return type(self)(data, operations=self._operations)

    def at(self, row: int, col: int) -> N:
        """
        Return a copy of the element at zero-based (row, col).

        Negative indices are not wrapped around.

        Raises:
            MatrixIndexError: if row or col is outside the matrix
            TypeError: if an index is not an integer
        """
        try:
            row, col = operator.index(row), operator.index(col)
        except TypeError as err:
            raise TypeError(f"matrix indices must be integers, got ({row!r}, {col!r})") from err
        if not (0 <= row < self._row_count and 0 <= col < self._column_count):
            raise MatrixIndexError((row, col), self.size())
        return self._operations.copy(self._rows[row][col])

    def __getitem__(self, key) -> N:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("matrix index must be a (row, col) pair")
        return self.at(*key)

    def __add__(self, other):
        if not isinstance(other, ReadableMatrix):
            return NotImplemented
        return MatrixOperations.instance().add_matrix(self, other)

    def __mul__(self, other):
        if not isinstance(other, ReadableMatrix):
            return NotImplemented
        return MatrixOperations.instance().multiply_matrix(self, other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ReadableMatrix):
            return NotImplemented
        return MatrixOperations.instance().equals(self, other)

    def __hash__(self) -> int:
        return hash((self.size(), self._rows))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[list(row) for row in self._rows]!r})"


__all__ = ['Matrix']
