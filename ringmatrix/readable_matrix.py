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
"""
ReadableMatrix interface.

Matrices can be read but not modified through this interface. Arithmetic in
MatrixOperations is written against it only, so it does not depend on how a
matrix stores its entries.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Tuple

from .number_operations import N, NumberOperations


class ReadableMatrix(ABC, Generic[N]):
    """
    Read-only, rectangular, row-major matrix of elements of type N.
    """

    @abstractmethod
    def get_row_count(self) -> int:
        """Get number of rows in the matrix"""

    @abstractmethod
    def get_column_count(self) -> int:
        """Get number of columns in the matrix"""

    @abstractmethod
    def get_number_value_at(self, row: int, col: int) -> N:
        """Get the value at the specified position, without bounds or copy semantics"""

    @abstractmethod
    def get_number_operations(self) -> NumberOperations[N]:
        """Get the NumberOperations instance for this matrix's element type"""

    @abstractmethod
    def new_instance_from_data(self, data: List[List[N]]) -> 'ReadableMatrix[N]':
        """Create a new matrix of the same kind and element operations from row data"""

    def size(self) -> Tuple[int, int]:
        """Return the shape as (rows, cols)"""
        return self.get_row_count(), self.get_column_count()

    def get_number_rows(self) -> List[List[N]]:
        """Copy all values out as a list of row lists"""
        ops = self.get_number_operations()
        return [[ops.copy(self.get_number_value_at(row, col))
                 for col in range(self.get_column_count())]
                for row in range(self.get_row_count())]

    def __str__(self) -> str:
        """Single line string representation"""
        return self._matrix_to_string("{", " }", " [", "]", "", "", "", ", ")

    def to_multiline_string(self) -> str:
        """Multi-line string representation"""
        return self._matrix_to_string("{\n", "}\n", " [", "]\n", "", " ", "", ",")

    def _matrix_to_string(self, prefix: str, postfix: str, row_prefix: str,
                          row_postfix: str, row_separator: str, col_prefix: str,
                          col_postfix: str, col_separator: str) -> str:
        result = [prefix]
        for row in range(self.get_row_count()):
            if row > 0:
                result.append(row_separator)
            result.append(row_prefix)
            for col in range(self.get_column_count()):
                if col > 0:
                    result.append(col_separator)
                result.append(col_prefix)
                result.append(str(self.get_number_value_at(row, col)))
                result.append(col_postfix)
            result.append(row_postfix)
        result.append(postfix)
        return ''.join(result)


__all__ = ['ReadableMatrix']
