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
Matrix arithmetic over arbitrary element types.

MatrixOperations implements addition, multiplication and equality against the
ReadableMatrix interface. All element arithmetic goes through the left
operand's NumberOperations, which also convert the right operand's entries,
so the same code serves int, Fraction, sympy.Rational, float and numpy
scalars. Operand shapes are validated before any element is touched, and
operands are never modified.
"""

import logging

from .errors import ShapeMismatchError
from .readable_matrix import ReadableMatrix

LOG = logging.getLogger(__name__)


class MatrixOperations:
    """
    Addition, multiplication and equality of readable matrices.

    Stateless; use the singleton returned by instance().
    """

    _instance = None

    @classmethod
    def instance(cls) -> 'MatrixOperations':
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def add_matrix(self, matrix_a: ReadableMatrix, matrix_b: ReadableMatrix) -> ReadableMatrix:
        """
        Add two matrices element-wise.

        Args:
            matrix_a: Left operand, its element operations are used
            matrix_b: Right operand, same shape as matrix_a

        Returns:
            New matrix with C[i][j] = A[i][j] + B[i][j]

        Raises:
            ShapeMismatchError: if the shapes differ
            ElementTypeError: if an element of matrix_b cannot be converted to
                matrix_a's element type
        """
        if matrix_a.size() != matrix_b.size():
            raise ShapeMismatchError('addition', matrix_a.size(), matrix_b.size())

        rows, cols = matrix_a.size()
        LOG.debug(f"Adding {rows}x{cols} matrices.")
        ops = matrix_a.get_number_operations()
        data = [[ops.add(matrix_a.get_number_value_at(row, col),
                         ops.value_of(matrix_b.get_number_value_at(row, col)))
                 for col in range(cols)]
                for row in range(rows)]
        return matrix_a.new_instance_from_data(data)

    def multiply_matrix(self, matrix_a: ReadableMatrix, matrix_b: ReadableMatrix) -> ReadableMatrix:
        """
        Multiply two matrices (standard matrix product).

        Each entry starts from the additive identity and accumulates the
        products A[i][k] * B[k][j] for k = 0, 1, ..., m-1 in that order, with
        the running sum always on the left. Element types whose arithmetic is
        not associative (floats) therefore give reproducible results.

        Args:
            matrix_a: Left operand of shape (r, m), its element operations are used
            matrix_b: Right operand of shape (m, c)

        Returns:
            New matrix of shape (r, c)

        Raises:
            ShapeMismatchError: if matrix_a's column count differs from matrix_b's row count
            ElementTypeError: if an element of matrix_b cannot be converted to
                matrix_a's element type
        """
        if matrix_a.get_column_count() != matrix_b.get_row_count():
            raise ShapeMismatchError('multiplication', matrix_a.size(), matrix_b.size())

        rows, mid = matrix_a.size()
        cols = matrix_b.get_column_count()
        LOG.debug(f"Multiplying {rows}x{mid} by {mid}x{cols} matrix.")
        ops = matrix_a.get_number_operations()
        data = []
        for row in range(rows):
            data_row = []
            for col in range(cols):
                sum_value = ops.zero()
                for k in range(mid):
                    product = ops.multiply(matrix_a.get_number_value_at(row, k),
                                           ops.value_of(matrix_b.get_number_value_at(k, col)))
                    sum_value = ops.add(sum_value, product)
                data_row.append(sum_value)
            data.append(data_row)
        return matrix_a.new_instance_from_data(data)

    def equals(self, matrix_a: ReadableMatrix, matrix_b: ReadableMatrix) -> bool:
        """
        Compare shapes, then entries in row-major order, stopping at the first
        mismatch. Never raises for readable matrices.
        """
        if matrix_a.size() != matrix_b.size():
            return False
        ops = matrix_a.get_number_operations()
        for row in range(matrix_a.get_row_count()):
            for col in range(matrix_a.get_column_count()):
                if not ops.equals(matrix_a.get_number_value_at(row, col), matrix_b.get_number_value_at(row, col)):
                    LOG.debug(f"Matrices differ at ({row}, {col}).")
                    return False
        return True


__all__ = ['MatrixOperations']
