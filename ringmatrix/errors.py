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
"""Exceptions raised by matrix construction, access and arithmetic"""

from typing import Tuple

Shape = Tuple[int, int]


class MatrixError(Exception):
    """Base class for all errors raised by ringmatrix"""


class ShapeMismatchError(MatrixError, ValueError):
    """
    Operand shapes are incompatible for the requested operation.

    Raised before any element is computed, so no partial result ever exists.

    Args:
        operation: Name of the failing operation ('addition' or 'multiplication')
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
    """

    def __init__(self, operation: str, left_shape: Shape, right_shape: Shape):
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape
        if operation == 'multiplication':
            detail = f"inner dimensions differ ({left_shape[1]} != {right_shape[0]})"
        else:
            detail = "shapes must be identical"
        super().__init__(f"Matrix dimensions incompatible for {operation}: "
                         f"{left_shape[0]}x{left_shape[1]} vs {right_shape[0]}x{right_shape[1]}, {detail}")


class MatrixIndexError(MatrixError, IndexError):
    """Element access outside [0, rows) x [0, cols)"""

    def __init__(self, index, shape: Shape):
        self.index = index
        self.shape = shape
        super().__init__(f"Index {index} out of range for {shape[0]}x{shape[1]} matrix")


class InvalidConstructionError(MatrixError, ValueError):
    """Input rows are empty, zero-column, jagged, not sequences or hold unconvertible elements"""


class ElementTypeError(MatrixError, TypeError):
    """A value cannot be represented exactly as the element type of a matrix"""

    def __init__(self, value, number_class: type):
        self.value = value
        self.number_class = number_class
        super().__init__(f"Cannot convert {type(value).__name__} value {value!r} to {number_class.__name__}")


class UnsupportedElementError(MatrixError, TypeError):
    """No NumberOperations are registered for an element type"""

    def __init__(self, number_class: type):
        self.number_class = number_class
        super().__init__(f"No number operations registered for element type {number_class.__module__}."
                         f"{number_class.__qualname__}; use register_operations() to add them")


__all__ = [
    'MatrixError',
    'ShapeMismatchError',
    'MatrixIndexError',
    'InvalidConstructionError',
    'UnsupportedElementError',
    'ElementTypeError',
]
