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
Element capability contracts for matrix entries.

A matrix never inspects its entries directly. Everything it needs from the
element type (identities, arithmetic, conversion, copying and exact equality)
is provided by a NumberOperations instance. Each element family supplies its
own operations class, so machine integers, exact rationals, floats and numpy
scalars are all handled the same way by the matrix code.

Operations classes are looked up through a registry keyed by element type:

    >>> from fractions import Fraction
    >>> ops = operations_for(Fraction(1, 3))
    >>> ops.zero(), ops.one()
    (Fraction(0, 1), Fraction(1, 1))
"""

from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Any, Dict, Generic, Protocol, Type, TypeVar
import logging
import numbers

import numpy as np
from sympy import Integer, Rational

from .errors import ElementTypeError, UnsupportedElementError

LOG = logging.getLogger(__name__)


class RingElement(Protocol):
    """Operator side of the element bound: closed under + and *, exact =="""

    def __add__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...

    def __eq__(self, other: Any) -> bool:
        ...


# Type variable for element types (int, Fraction, sympy.Rational, ...)
N = TypeVar('N', bound=RingElement)


class NumberOperations(ABC, Generic[N]):
    """
    Operations on the values of one element type.

    Subclasses must provide the two identities. The binary operations default
    to the element's own operators, and copy() defaults to returning the value
    unchanged, which is correct for immutable numbers.

    Instances are stateless singletons obtained through instance(), or through
    for_type() when the registry resolves an element type.
    """

    _instance = None

    @classmethod
    def instance(cls) -> 'NumberOperations':
        """Returns the singleton instance of this operations class."""
        # each subclass keeps its own singleton
        if cls.__dict__.get('_instance') is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def for_type(cls, number_class: type) -> 'NumberOperations':
        """Returns the operations serving number_class (the singleton unless overridden)."""
        return cls.instance()

    @abstractmethod
    def number_class(self) -> type:
        """Return the element type served by these operations"""

    @abstractmethod
    def zero(self) -> N:
        """Return the additive identity"""

    @abstractmethod
    def one(self) -> N:
        """Return the multiplicative identity"""

    def add(self, num_a: N, num_b: N) -> N:
        """Add two values"""
        return num_a + num_b

    def multiply(self, num_a: N, num_b: N) -> N:
        """Multiply two values"""
        return num_a * num_b

    def copy(self, number: N) -> N:
        """Duplicate a value"""
        return number

    def value_of(self, value: Any) -> N:
        """
        Return value as an instance of number_class().

        The base implementation accepts instances only. Subclasses widen this
        to the types they can represent exactly.

        Raises:
            ElementTypeError: if value cannot be represented
        """
        if isinstance(value, self.number_class()):
            return value
        raise ElementTypeError(value, self.number_class())

    def equals(self, num_a: N, num_b: N) -> bool:
        """Exact equality, always a plain bool"""
        return bool(num_a == num_b)

    def is_zero(self, number: N) -> bool:
        return self.equals(number, self.zero())

    def is_one(self, number: N) -> bool:
        return self.equals(number, self.one())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.number_class().__name__})"


class IntegerOperations(NumberOperations[int]):
    """Python int, arbitrary precision"""

    def number_class(self) -> type:
        return int

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def value_of(self, value: Any) -> int:
        if isinstance(value, int):
            return value
        elif isinstance(value, numbers.Integral):
            return int(value)
        raise ElementTypeError(value, int)


class FractionOperations(NumberOperations[Fraction]):
    """Exact rationals backed by fractions.Fraction"""

    ZERO = Fraction(0)
    ONE = Fraction(1)

    def number_class(self) -> type:
        return Fraction

    def zero(self) -> Fraction:
        return self.ZERO

    def one(self) -> Fraction:
        return self.ONE

    def value_of(self, value: Any) -> Fraction:
        if isinstance(value, Fraction):
            return value
        elif isinstance(value, Rational):
            return Fraction(int(value.p), int(value.q))
        elif isinstance(value, numbers.Integral):
            return Fraction(int(value))
        raise ElementTypeError(value, Fraction)


class FloatOperations(NumberOperations[float]):
    """
    IEEE doubles. Equality is exact (no tolerance), so results depend on the
    order of accumulation.

    NaN compares unequal to itself, so a matrix holding a NaN entry is not
    equal to itself either, while hashing still finds it in a set or dict
    by identity. Matrix equality is reflexive only for NaN-free matrices.
    """

    def number_class(self) -> type:
        return float

    def zero(self) -> float:
        return 0.0

    def one(self) -> float:
        return 1.0

    def value_of(self, value: Any) -> float:
        if isinstance(value, float):
            return value
        elif isinstance(value, numbers.Real):
            return float(value)
        raise ElementTypeError(value, float)


class SympyRationalOperations(NumberOperations[Rational]):
    """Exact rationals backed by sympy.Rational (sympy.Integer included)"""

    def number_class(self) -> type:
        return Rational

    def zero(self) -> Rational:
        return Integer(0)

    def one(self) -> Rational:
        return Integer(1)

    def value_of(self, value: Any) -> Rational:
        if isinstance(value, Rational):
            return value
        elif isinstance(value, Fraction):
            return Rational(value.numerator, value.denominator)
        elif isinstance(value, numbers.Integral):
            return Integer(int(value))
        raise ElementTypeError(value, Rational)


class NumpyNumberOperations(NumberOperations):
    """
    Numpy scalar types (numpy.int64, numpy.float32, ...).

    One instance exists per scalar type so that the identities carry the same
    dtype as the matrix entries. Fixed-width integer arithmetic wraps around
    as numpy defines it. Floating types share the NaN caveat of
    FloatOperations.
    """

    _by_type: Dict[type, 'NumpyNumberOperations'] = {}

    def __init__(self, scalar_type: Type[np.number]):
        self._scalar_type = scalar_type
        self._zero = scalar_type(0)
        self._one = scalar_type(1)

    @classmethod
    def for_type(cls, number_class: type) -> 'NumpyNumberOperations':
        operations = cls._by_type.get(number_class)
        if operations is None:
            operations = cls._by_type.setdefault(number_class, cls(number_class))
        return operations

    @classmethod
    def instance(cls) -> 'NumpyNumberOperations':
        raise TypeError("NumpyNumberOperations is per scalar type, use for_type()")

    def number_class(self) -> type:
        return self._scalar_type

    def zero(self):
        return self._zero

    def one(self):
        return self._one

    def value_of(self, value: Any):
        if isinstance(value, self._scalar_type):
            return value
        if np.issubdtype(self._scalar_type, np.integer):
            accepted = numbers.Integral
        elif np.issubdtype(self._scalar_type, np.floating):
            accepted = numbers.Real
        else:
            accepted = numbers.Number
        if not isinstance(value, accepted):
            raise ElementTypeError(value, self._scalar_type)
        try:
            return self._scalar_type(value)
        except (OverflowError, TypeError, ValueError) as err:
            raise ElementTypeError(value, self._scalar_type) from err


_REGISTRY: Dict[type, Type[NumberOperations]] = {}


def register_operations(number_class: type, operations_class: Type[NumberOperations]) -> None:
    """
    Register the operations class for an element type and its subclasses.

    This is the extension point for element types not supported out of the
    box. A later registration for the same type replaces the earlier one.

    Args:
        number_class: Element type, e.g. a user-defined ring element class
        operations_class: NumberOperations subclass serving that type
    """
    if not (isinstance(operations_class, type) and issubclass(operations_class, NumberOperations)):
        raise TypeError(f"operations_class must be a NumberOperations subclass, got {operations_class!r}")
    _REGISTRY[number_class] = operations_class
    LOG.debug(f"Registered {operations_class.__name__} for {number_class.__name__}.")


def operations_for(value: Any) -> NumberOperations:
    """
    Resolve the NumberOperations for a value.

    The value's type hierarchy is searched most-specific first, so a
    registration for a subclass wins over one for its base class.

    Args:
        value: A matrix element

    Returns:
        NumberOperations instance serving type(value)

    Raises:
        UnsupportedElementError: if nothing in the type hierarchy is registered
    """
    number_class = type(value)
    for base in number_class.__mro__:
        operations_class = _REGISTRY.get(base)
        if operations_class is not None:
            return operations_class.for_type(number_class)
    raise UnsupportedElementError(number_class)


register_operations(int, IntegerOperations)
register_operations(Fraction, FractionOperations)
register_operations(float, FloatOperations)
register_operations(Rational, SympyRationalOperations)
register_operations(np.number, NumpyNumberOperations)


__all__ = [
    'RingElement',
    'NumberOperations',
    'IntegerOperations',
    'FractionOperations',
    'FloatOperations',
    'SympyRationalOperations',
    'NumpyNumberOperations',
    'register_operations',
    'operations_for',
]
