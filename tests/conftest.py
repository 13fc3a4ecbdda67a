import pytest
from fractions import Fraction
import numpy as np
from sympy import Integer
from ringmatrix import NumberOperations, IntegerOperations, Matrix

# Element backends: name -> converter from a Python int
backends = {
    'int': int,
    'fraction': Fraction,
    'float': float,
    'sympy': Integer,
    'numpy_int64': np.int64,
    'numpy_float64': np.float64,
}

# Exact backends, safe for algebraic identities on arbitrary values
exact_backends = ['int', 'fraction', 'sympy']


@pytest.fixture(params=sorted(backends), scope="session")
def to_element(request: pytest.FixtureRequest):
    """Provide session-level fixture converting ints to each element backend."""
    return backends[request.param]


@pytest.fixture(params=exact_backends, scope="session")
def to_exact_element(request: pytest.FixtureRequest):
    """Provide session-level fixture converting ints to exact element backends."""
    return backends[request.param]


@pytest.fixture(scope="session")
def make_matrix():
    """Build a matrix from int rows, converting every entry with the given backend."""

    def make(rows, convert=int):
        return Matrix([[convert(v) for v in row] for row in rows])

    return make


class CountingIntegerOperations(IntegerOperations):
    """Integer operations that count how often each operation is called"""

    def __init__(self):
        self.calls = {'add': 0, 'multiply': 0, 'equals': 0}

    def add(self, num_a, num_b):
        self.calls['add'] += 1
        return super().add(num_a, num_b)

    def multiply(self, num_a, num_b):
        self.calls['multiply'] += 1
        return super().multiply(num_a, num_b)

    def equals(self, num_a, num_b):
        self.calls['equals'] += 1
        return super().equals(num_a, num_b)


@pytest.fixture
def counting_ops() -> CountingIntegerOperations:
    """Provide fresh counting integer operations (not the shared singleton)."""
    return CountingIntegerOperations()


class Mod7:
    """Integers modulo 7, a ring with no built-in operations registered"""

    def __init__(self, value: int):
        self.value = value % 7

    def __add__(self, other):
        return Mod7(self.value + other.value)

    def __mul__(self, other):
        return Mod7(self.value * other.value)

    def __eq__(self, other):
        return isinstance(other, Mod7) and self.value == other.value

    def __hash__(self):
        return hash(('Mod7', self.value))

    def __repr__(self):
        return f"Mod7({self.value})"


class Mod7Operations(NumberOperations):

    def number_class(self):
        return Mod7

    def zero(self):
        return Mod7(0)

    def one(self):
        return Mod7(1)


class Word:
    """Free monoid on strings: + and * both concatenate, so order is observable"""

    def __init__(self, *letters):
        self.letters = tuple(letters)

    def __add__(self, other):
        return Word(*(self.letters + other.letters))

    def __mul__(self, other):
        return Word(*(self.letters + other.letters))

    def __eq__(self, other):
        return isinstance(other, Word) and self.letters == other.letters

    def __hash__(self):
        return hash(self.letters)

    def __repr__(self):
        return f"Word{self.letters!r}"


class WordOperations(NumberOperations):

    def number_class(self):
        return Word

    def zero(self):
        return Word()

    def one(self):
        return Word()


@pytest.fixture
def registered_custom_types(monkeypatch):
    """Register Mod7 and Word for the duration of one test and return both classes."""
    from ringmatrix import number_operations
    monkeypatch.setitem(number_operations._REGISTRY, Mod7, Mod7Operations)
    monkeypatch.setitem(number_operations._REGISTRY, Word, WordOperations)
    return Mod7, Word
