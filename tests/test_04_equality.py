"""Matrix equality and its logging."""
from fractions import Fraction
import logging
import numpy as np
import pytest
from ringmatrix import Matrix, MatrixOperations, DisableLogger


def test_equality():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[1, 2], [3, 4]])
    assert a == b
    assert not (a != b)


def test_equality_reflexive_and_symmetric(make_matrix, to_element):
    a = make_matrix([[1, 2], [3, 4]], to_element)
    b = make_matrix([[1, 2], [3, 4]], to_element)
    c = make_matrix([[1, 2], [3, 5]], to_element)
    assert a == a
    assert (a == b) and (b == a)
    assert (a != c) and (c != a)


@pytest.mark.parametrize("left,right", [
    ([[1, 2], [3, 4]], [[1, 2, 3, 4]]),
    ([[1], [2]], [[1, 2]]),
    ([[0, 0]], [[0, 0], [0, 0]]),
])
def test_different_shapes_never_equal(left, right):
    assert Matrix(left) != Matrix(right)
    assert Matrix(right) != Matrix(left)
    assert not MatrixOperations.instance().equals(Matrix(left), Matrix(right))


def test_equality_returns_plain_bool():
    a = Matrix([[np.int64(1), np.int64(2)]])
    assert (a == Matrix([[np.int64(1), np.int64(2)]])) is True
    assert (a == Matrix([[np.int64(1), np.int64(3)]])) is False


def test_equality_across_backends():
    assert Matrix([[1, 2]]) == Matrix([[Fraction(1), Fraction(2)]])
    assert Matrix([[Fraction(1, 2)]]) != Matrix([[Fraction(1, 3)]])


def test_nan_entries_are_not_reflexive():
    a = Matrix([[float("nan"), 1.0]])
    assert a != a
    assert not (a == Matrix([[float("nan"), 1.0]]))
    # set membership checks identity before equality
    assert a in {a}
    assert Matrix([[np.float64("nan")]]) != Matrix([[np.float64("nan")]])


def test_comparison_with_other_types():
    a = Matrix([[1, 2], [3, 4]])
    assert (a == [[1, 2], [3, 4]]) is False
    assert (a != [[1, 2], [3, 4]]) is True
    assert a != None
    assert a != 1


def test_equality_short_circuits(counting_ops):
    a = Matrix([[1, 2, 3], [4, 5, 6]], operations=counting_ops)
    b = Matrix([[1, 0, 3], [4, 5, 6]])
    assert a != b
    # stops after (0, 0) and (0, 1)
    assert counting_ops.calls['equals'] == 2


def test_first_mismatch_logged(caplog):
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[1, 2], [0, 0]])
    with caplog.at_level(logging.DEBUG, logger="ringmatrix"):
        assert a != b
    messages = [record.getMessage() for record in caplog.records if record.name == "ringmatrix.matrix_operations"]
    assert messages == ["Matrices differ at (1, 0)."]


def test_disable_logger(caplog):
    a = Matrix([[1, 2]])
    b = Matrix([[2, 1]])
    with caplog.at_level(logging.DEBUG, logger="ringmatrix"):
        with DisableLogger():
            assert a != b
            a * Matrix([[1], [1]])
    assert caplog.records == []
