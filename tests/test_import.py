"""Test if package imports successfully."""

import pytest


def test1():
    import ringmatrix
    for name in ringmatrix.__all__:
        assert hasattr(ringmatrix, name)
    a = ringmatrix.Matrix([[1, 2], [3, 4]])
    assert a * a == ringmatrix.Matrix([[7, 10], [15, 22]])
