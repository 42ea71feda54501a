"""Tests for the GenericArray class."""

import numpy as np
import pytest
from lifeboard.core.array import GenericArray, product


class TestGenericArray:
    """Test cases for the GenericArray class."""

    def test_initialization(self):
        """Test array creation with a fill value."""
        arr = GenericArray((3, 4), 7)
        assert arr.dims == (3, 4)
        assert arr.size == 12
        assert len(arr.raw_data()) == 12
        assert all(value == 7 for value in arr.raw_data())

    def test_zero_dimensions_rejected(self):
        """Test that an array needs at least one dimension."""
        with pytest.raises(ValueError):
            GenericArray((), 0)

        with pytest.raises(ValueError):
            GenericArray.from_data((), [])

    def test_three_dimensions(self):
        """Test that dimensionality isn't limited to 2."""
        arr = GenericArray((2, 3, 4), 0)
        arr[(1, 2, 3)] = 5
        assert arr[(1, 2, 3)] == 5
        assert arr.linear_index((1, 2, 3)) == 1 + 2 * 2 + 3 * 6

    def test_from_data_length_mismatch(self):
        """Test that data must match the dimensions."""
        with pytest.raises(ValueError):
            GenericArray.from_data((2, 2), [1, 2, 3])

    def test_from_data_linear_order(self):
        """Test that flat data is laid out with dimension 0 fastest."""
        arr = GenericArray.from_data((3, 2), [0, 1, 2, 3, 4, 5])
        assert arr[(0, 0)] == 0
        assert arr[(1, 0)] == 1
        assert arr[(2, 0)] == 2
        assert arr[(0, 1)] == 3
        assert arr[(2, 1)] == 5

    def test_linear_index(self):
        """Test mixed-radix linearization."""
        arr = GenericArray((4, 5), 0)
        assert arr.linear_index((0, 0)) == 0
        assert arr.linear_index((3, 0)) == 3
        assert arr.linear_index((0, 1)) == 4
        assert arr.linear_index((3, 4)) == 19

    def test_get_set(self):
        """Test basic element access."""
        arr = GenericArray((3, 3), 0)
        arr.set((1, 2), 9)
        assert arr.get((1, 2)) == 9
        assert arr.get((2, 1)) == 0

    def test_get_returns_python_scalar(self):
        """Test that numpy scalars are unwrapped."""
        arr = GenericArray((2, 2), 3)
        value = arr.get((0, 0))
        assert type(value) is int

    def test_out_of_bounds(self):
        """Test that raw indexing never wraps."""
        arr = GenericArray((3, 3), 0)

        with pytest.raises(IndexError):
            arr.get((3, 0))

        with pytest.raises(IndexError):
            arr.get((0, 3))

        with pytest.raises(IndexError):
            arr.get((-1, 0))

        with pytest.raises(IndexError):
            arr.set((0, -1), 1)

        with pytest.raises(IndexError):
            arr.get((0,))

        assert not arr.check_index((3, 0))
        assert arr.check_index((2, 2))

    def test_iterate_order(self):
        """Test that iteration follows linear order."""
        arr = GenericArray.from_data((2, 3), list(range(6)))
        items = list(arr.iterate())

        assert [index for index, _ in items] == [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2)]
        assert [value for _, value in items] == list(range(6))

    def test_iterate_restartable(self):
        """Test that iteration can be repeated."""
        arr = GenericArray((2, 2), 1)
        assert list(arr) == list(arr)
        assert len(list(arr.iterate())) == 4

    def test_raw_data_matches_iteration(self):
        """Test that raw data is in the same order as iteration."""
        arr = GenericArray((3, 2), 0)
        arr[(2, 0)] = 1
        arr[(0, 1)] = 2

        assert list(arr.raw_data()) == [value for _, value in arr.iterate()]
        assert list(arr.raw_data()) == [0, 0, 1, 2, 0, 0]

    def test_raw_data_is_a_copy(self):
        """Test that modifying raw data doesn't touch the array."""
        arr = GenericArray((2, 2), 0)
        data = arr.raw_data()
        data[0] = 5
        assert arr[(0, 0)] == 0

    def test_copy_from(self):
        """Test copying between arrays."""
        source = GenericArray.from_data((2, 2), [1, 2, 3, 4])
        target = GenericArray((2, 2), 0)

        target.copy_from(source)
        assert target == source

        source[(0, 0)] = 9
        assert target[(0, 0)] == 1

    def test_copy_from_dimension_mismatch(self):
        """Test that copying requires matching dimensions."""
        with pytest.raises(ValueError):
            GenericArray((2, 2), 0).copy_from(GenericArray((2, 3), 0))

    def test_equality(self):
        """Test array equality."""
        assert GenericArray((2, 2), 1) == GenericArray((2, 2), 1)
        assert GenericArray((2, 2), 1) != GenericArray((2, 2), 0)
        assert GenericArray((2, 2), 1) != GenericArray((4, 1), 1)
        assert GenericArray((2, 2), 1) != "not an array"

    def test_object_elements(self):
        """Test storing arbitrary Python objects."""
        arr = GenericArray((2, 1), None, dtype=object)
        arr[(1, 0)] = "x"
        assert arr[(0, 0)] is None
        assert arr[(1, 0)] == "x"

    def test_from_array(self):
        """Test wrapping a numpy array."""
        source = np.arange(6).reshape(2, 3)
        arr = GenericArray.from_array(source)

        assert arr.dims == (2, 3)
        assert arr[(1, 2)] == 5

        source[1, 2] = 0
        assert arr[(1, 2)] == 5

    def test_product(self):
        """Test the dimension product helper."""
        assert product((3, 4)) == 12
        assert product((5,)) == 5
        assert product((2, 0)) == 0
