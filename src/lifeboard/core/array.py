"""Dense N-dimensional array with mixed-radix linear indexing."""

from typing import Any, Iterator, Sequence, Tuple
import numpy as np

Index = Tuple[int, ...]


class GenericArray:
    """Fixed-size dense container addressed by a full multi-index.

    Elements are laid out in "little-endian" mixed-radix order: dimension 0
    varies fastest, so index ``(i0, i1, ..., iN)`` lives at linear offset
    ``i0 + i1 * dims[0] + i2 * dims[0] * dims[1] + ...``. This is numpy's
    Fortran order, which is how the backing array is stored.

    Raw indexing never wraps or clamps. An out-of-range component is a
    programming error and raises ``IndexError``.
    """

    _dtype: Any = None

    def __init__(self, dims: Sequence[int], fill: Any, dtype: Any = None) -> None:
        """Create an array of ``product(dims)`` copies of ``fill``.

        Args:
            dims: Size of each dimension
            fill: Initial value of every element
            dtype: numpy dtype for storage (defaults to the class dtype)

        Raises:
            ValueError: If no dimensions are given
        """
        dims = tuple(int(d) for d in dims)
        if len(dims) == 0:
            raise ValueError("cannot have an array with 0 dimensions")

        if dtype is None:
            dtype = self._dtype

        self._dims = dims
        self._data = np.full(dims, fill, dtype=dtype, order="F")

    @classmethod
    def from_data(cls, dims: Sequence[int], data: Sequence[Any]) -> "GenericArray":
        """Create an array from a flat sequence in linear order.

        Args:
            dims: Size of each dimension
            data: Elements in linear order (dimension 0 fastest)

        Raises:
            ValueError: If the data length doesn't match the dimensions
        """
        dims = tuple(int(d) for d in dims)
        if len(dims) == 0:
            raise ValueError("cannot have an array with 0 dimensions")

        flat = np.asarray(data, dtype=cls._dtype).ravel()
        expected = product(dims)
        if flat.size != expected:
            raise ValueError(f"Data length {flat.size} doesn't match dimensions {dims} ({expected})")

        return cls._wrap(flat.reshape(dims, order="F"))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "GenericArray":
        """Create an array holding a copy of a numpy array of the same shape."""
        return cls._wrap(np.array(array, dtype=cls._dtype, order="F", copy=True))

    @classmethod
    def _wrap(cls, array: np.ndarray) -> "GenericArray":
        obj = cls.__new__(cls)
        obj._dims = tuple(int(d) for d in array.shape)
        obj._data = np.asfortranarray(array)
        return obj

    @property
    def dims(self) -> Index:
        """Size of each dimension."""
        return self._dims

    @property
    def size(self) -> int:
        """Total number of elements."""
        return int(self._data.size)

    @property
    def values(self) -> np.ndarray:
        """The backing numpy array, indexed ``[i0, i1, ...]``."""
        return self._data

    def check_index(self, index: Sequence[int]) -> bool:
        """Whether ``index`` addresses an element of this array."""
        if len(index) != len(self._dims):
            return False
        return all(0 <= i < dim for i, dim in zip(index, self._dims))

    def linear_index(self, index: Sequence[int]) -> int:
        """Map a multi-index to its offset in linear order.

        Raises:
            IndexError: If the index is out of range
        """
        self._require(index)
        offset = 0
        stride = 1
        for i, dim in zip(index, self._dims):
            offset += int(i) * stride
            stride *= dim
        return offset

    def get(self, index: Sequence[int]) -> Any:
        """Get the element at a full multi-index.

        Raises:
            IndexError: If any component is out of range
        """
        self._require(index)
        return self._item(self._data[tuple(index)])

    def set(self, index: Sequence[int], value: Any) -> None:
        """Set the element at a full multi-index.

        Raises:
            IndexError: If any component is out of range
        """
        self._require(index)
        self._data[tuple(index)] = value

    def iterate(self) -> Iterator[Tuple[Index, Any]]:
        """Yield ``(index, value)`` pairs in ascending linear order."""
        # ndindex runs the last axis fastest, so walk the reversed shape
        for reversed_index in np.ndindex(*reversed(self._dims)):
            index = tuple(reversed_index[::-1])
            yield index, self._item(self._data[index])

    def raw_data(self) -> np.ndarray:
        """Flat copy of the elements in linear order."""
        return self._data.ravel(order="F").copy()

    def copy(self) -> "GenericArray":
        """Return an independent copy of this array."""
        return self._wrap(self._data.copy(order="F"))

    def copy_from(self, other: "GenericArray") -> None:
        """Overwrite every element with the corresponding element of ``other``.

        Raises:
            ValueError: If the arrays have different dimensions
        """
        if other.dims != self.dims:
            raise ValueError(f"Array dimensions don't match: {other.dims} vs {self.dims}")

        self._data[...] = other._data

    def _require(self, index: Sequence[int]) -> None:
        if not self.check_index(index):
            raise IndexError(f"index {tuple(index)} out of bounds for dimensions {self._dims}")

    def _item(self, value: Any) -> Any:
        if isinstance(value, np.generic):
            return value.item()
        return value

    def __getitem__(self, index: Sequence[int]) -> Any:
        return self.get(index)

    def __setitem__(self, index: Sequence[int], value: Any) -> None:
        self.set(index, value)

    def __iter__(self) -> Iterator[Tuple[Index, Any]]:
        return self.iterate()

    def __len__(self) -> int:
        return self.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GenericArray):
            return False
        return self.dims == other.dims and np.array_equal(self._data, other._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dims={self._dims})"


def product(dims: Sequence[int]) -> int:
    """Number of elements spanned by ``dims``."""
    total = 1
    for dim in dims:
        total *= int(dim)
    return total
