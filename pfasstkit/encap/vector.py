# Copyright (c) 2024 The pfasstkit developers
import logging
from typing import Iterable, Iterator, Optional, Self, Sequence

from pfasstkit.base.encapsulation import EncapFactory, EncapType, Encapsulation
from pfasstkit.base.errors import InvalidConfiguration, ResourceExhaustion, TypeMismatch
from pfasstkit.base.vectypes import *

logger = logging.getLogger(__name__)


def _check_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise InvalidConfiguration(
            f"size must be an integer, got {type(size).__name__}"
        )
    if size < 1:
        raise InvalidConfiguration(f"size must be at least 1, got {size}")
    return int(size)


def _check_dtype(dtype: DTypeLike) -> np.dtype:
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.inexact):
        raise InvalidConfiguration(
            f"dtype must be a floating point or complex type, got {dtype}"
        )
    return dtype


class VectorEncapsulation(Encapsulation):
    """Encapsulated state backed by a contiguous one-dimensional array.

    Elements can be read and written directly with ``state[i]``; indices out
    of range raise ``IndexError``. The scalar precision is part of the
    variant: a ``float32`` vector does not mix with a ``float64`` one.
    """

    def __init__(self, size: int, dtype: DTypeLike = np.float64) -> None:
        """
        Args:
            size: Number of elements, at least 1.
            dtype: Scalar type of the elements.

        Raises:
            InvalidConfiguration: If ``size`` or ``dtype`` is invalid.
            ResourceExhaustion: If the storage cannot be allocated.
        """
        size = _check_size(size)
        dtype = _check_dtype(dtype)
        try:
            self._data = np.zeros(size, dtype=dtype)
        except (MemoryError, ValueError) as e:
            raise ResourceExhaustion(
                f"cannot allocate a vector of {size} elements of type {dtype}"
            ) from e

    @classmethod
    def from_array(
        cls, values: Iterable[float], dtype: Optional[DTypeLike] = None
    ) -> Self:
        """Create a vector holding a copy of ``values``."""
        values = np.asarray(values, dtype=dtype)
        if values.ndim != 1:
            raise InvalidConfiguration(
                f"values must be one-dimensional, got shape {values.shape}"
            )
        if dtype is None and not np.issubdtype(values.dtype, np.inexact):
            values = values.astype(np.float64)
        state = cls(len(values), values.dtype)
        state._data[:] = values
        return state

    @property
    def size(self) -> int:
        return len(self._data)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def data(self) -> VecInexact:
        """The underlying array. Writing through it modifies the state; its
        length must not be changed."""
        return self._data

    def __getitem__(self, i: int):
        return self._data[i]

    def __setitem__(self, i: int, value) -> None:
        self._data[i] = value

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __copy__(self) -> Self:
        return type(self).from_array(self._data, self.dtype)

    def __deepcopy__(self, memo: dict) -> Self:
        return self.__copy__()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def _cast(self, x, role: str = "x") -> Self:
        """Check that ``x`` is a vector of the same precision and size as
        ``self`` and return it."""
        if not isinstance(x, VectorEncapsulation):
            raise TypeMismatch(
                f"{role} is a {type(x).__name__}, expected a VectorEncapsulation"
            )
        if x.dtype != self.dtype:
            raise TypeMismatch(
                f"{role} has dtype {x.dtype}, expected {self.dtype}"
            )
        if x.size != self.size:
            raise TypeMismatch(
                f"{role} has {x.size} elements, expected {self.size}"
            )
        return x

    def zero(self) -> None:
        self._data[:] = 0

    def copy(self, x: Encapsulation) -> None:
        x = self._cast(x)
        self._data[:] = x._data

    def saxpy(self, a: float, x: Encapsulation) -> None:
        x = self._cast(x)
        update = a * x._data
        if not np.can_cast(update.dtype, self.dtype, "same_kind"):
            raise TypeMismatch(
                f"result of dtype {update.dtype} cannot be accumulated into "
                f"a state of dtype {self.dtype}"
            )
        self._data += update

    def mat_apply(
        self,
        dst: Sequence[Encapsulation],
        a: float,
        mat: MatFloat,
        src: Sequence[Encapsulation],
        zero: bool = True,
    ) -> None:
        dst = [self._cast(d, f"dst[{n}]") for n, d in enumerate(dst)]
        src = [self._cast(s, f"src[{m}]") for m, s in enumerate(src)]
        mat = np.asarray(mat)
        if mat.shape != (len(dst), len(src)):
            raise InvalidConfiguration(
                f"matrix of shape {mat.shape} cannot map {len(src)} source states "
                f"to {len(dst)} destination states"
            )

        # all sources are read and checked before any destination is written
        update = None
        if len(src) and len(dst):
            values = np.stack([s._data for s in src])  # (n_src, size)
            update = a * (mat @ values)  # (n_dst, size)
            if not np.can_cast(update.dtype, self.dtype, "same_kind"):
                raise TypeMismatch(
                    f"result of dtype {update.dtype} cannot be accumulated into "
                    f"states of dtype {self.dtype}"
                )

        if zero:
            for d in dst:
                d.zero()
        if update is not None:
            for d, u in zip(dst, update):
                d._data += u

    def norm0(self) -> float:
        return float(np.max(np.abs(self._data)))


class VectorFactory(EncapFactory):
    """Create ``VectorEncapsulation`` objects of a fixed size and precision."""

    def __init__(self, size: int, dtype: DTypeLike = np.float64) -> None:
        """
        Args:
            size: Number of elements of every created vector, at least 1.
            dtype: Scalar type of every created vector.
        """
        self._size = _check_size(size)
        self._dtype = _check_dtype(dtype)

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def dofs(self) -> int:
        return self._size

    def create(self, kind: EncapType = EncapType.SOLUTION) -> VectorEncapsulation:
        logger.debug("allocating %s vector of %d %s", kind, self._size, self._dtype)
        return VectorEncapsulation(self._size, self._dtype)
