# Copyright (c) 2024 The pfasstkit developers
from abc import ABC, abstractmethod
from enum import Enum
from typing import Self, Sequence

from .vectypes import *


class EncapType(Enum):
    """Kind of state requested from an ``EncapFactory``.

    The tag is handed through to the factory untouched; its meaning is
    assigned by the sweeper that requests the state.
    """

    SOLUTION = "solution"
    FUNCTION = "function"


class Encapsulation(ABC):
    """Encapsulated solution state of a time integrator.

    An ``Encapsulation`` is a fixed-size, in-place mutable container of
    scalar values. Spectral deferred correction sweeps only ever touch the
    data through the operations declared here, so the concrete storage can be
    swapped without changing the sweeper.

    Operations taking other states accept only states of the same concrete
    variant (class and scalar precision) and the same size. Anything else
    raises :class:`~pfasstkit.base.errors.TypeMismatch`.
    """

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of scalar degrees of freedom. Fixed at construction."""

    def __len__(self) -> int:
        return self.size

    @abstractmethod
    def zero(self) -> None:
        """Set every element to zero."""

    @abstractmethod
    def copy(self, x: Self) -> None:
        """Overwrite all elements with the elements of ``x``."""

    @abstractmethod
    def saxpy(self, a: float, x: Self) -> None:
        """Accumulate ``self += a * x`` element-wise."""

    @abstractmethod
    def mat_apply(
        self,
        dst: Sequence[Self],
        a: float,
        mat: MatFloat,
        src: Sequence[Self],
        zero: bool = True,
    ) -> None:
        """Apply a matrix to a collection of states.

        For every degree of freedom ``i`` and destination ``n``, computes
        ``dst[n][i] += a * sum_m mat[n, m] * src[m][i]``. If ``zero`` is set,
        all destinations are zeroed before accumulating. The receiver only
        selects the implementation and fixes the required variant and size.

        Args:
            dst: Destination states, ``len(dst) == mat.shape[0]``.
            a: Scalar factor.
            mat: Dense coefficient matrix of shape ``(len(dst), len(src))``.
            src: Source states, ``len(src) == mat.shape[1]``.
            zero: Whether to zero ``dst`` first.
        """

    @abstractmethod
    def norm0(self) -> float:
        """Maximum absolute value of the contained elements."""


def mat_apply(
    dst: Sequence[Encapsulation],
    a: float,
    mat: MatFloat,
    src: Sequence[Encapsulation],
    zero: bool = True,
) -> None:
    """Apply ``mat`` to ``src`` and accumulate into ``dst``, dispatching on the
    variant of the first destination.

    See :meth:`Encapsulation.mat_apply` for the semantics. Nothing happens if
    ``dst`` is empty.
    """
    if not len(dst):
        return
    dst[0].mat_apply(dst, a, mat, src, zero)


class EncapFactory(ABC):
    """Allocator of ``Encapsulation`` objects of a fixed problem size."""

    @abstractmethod
    def dofs(self) -> int:
        """Number of degrees of freedom of the created states."""

    @abstractmethod
    def create(self, kind: EncapType) -> Encapsulation:
        """Create a new zero-initialised state.

        Args:
            kind: Kind of the requested state.

        Returns:
            A new state independent from all previously created ones.

        Raises:
            ResourceExhaustion: If the storage cannot be allocated.
        """
