"""Compressed sparse column matrices."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class CscMatrix:
    """A real matrix in compressed sparse column form.

    ``colptr`` has ``n + 1`` entries. The row indices and values of column
    ``j`` are ``rowval[colptr[j]:colptr[j + 1]]`` and
    ``nzval[colptr[j]:colptr[j + 1]]``.
    """

    m: int
    n: int
    colptr: list[int] = field(default_factory=list)
    rowval: list[int] = field(default_factory=list)
    nzval: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.m < 0 or self.n < 0:
            raise ValueError("matrix dimensions must be non-negative")
        if len(self.colptr) != self.n + 1:
            raise ValueError(
                f"colptr must have {self.n + 1} entries, got {len(self.colptr)}"
            )
        if len(self.rowval) != len(self.nzval):
            raise ValueError("rowval and nzval must have the same length")

    @classmethod
    def spalloc(cls, m: int, n: int, nnz: int) -> CscMatrix:
        """Allocate an ``m`` x ``n`` matrix with room for ``nnz`` entries."""
        return cls(m, n, [0] * (n + 1), [0] * nnz, [0.0] * nnz)

    @classmethod
    def identity(cls, n: int) -> CscMatrix:
        """Return the ``n`` x ``n`` identity matrix."""
        return cls(n, n, list(range(n + 1)), list(range(n)), [1.0] * n)

    @classmethod
    def from_scipy(cls, obj: Any) -> CscMatrix:
        """Build a matrix from any object shaped like a SciPy CSC matrix.

        The object must provide ``data``, ``indices``, ``indptr``, ``nnz``
        and ``shape`` attributes.
        """
        nzval = [float(v) for v in obj.data]
        rowval = [int(i) for i in obj.indices]
        colptr = [int(p) for p in obj.indptr]
        int(obj.nnz)
        shape = [int(d) for d in obj.shape]
        return cls(shape[0], shape[1], colptr, rowval, nzval)

    @property
    def nrows(self) -> int:
        return self.m

    @property
    def ncols(self) -> int:
        return self.n

    @property
    def size(self) -> tuple[int, int]:
        return (self.m, self.n)

    @property
    def nnz(self) -> int:
        """Number of entries recorded by the column pointers."""
        return self.colptr[-1]

    def is_square(self) -> bool:
        return self.m == self.n