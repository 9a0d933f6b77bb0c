"""LDL^T factorisation of sparse symmetric quasidefinite matrices."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from quasidef.permutation import amd_ordering, invperm, ipermute, permute, permute_symmetric
from quasidef.sparse import CscMatrix


class QDLDLError(ArithmeticError):
    """Raised when a matrix cannot be factored or a factorisation cannot be used."""


@dataclass
class QDLDLSettings:
    """Options for :class:`QDLDLFactorisation`.

    ``perm`` is a user ordering; when omitted a minimum degree ordering is
    computed. ``dsigns`` gives the expected sign of each diagonal entry of D
    (all positive when omitted) and is used for dynamic regularisation.
    """

    amd_dense_scale: float = 1.0
    perm: Optional[list[int]] = None
    logical: bool = False
    dsigns: Optional[list[int]] = None
    regularize_enable: bool = True
    regularize_eps: float = 1e-12
    regularize_delta: float = 1e-7


def etree(n: int, ap: Sequence[int], ai: Sequence[int]) -> tuple[list[Optional[int]], list[int]]:
    """Compute the elimination tree of an upper triangular CSC pattern.

    Returns ``(tree, lnz)`` where ``tree[i]`` is the parent of node ``i``
    (``None`` for a root) and ``lnz[i]`` the number of nonzeros in column
    ``i`` of L. Raises :class:`QDLDLError` if a column is empty or an entry
    lies below the diagonal.
    """
    if any(a >= b for a, b in zip(ap, ap[1:])):
        raise QDLDLError("matrix has an empty column")

    work = [0] * n
    lnz = [0] * n
    tree: list[Optional[int]] = [None] * n

    for j in range(n):
        work[j] = j
        for i in ai[ap[j]:ap[j + 1]]:
            if i > j:
                raise QDLDLError("matrix is not upper triangular")
            while work[i] != j:
                if tree[i] is None:
                    tree[i] = j
                lnz[i] += 1
                work[i] = j
                i = tree[i]
    return tree, lnz


def lsolve(lp: Sequence[int], li: Sequence[int], lx: Sequence[float], x: Sequence[float]) -> list[float]:
    """Solve ``(L + I) y = x`` for strictly lower triangular L and return ``y``."""
    y = list(x)
    for i in range(len(y)):
        yi = y[i]
        lo, hi = lp[i], lp[i + 1]
        for row, value in zip(li[lo:hi], lx[lo:hi]):
            y[row] -= value * yi
    return y


def ltsolve(lp: Sequence[int], li: Sequence[int], lx: Sequence[float], x: Sequence[float]) -> list[float]:
    """Solve ``(L + I)^T y = x`` for strictly lower triangular L and return ``y``."""
    y = list(x)
    for i in reversed(range(len(y))):
        lo, hi = lp[i], lp[i + 1]
        y[i] -= sum(value * y[row] for row, value in zip(li[lo:hi], lx[lo:hi]))
    return y


def solve_factors(
    lp: Sequence[int],
    li: Sequence[int],
    lx: Sequence[float],
    dinv: Sequence[float],
    b: Sequence[float],
) -> list[float]:
    """Solve ``(L + I) D (L + I)^T x = b`` given L and the inverse of D."""
    y = lsolve(lp, li, lx, b)
    y = [v * d for v, d in zip(y, dinv)]
    return ltsolve(lp, li, lx, y)


class QDLDLFactorisation:
    """Factorisation ``P A P^T = L D L^T`` of a symmetric quasidefinite matrix.

    ``a`` holds the upper triangle of the matrix. The permuted data is kept
    so that values can be updated and the matrix refactored.
    """

    def __init__(self, a: CscMatrix, opts: Optional[QDLDLSettings] = None) -> None:
        if not a.is_square():
            raise ValueError("matrix must be square")
        n = a.nrows
        opts = opts if opts is not None else QDLDLSettings()

        if opts.perm is not None:
            self.perm = list(opts.perm)
            self.iperm = invperm(self.perm)
        else:
            self.perm, self.iperm = amd_ordering(a, opts.amd_dense_scale)

        self._triu, self._a_to_papt = permute_symmetric(a, self.iperm)

        if opts.dsigns is not None:
            self._dsigns = permute(list(opts.dsigns), self.perm)
        else:
            self._dsigns = [1] * n

        self._regularize_enable = opts.regularize_enable
        self._regularize_eps = opts.regularize_eps
        self._regularize_delta = opts.regularize_delta
        self._etree, self._lnz = etree(n, self._triu.colptr, self._triu.rowval)

        self.positive_inertia = 0
        self.regularize_count = 0
        self.L = CscMatrix.spalloc(n, n, sum(self._lnz))
        self.D = [0.0] * n
        self.Dinv = [0.0] * n
        self._is_logical = opts.logical
        self._factor()

    def solve(self, b: Sequence[float]) -> list[float]:
        """Return the solution ``x`` of ``A x = b``."""
        if self._is_logical:
            raise QDLDLError("Can't solve with logical factorisation only")
        if len(b) != len(self.D):
            raise ValueError(f"right hand side must have length {len(self.D)}, got {len(b)}")
        tmp = permute(list(b), self.perm)
        tmp = solve_factors(self.L.colptr, self.L.rowval, self.L.nzval, self.Dinv, tmp)
        return ipermute(tmp, self.perm)

    def update_values(self, indices: Sequence[int], values: Sequence[float]) -> None:
        """Overwrite entries of the input matrix, given by their entry indices."""
        nzval = self._triu.nzval
        for idx, value in zip(indices, values):
            nzval[self._a_to_papt[idx]] = value

    def scale_values(self, indices: Sequence[int], scale: float) -> None:
        """Multiply entries of the input matrix by ``scale``."""
        nzval = self._triu.nzval
        for idx in indices:
            nzval[self._a_to_papt[idx]] *= scale

    def offset_values(self, indices: Sequence[int], offset: float, signs: Sequence[int]) -> None:
        """Add ``offset * sign`` to each given entry of the input matrix."""
        if len(indices) != len(signs):
            raise ValueError("indices and signs must have the same length")
        nzval = self._triu.nzval
        for idx, sign in zip(indices, signs):
            nzval[self._a_to_papt[idx]] += offset * sign

    def refactor(self) -> None:
        """Compute a numerical factorisation of the current matrix values."""
        self._is_logical = False
        self._factor()

    def _regularize(self, d: list[float], k: int) -> None:
        if self._regularize_enable:
            sign = self._dsigns[k]
            if d[k] * sign < self._regularize_eps:
                d[k] = self._regularize_delta * sign
                self.regularize_count += 1

    def _factor(self) -> None:
        logical = self._is_logical
        a = self._triu
        n = a.n
        ap, ai, ax = a.colptr, a.rowval, a.nzval
        tree = self._etree

        lp = [0] * (n + 1)
        for j, count in enumerate(self._lnz):
            lp[j + 1] = lp[j] + count
        nnz = lp[-1]
        li = [0] * nnz
        lx = [0.0] * nnz
        d = [0.0] * n
        dinv = [0.0] * n

        self.regularize_count = 0
        positive = 0
        y_markers = [False] * n
        y_vals = [0.0] * n
        next_colspace = lp[:n]

        if not logical and n > 0:
            d[0] = ax[0]
            self._regularize(d, 0)
            if d[0] == 0.0:
                raise QDLDLError("Zero entry in D (matrix is not quasidefinite)")
            if d[0] > 0.0:
                positive += 1
            dinv[0] = 1.0 / d[0]

        for k in range(1, n):
            y_idx: list[int] = []
            for i in range(ap[k], ap[k + 1]):
                bidx = ai[i]
                if bidx == k:
                    d[k] = ax[i]
                    continue
                y_vals[bidx] = ax[i]
                if y_markers[bidx]:
                    continue
                y_markers[bidx] = True
                path = [bidx]
                nxt = tree[bidx]
                while nxt is not None and nxt < k:
                    if y_markers[nxt]:
                        break
                    y_markers[nxt] = True
                    path.append(nxt)
                    nxt = tree[nxt]
                y_idx.extend(reversed(path))

            for cidx in reversed(y_idx):
                slot = next_colspace[cidx]
                if not logical:
                    yv = y_vals[cidx]
                    for j in range(lp[cidx], slot):
                        y_vals[li[j]] -= lx[j] * yv
                    lx[slot] = yv * dinv[cidx]
                    d[k] -= yv * lx[slot]
                li[slot] = k
                next_colspace[cidx] += 1
                y_vals[cidx] = 0.0
                y_markers[cidx] = False

            self._regularize(d, k)
            if d[k] == 0.0:
                raise QDLDLError("Zero entry in D (matrix is not quasidefinite)")
            if d[k] > 0.0:
                positive += 1
            dinv[k] = 1.0 / d[k]

        self.L = CscMatrix(n, n, lp, li, lx)
        self.D = d
        self.Dinv = dinv
        self.positive_inertia = positive