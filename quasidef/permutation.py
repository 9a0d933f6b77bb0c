"""Permutations and fill-reducing orderings for sparse symmetric matrices."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence
from typing import TypeVar

from quasidef.sparse import CscMatrix

T = TypeVar("T")

_DEFAULT_DENSE = 10.0
_MIN_DENSE_THRESHOLD = 16.0


def invperm(p: Sequence[int]) -> list[int]:
    """Return the inverse of the permutation ``p``.

    Raises ``ValueError`` if ``p`` is not a permutation of ``0..len(p)-1``.
    """
    n = len(p)
    inverse = [0] * n
    seen = [False] * n
    for i, j in enumerate(p):
        if not 0 <= j < n or seen[j]:
            raise ValueError("Input vector is not a permutation")
        seen[j] = True
        inverse[j] = i
    return inverse


def permute(b: Sequence[T], p: Sequence[int]) -> list[T]:
    """Return ``x`` with ``x[i] = b[p[i]]``."""
    return [b[j] for j in p]


def ipermute(x: Sequence[T], p: Sequence[int]) -> list[T]:
    """Undo :func:`permute`: return ``y`` with ``y[p[i]] = x[i]``."""
    if len(x) != len(p):
        raise ValueError("vector and permutation must have the same length")
    y: list[T] = list(x)
    for j, value in zip(p, x):
        y[j] = value
    return y


def permute_symmetric(
    a: CscMatrix, iperm: Sequence[int]
) -> tuple[CscMatrix, list[int]]:
    """Symmetrically permute an upper triangular matrix.

    Only the upper triangular entries of ``a`` are used. Returns the permuted
    matrix, again upper triangular, together with the mapping from each entry
    index of ``a`` to its index in the result. Entries within a column of the
    result are not necessarily sorted by row.
    """
    m, n = a.size
    if m != n:
        raise ValueError("Matrix A must be sparse and square")
    if n != len(iperm):
        raise ValueError(
            "Dimensions of sparse matrix A must equal the length of iperm"
        )

    nnz = a.nnz
    rowval = [0] * nnz
    nzval = [0.0] * nnz
    a_to_papt = [0] * nnz

    def upper_entries():
        for col_a in range(n):
            col_p = iperm[col_a]
            for idx in range(a.colptr[col_a], a.colptr[col_a + 1]):
                row_a = a.rowval[idx]
                if row_a <= col_a:
                    yield idx, iperm[row_a], col_p

    num_entries = [0] * n
    for _, row_p, col_p in upper_entries():
        num_entries[max(row_p, col_p)] += 1

    colptr = [0] * (n + 1)
    for j, count in enumerate(num_entries):
        colptr[j + 1] = colptr[j] + count

    next_free = colptr[:n]
    for idx, row_p, col_p in upper_entries():
        col = max(row_p, col_p)
        dest = next_free[col]
        rowval[dest] = min(row_p, col_p)
        nzval[dest] = a.nzval[idx]
        a_to_papt[idx] = dest
        next_free[col] += 1

    return CscMatrix(n, n, colptr, rowval, nzval), a_to_papt


def amd_ordering(a: CscMatrix, dense_scale: float) -> tuple[list[int], list[int]]:
    """Compute a fill-reducing minimum degree ordering of a symmetric pattern.

    The sparsity pattern of ``a + a.T`` (diagonal ignored) is used. Nodes of
    degree above the dense threshold, ``max(16, 10 * dense_scale * sqrt(n))``
    (or ``n - 2`` when that scale is negative), are ordered last. Ties in
    degree are broken by the lower index. Returns ``(perm, iperm)``.
    """
    m, n = a.size
    if m != n:
        raise ValueError("Matrix A must be square")

    adjacency: list[set[int]] = [set() for _ in range(n)]
    for col in range(n):
        for idx in range(a.colptr[col], a.colptr[col + 1]):
            row = a.rowval[idx]
            if not 0 <= row < n:
                raise ValueError(f"row index {row} out of range")
            if row != col:
                adjacency[row].add(col)
                adjacency[col].add(row)

    dense = _DEFAULT_DENSE * dense_scale
    if dense < 0:
        threshold = float(n - 2)
    else:
        threshold = max(_MIN_DENSE_THRESHOLD, dense * math.sqrt(n))

    dense_nodes = [v for v in range(n) if len(adjacency[v]) > threshold]
    for v in dense_nodes:
        for u in adjacency[v]:
            adjacency[u].discard(v)
        adjacency[v] = set()
    dense_set = set(dense_nodes)

    eliminated = [False] * n
    for v in dense_nodes:
        eliminated[v] = True

    heap = [(len(adjacency[v]), v) for v in range(n) if v not in dense_set]
    heapq.heapify(heap)

    order: list[int] = []
    while heap:
        degree, v = heapq.heappop(heap)
        if eliminated[v] or degree != len(adjacency[v]):
            continue
        eliminated[v] = True
        order.append(v)
        neighbours = adjacency[v]
        for u in neighbours:
            adj_u = adjacency[u]
            adj_u.discard(v)
            adj_u.update(w for w in neighbours if w != u)
            heapq.heappush(heap, (len(adj_u), u))
        adjacency[v] = set()

    order.extend(dense_nodes)
    return order, invperm(order)