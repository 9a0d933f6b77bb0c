# quasidef

`quasidef` computes sparse LDLᵀ factorisations of symmetric quasidefinite
matrices and solves linear systems with them. It also provides the data types
used to describe conic optimisation problems: compressed sparse column
matrices, cone descriptions, solver status codes and solution records.

It is pure Python with no runtime dependencies.

## Installation

```
pip install quasidef
```

## Sparse matrices

`quasidef.sparse.CscMatrix` holds a matrix in compressed sparse column form,
with fields `m`, `n`, `colptr`, `rowval` and `nzval`. Construction checks that
`colptr` has `n + 1` entries and that `rowval` and `nzval` have the same
length; otherwise it raises `ValueError`.

```python
from quasidef.sparse import CscMatrix

eye = CscMatrix.identity(3)
empty = CscMatrix.spalloc(4, 4, 0)
assert eye.is_square()
assert eye.nnz == 3
```

`CscMatrix.from_scipy` builds one from any object that exposes `data`,
`indices`, `indptr`, `nnz` and `shape` attributes, such as a SciPy CSC matrix.
The properties `nrows`, `ncols`, `size` and `nnz` describe the matrix.

## Factorising and solving

Pass the upper triangle of a symmetric quasidefinite matrix to
`quasidef.qdldl.QDLDLFactorisation`. A minimum degree ordering is computed
unless you supply one through `QDLDLSettings(perm=...)`.

```python
from quasidef.sparse import CscMatrix
from quasidef.qdldl import QDLDLFactorisation, QDLDLSettings

# upper triangle of
# [ 8 -3  2  0]
# [-3  8 -1  0]
# [ 2 -1  8 -1]
# [ 0  0 -1  1]
a = CscMatrix(
    4, 4,
    [0, 1, 3, 6, 8],
    [0, 0, 1, 0, 1, 2, 2, 3],
    [8.0, -3.0, 8.0, 2.0, -1.0, 8.0, -1.0, 1.0],
)

factors = QDLDLFactorisation(a, QDLDLSettings(perm=[0, 1, 2, 3]))
x = factors.solve([20.0, -22.0, 32.0, -7.0])   # about [1, -2, 3, -4]
```

`solve` returns a new list; a right hand side of the wrong length raises
`ValueError`.

`QDLDLSettings` fields:

- `amd_dense_scale` (1.0): scales the dense-node threshold of the ordering.
- `perm` (None): a user ordering.
- `logical` (False): compute only the sparsity pattern of the factors.
- `dsigns` (None): expected sign of each diagonal entry of D; all positive
  when omitted.
- `regularize_enable` (True), `regularize_eps` (1e-12),
  `regularize_delta` (1e-7): a pivot whose value times its expected sign is
  below `regularize_eps` is replaced by `regularize_delta` times that sign.

After factorisation the object exposes `perm`, `iperm`, `L`, `D`, `Dinv`,
`positive_inertia` (number of positive entries of D) and `regularize_count`.

The entries of the factorised matrix can be changed, by their index in the
input matrix, with `update_values`, `scale_values` and `offset_values`; call
`refactor()` to bring the factors up to date. A factorisation built with
`logical=True` must be refactored before it can solve; otherwise `solve`
raises `QDLDLError`. A zero pivot also raises `QDLDLError`.

The lower-level pieces are available on their own:

- `quasidef.permutation`: `invperm`, `permute`, `ipermute`,
  `permute_symmetric` (returns the permuted upper triangle and the entry
  mapping) and `amd_ordering` (returns `(perm, iperm)`).
- `quasidef.qdldl`: `etree` (returns the parent of each node, `None` for a
  root, and the column counts of L), `lsolve`, `ltsolve` and `solve_factors`.

## Cones and solver results

`quasidef.cones` defines `ZeroConeT`, `NonnegativeConeT`, `SecondOrderConeT`,
`PSDTriangleConeT` (each taking a `dim`), `ExponentialConeT()` and
`PowerConeT(alpha)`. Each cone reports its `numel` and `degree`.
`to_supported_cone` and `to_native_cones` turn cone-like objects into these
types by their class name; an unrecognised cone raises `TypeError`.

`quasidef.status` defines the `SolverStatus` enumeration and the
`DefaultSolution` record (`x`, `s`, `z`, `status`, `obj_val`, `solve_time`,
`iterations`, `r_prim`, `r_dual`).

## What it does not do

There is no conic optimisation solver in this package. The cone types,
`SolverStatus` and `DefaultSolution` describe problems and results, but
nothing here solves a conic problem or fills in a solution record.