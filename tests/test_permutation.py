import pytest

from quasidef.permutation import (
    amd_ordering,
    invperm,
    ipermute,
    permute,
    permute_symmetric,
)
from quasidef.sparse import CscMatrix


def matrix_4x4() -> CscMatrix:
    # [ 8 -3  2  . ]
    # [ .  8 -1  . ]
    # [ .  .  8 -1 ]
    # [ .  .  .  1 ]
    return CscMatrix(
        4,
        4,
        [0, 1, 3, 6, 8],
        [0, 0, 1, 0, 1, 2, 2, 3],
        [8.0, -3.0, 8.0, 2.0, -1.0, 8.0, -1.0, 1.0],
    )


def test_invperm():
    assert invperm([3, 0, 2, 1]) == [1, 3, 2, 0]


def test_invperm_repeated_index():
    with pytest.raises(ValueError):
        invperm([3, 0, 2, 0])


def test_invperm_index_too_big():
    with pytest.raises(ValueError):
        invperm([4, 0, 2, 1])


def test_invperm_repeated_zero():
    with pytest.raises(ValueError):
        invperm([0, 0])


def test_permute_and_ipermute():
    perm = [3, 0, 2, 1]
    b = [1.0, 2.0, 3.0, 4.0]
    x = permute(b, perm)
    assert x == [4.0, 1.0, 3.0, 2.0]
    assert ipermute(x, perm) == b


def test_ipermute_length_mismatch():
    with pytest.raises(ValueError):
        ipermute([1.0, 2.0], [0, 1, 2])


def test_permute_symmetric_identity():
    a = matrix_4x4()
    p, mapping = permute_symmetric(a, [0, 1, 2, 3])
    assert p.colptr == a.colptr
    assert p.rowval == a.rowval
    assert p.nzval == a.nzval
    assert mapping == list(range(len(mapping)))


def test_permute_symmetric_with_permutation():
    a = matrix_4x4()
    a.nzval = [float(i + 1) for i in range(len(a.nzval))]
    iperm = invperm([2, 3, 0, 1])
    p, _ = permute_symmetric(a, iperm)
    assert p.colptr == [0, 1, 3, 5, 8]
    assert p.rowval == [0, 0, 1, 2, 0, 2, 3, 0]
    assert p.nzval == [6.0, 7.0, 8.0, 1.0, 4.0, 2.0, 3.0, 5.0]


def test_permute_symmetric_mapping_points_to_values():
    a = matrix_4x4()
    p, mapping = permute_symmetric(a, invperm([3, 0, 2, 1]))
    assert [p.nzval[k] for k in mapping] == a.nzval
    assert all(r <= c for c in range(4) for r in p.rowval[p.colptr[c]:p.colptr[c + 1]])


def test_permute_symmetric_not_square():
    a = CscMatrix.spalloc(3, 4, 0)
    with pytest.raises(ValueError):
        permute_symmetric(a, [0, 1, 2, 3])


def test_permute_symmetric_bad_iperm_length():
    with pytest.raises(ValueError):
        permute_symmetric(matrix_4x4(), [0, 1, 2])


def test_amd():
    perm, iperm = amd_ordering(matrix_4x4(), 1.5)
    assert perm == [3, 0, 1, 2]
    assert iperm == [1, 2, 3, 0]


def test_amd_not_square():
    with pytest.raises(ValueError):
        amd_ordering(CscMatrix.spalloc(2, 3, 0), 1.0)