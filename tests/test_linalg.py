import pytest

from numethods.linalg import (
    conjugate_gradient,
    dot,
    gaussian_elimination,
    make_augmented,
    mat_vec_mult,
    matrix_mult,
    qr_gram_schmidt,
    row_subtract,
    row_switch,
    solve_system,
    steepest_descent,
    transpose,
    vector_norm,
)

A23 = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
B32 = [[7.0, 8.0], [9.0, 10.0], [11.0, 12.0]]
SYSTEM_A = [[1.0, 1.0, 1.0], [0.0, 2.0, 5.0], [2.0, 5.0, -1.0]]
SYSTEM_B = [6.0, -4.0, 27.0]
SPD = [[4.0, 1.0, 0.0], [1.0, 3.0, 1.0], [0.0, 1.0, 2.0]]


def identity(n):
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


def assert_matrix_close(x, y, tol=1e-9):
    assert len(x) == len(y)
    for rx, ry in zip(x, y):
        assert rx == pytest.approx(ry, abs=tol)


def test_matrix_mult_identity():
    assert matrix_mult(A23, identity(3)) == A23
    assert matrix_mult(identity(2), A23) == A23


def test_matrix_mult_transpose_rule():
    left = transpose(matrix_mult(A23, B32))
    right = matrix_mult(transpose(B32), transpose(A23))
    assert_matrix_close(left, right)


def test_matrix_mult_shape_mismatch():
    with pytest.raises(ValueError):
        matrix_mult(A23, A23)


def test_row_switch_swaps_and_copies():
    a = [[1.0, 2.0], [3.0, 4.0]]
    assert row_switch(1, 2, a) == [[3.0, 4.0], [1.0, 2.0]]
    assert a == [[1.0, 2.0], [3.0, 4.0]]


def test_row_switch_out_of_range():
    with pytest.raises(IndexError):
        row_switch(0, 1, [[1.0]])


def test_row_subtract():
    a = [[1.0, 2.0], [1.0, 2.0]]
    assert row_subtract(1, 2, 1.0, a) == [[0.0, 0.0], [1.0, 2.0]]
    assert a == [[1.0, 2.0], [1.0, 2.0]]


def test_row_subtract_out_of_range_is_noop():
    a = [[1.0, 2.0], [3.0, 4.0]]
    assert row_subtract(3, 1, 5.0, a) == a
    assert row_subtract(1, 0, 5.0, a) == a


def test_gaussian_elimination_upper_triangular():
    upper = gaussian_elimination(SYSTEM_A)
    for i, row in enumerate(upper):
        for j in range(i):
            assert row[j] == pytest.approx(0.0, abs=1e-12)


def test_gaussian_elimination_empty():
    assert gaussian_elimination([]) == []


def test_make_augmented():
    aug = make_augmented(SYSTEM_A, SYSTEM_B)
    assert [row[:-1] for row in aug] == SYSTEM_A
    assert [row[-1] for row in aug] == SYSTEM_B


def test_solve_system_satisfies_equations():
    x = solve_system(make_augmented(SYSTEM_A, SYSTEM_B))
    assert mat_vec_mult(SYSTEM_A, x) == pytest.approx(SYSTEM_B, abs=1e-9)


def test_solve_system_singular():
    with pytest.raises(ValueError):
        solve_system(make_augmented([[1.0, 2.0], [2.0, 4.0]], [1.0, 2.0]))


def test_transpose_round_trip():
    assert transpose(transpose(A23)) == A23
    assert transpose([]) == []


def test_qr_factorisation():
    a = [[1.0, 2.0], [3.0, 4.0], [5.0, 7.0]]
    q, r = qr_gram_schmidt(a)
    assert_matrix_close(matrix_mult(q, r), a)
    assert_matrix_close(matrix_mult(transpose(q), q), identity(2))
    assert r[1][0] == 0.0


def test_qr_empty_rejected():
    with pytest.raises(ValueError):
        qr_gram_schmidt([])


def test_vector_norm():
    assert vector_norm([3.0, 4.0]) == pytest.approx(5.0)
    assert vector_norm([100.0, 3.0, 4.0], 1) == vector_norm([3.0, 4.0])


def test_dot_symmetric():
    assert dot([1.0, 2.0, 3.0], [4.0, -5.0, 6.0]) == dot([4.0, -5.0, 6.0], [1.0, 2.0, 3.0])


def test_mat_vec_mult_matches_matrix_mult():
    x = [1.0, -2.0, 0.5]
    column = matrix_mult(A23, [[v] for v in x])
    assert mat_vec_mult(A23, x) == [row[0] for row in column]


@pytest.mark.parametrize("solver", [steepest_descent, conjugate_gradient])
def test_iterative_solvers(solver):
    b = [1.0, 2.0, 3.0]
    x = solver(SPD, b)
    assert mat_vec_mult(SPD, x) == pytest.approx(b, abs=1e-8)


@pytest.mark.parametrize("solver", [steepest_descent, conjugate_gradient])
def test_iterative_solvers_zero_rhs(solver):
    assert solver(SPD, [0.0, 0.0, 0.0]) == [0.0, 0.0, 0.0]


def test_iterative_solvers_agree_with_direct():
    b = [1.0, 2.0, 3.0]
    direct = solve_system(make_augmented(SPD, b))
    assert conjugate_gradient(SPD, b) == pytest.approx(direct, abs=1e-8)