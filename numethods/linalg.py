"""Dense linear algebra on lists of lists: elimination, QR and iterative solvers."""

from __future__ import annotations

import math
from collections.abc import Sequence

Matrix = list[list[float]]
Vector = list[float]

_PIVOT_EPS = 1e-9
_QR_EPS = 1e-15
_CG_CURVATURE_EPS = 1e-18


def _copy(a: Sequence[Sequence[float]]) -> Matrix:
    return [list(row) for row in a]


def matrix_mult(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the product ``a @ b``; raise ValueError if the shapes do not match."""
    inner = len(a[0])
    if inner != len(b):
        raise ValueError(
            f"cannot multiply: a has {inner} columns but b has {len(b)} rows"
        )
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def row_switch(p: int, q: int, a: Sequence[Sequence[float]]) -> Matrix:
    """Return a copy of ``a`` with rows ``p`` and ``q`` (1-based) exchanged."""
    n = len(a)
    if not (1 <= p <= n and 1 <= q <= n):
        raise IndexError(f"row numbers must lie in 1..{n}, got {p} and {q}")
    result = _copy(a)
    result[p - 1], result[q - 1] = result[q - 1], result[p - 1]
    return result


def row_subtract(p: int, q: int, scalar: float, a: Sequence[Sequence[float]]) -> Matrix:
    """Return a copy of ``a`` with ``scalar`` times row ``q`` taken from row ``p``.

    Rows are 1-based; out-of-range row numbers leave the matrix unchanged.
    """
    result = _copy(a)
    n = len(result)
    if not (1 <= p <= n and 1 <= q <= n):
        return result
    source = result[q - 1]
    result[p - 1] = [x - scalar * y for x, y in zip(result[p - 1], source)]
    return result


def gaussian_elimination(a: Sequence[Sequence[float]]) -> Matrix:
    """Reduce ``a`` to row echelon form using partial pivoting."""
    m = _copy(a)
    if not m:
        return m
    rows, cols = len(m), len(m[0])
    pivot_row = 0
    for j in range(cols):
        if pivot_row >= rows:
            break
        sel = max(range(pivot_row, rows), key=lambda i: abs(m[i][j]))
        if abs(m[sel][j]) < _PIVOT_EPS:
            continue
        m[pivot_row], m[sel] = m[sel], m[pivot_row]
        pivot = m[pivot_row]
        for i in range(pivot_row + 1, rows):
            scalar = m[i][j] / pivot[j]
            m[i] = [x - scalar * y for x, y in zip(m[i], pivot)]
        pivot_row += 1
    return m


def make_augmented(a: Sequence[Sequence[float]], b: Sequence[float]) -> Matrix:
    """Return ``[a | b]``: each row of ``a`` with the matching entry of ``b`` appended."""
    if len(b) < len(a):
        raise ValueError("right-hand side is shorter than the number of rows")
    return [list(row) + [value] for row, value in zip(a, b)]


def solve_system(augmented: Sequence[Sequence[float]]) -> Vector:
    """Solve a square system given as an augmented matrix ``[A | b]``."""
    upper = gaussian_elimination(augmented)
    n = len(upper)
    x = [0.0] * n
    for i in reversed(range(n)):
        row = upper[i]
        if row[i] == 0:
            raise ValueError("matrix is singular")
        tail = sum(row[j] * x[j] for j in range(i + 1, n))
        x[i] = (row[n] - tail) / row[i]
    return x


def transpose(a: Sequence[Sequence[float]]) -> Matrix:
    """Return the transpose of ``a``."""
    if not a:
        return []
    return [list(col) for col in zip(*a)]


def qr_gram_schmidt(a: Sequence[Sequence[float]]) -> tuple[Matrix, Matrix]:
    """Factor ``a`` (m x n) as ``Q R`` by modified Gram-Schmidt.

    Returns ``(Q, R)`` with ``Q`` of shape m x n and ``R`` upper triangular n x n.
    """
    if not a or not a[0]:
        raise ValueError("matrix must be non-empty")
    columns = transpose(a)
    n = len(columns)
    r = [[0.0] * n for _ in range(n)]
    for k in range(n):
        norm = math.sqrt(sum(v * v for v in columns[k]))
        r[k][k] = norm
        if norm > _QR_EPS:
            columns[k] = [v / norm for v in columns[k]]
        qk = columns[k]
        for j in range(k + 1, n):
            projection = dot(qk, columns[j])
            r[k][j] = projection
            columns[j] = [v - projection * w for v, w in zip(columns[j], qk)]
    return transpose(columns), r


def vector_norm(v: Sequence[float], start_index: int = 0) -> float:
    """Euclidean norm of ``v[start_index:]``."""
    return math.sqrt(sum(x * x for x in v[start_index:]))


def dot(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Inner product of two vectors."""
    return sum(x * y for x, y in zip(v1, v2))


def mat_vec_mult(a: Sequence[Sequence[float]], x: Sequence[float]) -> Vector:
    """Return the matrix-vector product ``a x``."""
    return [dot(row, x) for row in a]


def steepest_descent(
    a: Sequence[Sequence[float]], b: Sequence[float], tol: float = 1e-9
) -> Vector:
    """Solve ``a x = b`` for symmetric positive definite ``a`` by steepest descent."""
    n = len(a)
    x = [0.0] * n
    r = list(b)
    rr = dot(r, r)
    while math.sqrt(rr) >= tol:
        ar = mat_vec_mult(a, r)
        alpha = rr / dot(r, ar)
        x = [xi + alpha * ri for xi, ri in zip(x, r)]
        r = [ri - alpha * ari for ri, ari in zip(r, ar)]
        rr = dot(r, r)
    return x


def conjugate_gradient(
    a: Sequence[Sequence[float]], b: Sequence[float], tol: float = 1e-10
) -> Vector:
    """Solve ``a x = b`` for symmetric positive definite ``a`` by conjugate gradients."""
    n = len(a)
    x = [0.0] * n
    r = list(b)
    d = list(r)
    while math.sqrt(dot(r, r)) >= tol:
        ad = mat_vec_mult(a, d)
        dad = dot(d, ad)
        if abs(dad) < _CG_CURVATURE_EPS:
            break
        alpha = dot(r, d) / dad
        x = [xi + alpha * di for xi, di in zip(x, d)]
        r = [ri - alpha * adi for ri, adi in zip(r, ad)]
        if math.sqrt(dot(r, r)) < tol:
            break
        beta = -dot(r, ad) / dad
        d = [ri + beta * di for ri, di in zip(r, d)]
    return x