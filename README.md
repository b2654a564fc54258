# numethods

A small collection of classic numerical methods written in plain Python,
with no third-party dependencies.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## What is included

### `numethods.linalg`

Matrices are lists of rows (lists of floats); vectors are lists of floats.
Every function returns new lists and leaves its arguments unchanged.

- `matrix_mult(a, b)`: matrix product; raises `ValueError` when the number of
  columns of `a` differs from the number of rows of `b`.
- `transpose(a)`: the transpose; an empty matrix gives `[]`.
- `row_switch(p, q, a)`: exchange rows `p` and `q` (1-based); raises
  `IndexError` for a row number outside the matrix.
- `row_subtract(p, q, scalar, a)`: subtract `scalar` times row `q` from row
  `p` (1-based); out-of-range row numbers leave the matrix unchanged.
- `gaussian_elimination(a)`: reduction to row echelon form with partial
  pivoting. Columns whose largest remaining entry is below `1e-9` in
  magnitude are skipped.
- `make_augmented(a, b)`: append `b` as a last column of `a`; raises
  `ValueError` if `b` is shorter than the number of rows.
- `solve_system(augmented)`: solve a square system `[A | b]` by elimination
  and back substitution; raises `ValueError` when a diagonal entry of the
  reduced matrix is exactly zero.
- `qr_gram_schmidt(a)`: QR factorisation by modified Gram–Schmidt, returning
  `(q, r)` with `q` of shape m × n and `r` upper triangular n × n; raises
  `ValueError` for an empty matrix.
- `dot(v1, v2)`, `vector_norm(v, start_index=0)` (the Euclidean norm of
  `v[start_index:]`) and `mat_vec_mult(a, x)`.
- `steepest_descent(a, b, tol=1e-9)` and `conjugate_gradient(a, b, tol=1e-10)`:
  iterative solvers for symmetric positive-definite systems, starting from
  `x = 0` and stopping once the residual norm is below `tol`.

```python
from numethods.linalg import make_augmented, solve_system

a = [[1, 1, 1], [0, 2, 5], [2, 5, -1]]
b = [6, -4, 27]
print(solve_system(make_augmented(a, b)))  # approximately [5.0, 3.0, -2.0]
```

### `numethods.rootfinder`

`Rootfinder(tolerance=1e-6, verbose=False)` finds roots of a function of one
variable. A point counts as a root when `|f(x)|` is below the tolerance. The
`verbose` flag is stored on the instance but does not change any output.

- `bisection(f, higher, lower, num_iter=120)`: raises `ValueError` if
  `f(lower)` and `f(higher)` have the same sign.
- `newton_raphson(f, x0=0.0, num_iter=40)`: uses a central-difference
  derivative with step `1e-6`.
- `secant(f, x0=0.0, num_iter=100)`: starts from `x0` and a point just beside
  it.

When a method does not reach the tolerance within `num_iter` iterations, or
meets a zero derivative or a flat secant, it raises `ConvergenceError` (a
subclass of `ArithmeticError`).

```python
from numethods.rootfinder import Rootfinder

finder = Rootfinder(1e-8)
print(finder.bisection(lambda x: x * x - 2, 2.0, 0.0))
print(finder.newton_raphson(lambda x: x * x - 2, 1.0))
print(finder.secant(lambda x: x * x - 2, 1.0))
```

### `numethods.newton`

Newton divided-difference interpolation:

- `build_divided_difference_table(x_values, y_values)` returns a
  `NewtonInterpolation` (fields `x_values` and `table`). It raises
  `ValueError` if the inputs are empty, of different lengths, or contain
  x values that are not distinct.
- `extract_newton_coefficients(interpolation)` and
  `evaluate_newton_polynomial(interpolation, value)`.
- `expand_newton_polynomial(interpolation)` converts the polynomial to
  ordinary coefficients, lowest degree first, with values below `1e-9`
  treated as zero.
- `differentiate_polynomial(poly)` differentiates such a coefficient list.
- `format_divided_difference_table`, `format_newton_polynomial` and
  `format_expanded_polynomial` return readable text; `format_number`,
  `format_factor` and `is_near_zero` are the helpers they use.
- `test_function(x)` is the sample function `(x^2 - 1)(x - 1)`.

```python
from numethods.newton import (
    build_divided_difference_table,
    expand_newton_polynomial,
    format_expanded_polynomial,
)

interp = build_divided_difference_table([0, 1, 2], [1, 2, 5])
print(format_expanded_polynomial(expand_newton_polynomial(interp)))  # x^2 + 1
```

## Command line

```
numethods-newton
```

This command interpolates 25 built-in sample points of
`f(x) = (x^2 - 1)(x - 1)` on `[-2, 2]`. It prints the divided-difference
table, the Newton and expanded forms of the polynomial and its derivative,
then compares the interpolated value at `x = 0.3` with the exact value.

## Limitations

- The command takes no arguments and reads no files: it always works on the
  built-in sample data. Other data must go through the library functions.
- The linear-algebra and root-finding modules have no command of their own;
  they are used from Python only.