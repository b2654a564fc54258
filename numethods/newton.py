"""Newton divided-difference interpolation and simple polynomial utilities."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

PRINT_TOLERANCE = 1e-9
_DISTINCT_EPS = 1e-12

_SAMPLE_X = [
    -2.0, -1.8333333333333333, -1.6666666666666667, -1.5,
    -1.3333333333333335, -1.1666666666666667, -1.0, -0.8333333333333335,
    -0.6666666666666667, -0.5, -0.3333333333333335, -0.16666666666666674,
    0.0, 0.16666666666666652, 0.33333333333333304, 0.5,
    0.6666666666666665, 0.833333333333333, 1.0, 1.1666666666666665,
    1.333333333333333, 1.5, 1.6666666666666665, 1.833333333333333, 2.0,
]

_SAMPLE_Y = [
    -9.0, -6.689814814814813, -4.740740740740742, -3.125,
    -1.814814814814816, -0.7824074074074079, 0.0, 0.5601851851851848,
    0.9259259259259258, 1.125, 1.1851851851851851, 1.1342592592592593,
    1.0, 0.8101851851851853, 0.592592592592593, 0.375,
    0.18518518518518534, 0.0509259259259261, 0.0, 0.06018518518518507,
    0.25925925925925875, 0.625, 1.1851851851851847, 1.967592592592591, 3.0,
]

_SAMPLE_QUERY = 0.3


@dataclass
class NewtonInterpolation:
    """Interpolation nodes and their divided-difference table.

    ``table[i][k]`` is the order-``k`` divided difference starting at node ``i``;
    row ``i`` holds ``len(x_values) - i`` entries.
    """

    x_values: list[float]
    table: list[list[float]] = field(default_factory=list)


def test_function(x: float) -> float:
    """Reference function ``(x^2 - 1)(x - 1)``."""
    return (x * x - 1.0) * (x - 1.0)


def is_near_zero(value: float, tolerance: float = PRINT_TOLERANCE) -> bool:
    """Return True when ``|value|`` is below ``tolerance``."""
    return abs(value) < tolerance


def format_number(value: float) -> str:
    """Format with ten decimals, dropping trailing zeros and a bare point."""
    if is_near_zero(value):
        value = 0.0
    text = f"{value:.10f}".rstrip("0").removesuffix(".")
    return "0" if text == "-0" else text


def format_factor(node: float) -> str:
    """Format the factor ``(x - node)`` of a Newton basis polynomial."""
    if is_near_zero(node):
        return "x"
    if node < 0.0:
        return f"(x + {format_number(abs(node))})"
    return f"(x - {format_number(node)})"


def build_divided_difference_table(
    x_values: Sequence[float], y_values: Sequence[float]
) -> NewtonInterpolation:
    """Build the divided-difference table for the points ``(x_i, y_i)``."""
    n = len(x_values)
    if n == 0 or len(y_values) != n:
        raise ValueError("x and y must be non-empty and of the same size.")
    xs = [float(x) for x in x_values]
    table: list[list[float]] = [[float(y)] for y in y_values]
    for order in range(1, n):
        for row in range(n - order):
            denominator = xs[row + order] - xs[row]
            if abs(denominator) < _DISTINCT_EPS:
                raise ValueError("x values must be distinct.")
            table[row].append(
                (table[row + 1][order - 1] - table[row][order - 1]) / denominator
            )
    return NewtonInterpolation(xs, table)


def extract_newton_coefficients(interpolation: NewtonInterpolation) -> list[float]:
    """Return the Newton-form coefficients (the top row of the table)."""
    return list(interpolation.table[0][: len(interpolation.x_values)])


def evaluate_newton_polynomial(
    interpolation: NewtonInterpolation, value: float
) -> float:
    """Evaluate the interpolating polynomial at ``value``."""
    coefficients = extract_newton_coefficients(interpolation)
    result = coefficients[0]
    product_term = 1.0
    for coefficient, node in zip(coefficients[1:], interpolation.x_values):
        product_term *= value - node
        result += coefficient * product_term
    return result


def format_divided_difference_table(interpolation: NewtonInterpolation) -> str:
    """Render the divided-difference table, headed by its title."""
    lines = ["Divided Difference Table\n"]
    for i, row in enumerate(interpolation.table):
        prefix = f"x{i}:" + (" " if i < 10 else "")
        lines.append(prefix + "".join(f"{entry:14.10f} " for entry in row) + "\n")
    return "".join(lines)


def _sign_prefix(coefficient: float, first_term: bool) -> str:
    if not first_term:
        return " - " if coefficient < 0.0 else " + "
    return "-" if coefficient < 0.0 else ""


def format_newton_polynomial(interpolation: NewtonInterpolation) -> str:
    """Render the polynomial in Newton form, e.g. ``1 + 2 (x - 1)``."""
    parts: list[str] = []
    first_term = True
    for i, coefficient in enumerate(extract_newton_coefficients(interpolation)):
        if is_near_zero(coefficient):
            continue
        magnitude = abs(coefficient)
        parts.append(_sign_prefix(coefficient, first_term))
        printed_coefficient = False
        if i == 0 or not is_near_zero(magnitude - 1.0):
            parts.append(format_number(magnitude))
            printed_coefficient = True
        for j, node in enumerate(interpolation.x_values[:i]):
            if printed_coefficient or j > 0:
                parts.append(" ")
            parts.append(format_factor(node))
            printed_coefficient = True
        first_term = False
    return "0" if first_term else "".join(parts)


def expand_newton_polynomial(interpolation: NewtonInterpolation) -> list[float]:
    """Return the monomial coefficients of the interpolant, lowest degree first."""
    coefficients = extract_newton_coefficients(interpolation)
    expanded = [0.0]
    basis = [1.0]
    for i, coefficient in enumerate(coefficients):
        if not is_near_zero(coefficient):
            if len(expanded) < len(basis):
                expanded.extend([0.0] * (len(basis) - len(expanded)))
            for j, b in enumerate(basis):
                expanded[j] += coefficient * b
        if i + 1 < len(coefficients):
            node = interpolation.x_values[i]
            next_basis = [0.0] * (len(basis) + 1)
            for j, b in enumerate(basis):
                next_basis[j] -= node * b
                next_basis[j + 1] += b
            basis = next_basis
    expanded = [0.0 if is_near_zero(c) else c for c in expanded]
    while len(expanded) > 1 and is_near_zero(expanded[-1]):
        expanded.pop()
    return expanded


def format_expanded_polynomial(coefficients: Sequence[float]) -> str:
    """Render monomial coefficients (lowest degree first), e.g. ``x^3 - x + 1``."""
    parts: list[str] = []
    first_term = True
    for degree in reversed(range(len(coefficients))):
        coefficient = coefficients[degree]
        if is_near_zero(coefficient):
            continue
        magnitude = abs(coefficient)
        parts.append(_sign_prefix(coefficient, first_term))
        show_coefficient = degree == 0 or not is_near_zero(magnitude - 1.0)
        if show_coefficient:
            parts.append(format_number(magnitude))
        if degree >= 1:
            if show_coefficient:
                parts.append(" ")
            parts.append("x")
            if degree >= 2:
                parts.append(f"^{degree}")
        first_term = False
    return "0" if first_term else "".join(parts)


def differentiate_polynomial(poly: Sequence[float]) -> list[float]:
    """Differentiate monomial coefficients (lowest degree first)."""
    if len(poly) <= 1:
        return [0.0]
    return [i * c for i, c in enumerate(poly) if i > 0]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interpolation demonstration on the built-in sample data."""
    x_values, y_values, query = _SAMPLE_X, _SAMPLE_Y, _SAMPLE_QUERY
    try:
        interpolation = build_divided_difference_table(x_values, y_values)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    out = [
        "Testing Newton Divided Difference Interpolation\n",
        "Using hardcoded data points from group6.csv\n",
        "Reference function: f(x) = (x^2 - 1)(x - 1)\n",
        f"Evaluation point: x = {query:.10f}\n",
        "Data points used:\n",
    ]
    out.extend(
        f"x{i} = {x:.10f}, y{i} = {y:.10f}\n"
        for i, (x, y) in enumerate(zip(x_values, y_values))
    )
    out.append("\n" + format_divided_difference_table(interpolation))
    out.append(
        "\nNewton Interpolating Polynomial:\nP(x) = "
        + format_newton_polynomial(interpolation)
        + "\n"
    )
    expanded = expand_newton_polynomial(interpolation)
    out.append(
        "\nStandard Polynomial Form:\nP(x) = "
        + format_expanded_polynomial(expanded)
        + "\n"
    )
    out.append(
        "\nDifferentiation of P(x):\nP'(x) = "
        + format_expanded_polynomial(differentiate_polynomial(expanded))
        + "\n"
    )
    interpolated = evaluate_newton_polynomial(interpolation, query)
    exact = test_function(query)
    out.append(f"\nInterpolated value at x = {query:.10f} is {interpolated:.10f}\n")
    out.append(f"Exact value at x = {query:.10f} is {exact:.10f}\n")
    out.append(f"Absolute error = {abs(interpolated - exact):.10f}\n")
    sys.stdout.write("".join(out))
    return 0


if __name__ == "__main__":
    sys.exit(main())