"""Scalar root finding: bisection, Newton-Raphson and the secant method."""

from __future__ import annotations

from collections.abc import Callable

Function = Callable[[float], float]


class ConvergenceError(ArithmeticError):
    """Raised when a root finder does not reach the tolerance."""


class Rootfinder:
    """Root finders sharing one absolute tolerance on ``|f(x)|``."""

    def __init__(self, tolerance: float = 1e-6, verbose: bool = False) -> None:
        self.tol = tolerance
        self.verbose = verbose

    @staticmethod
    def _derivative(f: Function, x: float, h: float = 1e-6) -> float:
        return (f(x + h) - f(x - h)) / (2 * h)

    def bisection(
        self, f: Function, higher: float, lower: float, num_iter: int = 120
    ) -> float:
        """Find a root of ``f`` bracketed by ``lower`` and ``higher``."""
        if f(lower) * f(higher) > 0:
            raise ValueError(
                "the range specified has an even number of roots within it; "
                "try other methods or enter a valid range"
            )
        f_high = f(higher)
        for _ in range(num_iter):
            mid = (lower + higher) / 2
            f_mid = f(mid)
            if abs(f_mid) < self.tol:
                return mid
            if f_mid * f_high < 0:
                lower = mid
            else:
                higher = mid
                f_high = f_mid
        raise ConvergenceError(
            f"bisection method failed to converge within {num_iter} iterations"
        )

    def newton_raphson(self, f: Function, x0: float = 0.0, num_iter: int = 40) -> float:
        """Find a root of ``f`` from ``x0`` using a central-difference derivative."""
        x = x0
        for _ in range(num_iter):
            fx = f(x)
            if abs(fx) < self.tol:
                return x
            try:
                x = x - fx / self._derivative(f, x)
            except ZeroDivisionError as exc:
                raise ConvergenceError(
                    f"Newton-Raphson hit a zero derivative at x = {x}"
                ) from exc
        raise ConvergenceError(
            f"Newton-Raphson failed to converge within {num_iter} iterations"
        )

    def secant(self, f: Function, x0: float = 0.0, num_iter: int = 100) -> float:
        """Find a root of ``f`` by the secant method starting near ``x0``."""

        def step(current: float, previous: float) -> float:
            try:
                return current - f(current) * (current - previous) / (f(current) - f(previous))
            except ZeroDivisionError as exc:
                raise ConvergenceError(
                    f"secant method hit a flat secant at x = {current}"
                ) from exc

        previous = x0
        current = x0 * (1 + 1e-6) + 1e-6
        nxt = step(current, previous)
        for _ in range(num_iter):
            if abs(f(nxt)) < self.tol:
                return nxt
            previous, current = current, nxt
            nxt = step(current, previous)
        raise ConvergenceError(
            f"secant method failed to converge within {num_iter} iterations"
        )