"""Numerical methods: linear algebra, root finding and Newton interpolation."""

__version__ = "0.1.0"
__all__ = ["linalg", "newton", "rootfinder"]