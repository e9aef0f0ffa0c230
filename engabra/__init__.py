"""Geometric algebra of three-dimensional Euclidean space for engineering use."""

__version__ = "0.2.1"
__all__ = ["types", "validity", "addition", "subtraction", "scaling", "product", "functions"]