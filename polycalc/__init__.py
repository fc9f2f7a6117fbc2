"""Parse, simplify, multiply and differentiate polynomials written as text."""

__version__ = "0.1.0"
__all__ = ["cli", "polynomial", "scanner", "term", "variable"]