"""
Core digit-vector primitives, domain models, and contracts.

This module contains the foundational building blocks of the multiplication
engine: pure functions over decimal digit vectors and boundary validation.
"""
