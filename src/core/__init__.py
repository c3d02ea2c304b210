"""
Core domain models, mathematical primitives, and contracts.

This module contains the pure building blocks of the converter and is
independent of any presentation layer.
"""
