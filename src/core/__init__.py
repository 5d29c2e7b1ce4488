"""
Core domain models, mathematical primitives, and invariants.

This module contains the planar Point value type and the numeric building
blocks it relies on. Nothing here depends on external systems or I/O.
"""
