"""
Core domain models, numeric primitives, and geometric predicates.

This module contains the foundational building blocks of the kernel; it has
no I/O and no shared mutable state.
"""
