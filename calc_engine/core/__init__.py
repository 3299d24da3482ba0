"""
Core domain models, numeric primitives, and contracts.

This module contains the foundational building blocks that are independent
of any input device or display.
"""
