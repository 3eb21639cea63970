"""
Core numeric text primitives, contracts, and logging setup.

This module contains the foundational building blocks that are independent
of any UI layer (reactive bindings, widgets, etc.).
"""
