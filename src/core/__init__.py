"""
Core domain models, parsers, and invariants.

This module contains the foundational building blocks that are independent
of external systems (UI, storage, command parsing).
"""
