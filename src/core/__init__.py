"""
Core vector primitives, domain types, and invariants.

This package contains the numeric utility layer: scalar float safeguards,
the Vector type and its structured precondition errors, and the elementary
vector operations built on top of them.
"""
