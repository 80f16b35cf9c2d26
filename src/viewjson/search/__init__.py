"""Literal search over rendered node text."""
