"""Utility helpers for enum_toggles."""
