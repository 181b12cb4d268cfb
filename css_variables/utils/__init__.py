"""Utility helpers for CSS Variables."""
