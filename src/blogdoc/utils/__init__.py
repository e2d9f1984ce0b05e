"""Utility helpers for blogdoc."""
