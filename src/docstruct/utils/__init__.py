"""Utility helpers for docstruct."""
