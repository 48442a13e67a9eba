"""Utility helpers for Chip CLI."""
