"""Utility helpers for megu."""
