"""Utility helpers for pagescript."""
