"""Interfaces de entrada (API)."""
