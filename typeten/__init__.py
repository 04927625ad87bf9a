"""Typeten: servicio de práctica de tipeo por fragmentos de texto."""

__version__ = "0.1.0"
