"""Interfaces de entrada del servicio."""
