"""Crosscutting: configuración, logging, métricas, errores HTTP y middleware."""
