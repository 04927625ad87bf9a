"""Infraestructura: adaptadores concretos (repositorios, procesamiento de texto)."""
